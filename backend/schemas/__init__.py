from schemas.goal import Bucket, Currency, GoalIn
from schemas.timeline import (
    AxisMark,
    GoalBar,
    GoalCluster,
    GoalPosition,
    TimelineConfig,
    TimelineLayout,
    ZoomLevel,
    ZoomLevelOption,
)

__all__ = [
    "Bucket",
    "Currency",
    "GoalIn",
    "ZoomLevel",
    "TimelineConfig",
    "GoalPosition",
    "GoalCluster",
    "AxisMark",
    "GoalBar",
    "TimelineLayout",
    "ZoomLevelOption",
]
