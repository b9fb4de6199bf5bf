"""
Goal timeline layout: resolves the zoom window, positions and clusters goals,
and builds axis marks. Recomputed in full on every call; nothing is cached here.
"""
import logging
from collections.abc import Sequence
from datetime import date

from schemas.goal import GoalIn
from schemas.timeline import TimelineLayout, ZoomLevel, ZoomLevelOption
from services.axis_marks import generate_axis_marks
from services.clustering import CLUSTER_THRESHOLD_PX, cluster_goals
from services.goal_positions import calculate_goal_bars, calculate_goal_positions
from services.timeline_scale import date_to_position, resolve_timeline_config

LOGGER = logging.getLogger(__name__)

# Display order and labels for zoom controls
ZOOM_LEVEL_OPTIONS = (
    (ZoomLevel.ALL, "All", 0),
    (ZoomLevel.ONE_YEAR, "1 Year", 12),
    (ZoomLevel.FIVE_YEARS, "5 Years", 60),
    (ZoomLevel.TEN_YEARS, "10+ Years", 120),
)


def build_timeline_layout(
    goals: Sequence[GoalIn],
    zoom_level: ZoomLevel,
    today: date | None = None,
    threshold: float = CLUSTER_THRESHOLD_PX,
) -> TimelineLayout:
    """
    Compose config, goal positions, clusters of visible goals, axis marks and
    today's position into one layout for the renderer.
    """
    if today is None:
        today = date.today()

    config = resolve_timeline_config(zoom_level, goals, today=today)
    positions = calculate_goal_positions(goals, config)
    visible = [p for p in positions if p.is_visible]
    clusters = cluster_goals(visible, threshold=threshold)
    marks = generate_axis_marks(config)
    today_position = date_to_position(today, config)
    bars = calculate_goal_bars(goals, config, today_position)

    hidden_count = len(positions) - len(visible)
    LOGGER.debug(
        "timeline layout zoom=%s goals=%d clusters=%d hidden=%d width=%d",
        config.zoom_level.value,
        len(positions),
        len(clusters),
        hidden_count,
        config.total_width,
    )

    return TimelineLayout(
        config=config,
        goal_positions=tuple(positions),
        clusters=tuple(clusters),
        axis_marks=tuple(marks),
        today_position=today_position,
        hidden_count=hidden_count,
        bars=tuple(bars),
    )


def list_zoom_levels() -> list[ZoomLevelOption]:
    return [
        ZoomLevelOption(level=level, label=label, months=months)
        for level, label, months in ZOOM_LEVEL_OPTIONS
    ]
