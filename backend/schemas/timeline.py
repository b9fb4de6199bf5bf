import datetime as dt
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from schemas.goal import GoalIn


class ZoomLevel(str, Enum):
    ONE_YEAR = "1year"
    FIVE_YEARS = "5years"
    TEN_YEARS = "10years"
    ALL = "all"


class TimelineConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    zoom_level: ZoomLevel
    start_date: dt.date
    end_date: dt.date
    pixels_per_day: float = Field(..., gt=0)
    total_width: int = Field(..., ge=0)


class GoalPosition(BaseModel):
    model_config = ConfigDict(frozen=True)

    goal: GoalIn
    x_position: int  # may fall outside [0, total_width]
    is_visible: bool


class GoalCluster(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    goals: tuple[GoalIn, ...]
    x_position: float
    start_date: dt.date
    end_date: dt.date


class AxisMark(BaseModel):
    model_config = ConfigDict(frozen=True)

    date: dt.date
    x_position: int
    label: str
    is_year_start: bool
    is_major: bool


class GoalBar(BaseModel):
    model_config = ConfigDict(frozen=True)

    goal: GoalIn
    bar_start_x: int
    bar_width: float


class TimelineLayout(BaseModel):
    model_config = ConfigDict(frozen=True)

    config: TimelineConfig
    goal_positions: tuple[GoalPosition, ...]
    clusters: tuple[GoalCluster, ...]
    axis_marks: tuple[AxisMark, ...]
    today_position: int
    hidden_count: int
    bars: tuple[GoalBar, ...]


class ZoomLevelOption(BaseModel):
    level: ZoomLevel
    label: str
    months: int
