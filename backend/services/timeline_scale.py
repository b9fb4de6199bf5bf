"""
Zoom-dependent coordinate system for the goal timeline.
Resolves the visible date range and pixel density, and maps dates to x positions.
Pure functions; no DB access.
"""
import math
from collections.abc import Sequence
from datetime import date, datetime, time

from schemas.goal import GoalIn
from schemas.timeline import TimelineConfig, ZoomLevel

# (years shown, pixels per day) for the fixed zoom levels
FIXED_ZOOM_SCALES: dict[ZoomLevel, tuple[int, float]] = {
    ZoomLevel.ONE_YEAR: (1, 3.0),
    ZoomLevel.FIVE_YEARS: (5, 1.0),
    ZoomLevel.TEN_YEARS: (10, 0.5),
}

TARGET_CANVAS_WIDTH = 2000
MIN_PIXELS_PER_DAY = 0.3
MIN_WINDOW_YEARS = 2
END_BUFFER_RATIO = 0.10
SECONDS_PER_DAY = 86400.0


def _round_half_up(value: float) -> int:
    """Halves round toward +inf, like JavaScript Math.round."""
    return math.floor(value + 0.5)


def _add_years(d: date, years: int) -> date:
    """Same month/day `years` later; Feb 29 falls back to Feb 28. Capped at date.max."""
    if d.year + years > date.max.year:
        return date.max
    try:
        return d.replace(year=d.year + years)
    except ValueError:
        return d.replace(year=d.year + years, day=28)


def _clamp_pixels_per_day(value: float) -> float:
    if not value > 0:
        return MIN_PIXELS_PER_DAY
    return value


def _fixed_config(zoom_level: ZoomLevel, today: date) -> TimelineConfig:
    years, pixels_per_day = FIXED_ZOOM_SCALES[zoom_level]
    end_date = _add_years(today, years)
    span_days = (end_date - today).days
    pixels_per_day = _clamp_pixels_per_day(pixels_per_day)
    return TimelineConfig(
        zoom_level=zoom_level,
        start_date=today,
        end_date=end_date,
        pixels_per_day=pixels_per_day,
        total_width=max(0, _round_half_up(span_days * pixels_per_day)),
    )


def _fit_all_config(goals: Sequence[GoalIn], today: date) -> TimelineConfig:
    """
    Dynamic 'all' window: furthest target date (at least today + 2 years)
    plus a 10% buffer, squeezed toward TARGET_CANVAS_WIDTH pixels.
    """
    furthest = _add_years(today, MIN_WINDOW_YEARS)
    for goal in goals:
        if goal.target_date > furthest:
            furthest = goal.target_date

    span_days = (furthest - today).days
    buffer_days = _round_half_up(span_days * END_BUFFER_RATIO)
    end_date = date.fromordinal(
        min(furthest.toordinal() + buffer_days, date.max.toordinal())
    )
    total_days = (end_date - today).days

    if total_days > 0:
        pixels_per_day = max(MIN_PIXELS_PER_DAY, TARGET_CANVAS_WIDTH / total_days)
    else:
        pixels_per_day = MIN_PIXELS_PER_DAY
    pixels_per_day = _clamp_pixels_per_day(pixels_per_day)

    return TimelineConfig(
        zoom_level=ZoomLevel.ALL,
        start_date=today,
        end_date=end_date,
        pixels_per_day=pixels_per_day,
        total_width=max(0, _round_half_up(total_days * pixels_per_day)),
    )


def resolve_timeline_config(
    zoom_level: ZoomLevel,
    goals: Sequence[GoalIn],
    today: date | None = None,
) -> TimelineConfig:
    """
    Return a fresh TimelineConfig for (zoom_level, goals), starting at today.
    Fixed levels ignore the goals; 'all' sizes the window to them.
    """
    if today is None:
        today = date.today()
    zoom_level = ZoomLevel(zoom_level)
    if zoom_level is ZoomLevel.ALL:
        return _fit_all_config(goals, today)
    return _fixed_config(zoom_level, today)


def days_between(start: date, value: date | datetime) -> float:
    """Days from start (midnight) to value; fractional for datetimes."""
    if isinstance(value, datetime):
        start_dt = datetime.combine(start, time.min, tzinfo=value.tzinfo)
        return (value - start_dt).total_seconds() / SECONDS_PER_DAY
    return float((value - start).days)


def date_to_position(value: date | datetime, config: TimelineConfig) -> int:
    """X position of value in pixels. Not clamped to the canvas."""
    return _round_half_up(days_between(config.start_date, value) * config.pixels_per_day)


def initial_scroll_offset(today_position: int, viewport_width: float) -> int:
    """Scroll offset that shows today near the left edge (15% of the viewport)."""
    return max(0, _round_half_up(today_position - viewport_width * 0.15))
