"""
Calendar tick marks for the timeline axis.
One candidate per month boundary after the start date; January marks carry the
year and are major. Wide zooms keep only January and July.
"""
from datetime import date

from schemas.timeline import AxisMark, TimelineConfig, ZoomLevel
from services.timeline_scale import date_to_position

MONTH_LABELS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)
MONTHLY_ZOOMS = frozenset({ZoomLevel.ONE_YEAR, ZoomLevel.FIVE_YEARS})
SPARSE_MONTHS = frozenset({1, 7})


def _next_month(d: date) -> date | None:
    """First day of the following month; None past date.max."""
    if d.month == 12:
        if d.year == date.max.year:
            return None
        return date(d.year + 1, 1, 1)
    return date(d.year, d.month + 1, 1)


def _keeps_month(zoom_level: ZoomLevel, month: int) -> bool:
    return zoom_level in MONTHLY_ZOOMS or month in SPARSE_MONTHS


def generate_axis_marks(config: TimelineConfig) -> list[AxisMark]:
    marks: list[AxisMark] = []
    current = _next_month(config.start_date)
    while current is not None and current <= config.end_date:
        if _keeps_month(config.zoom_level, current.month):
            is_year_start = current.month == 1
            label = str(current.year) if is_year_start else MONTH_LABELS[current.month - 1]
            marks.append(
                AxisMark(
                    date=current,
                    x_position=date_to_position(current, config),
                    label=label,
                    is_year_start=is_year_start,
                    is_major=is_year_start,
                )
            )
        current = _next_month(current)
    return marks
