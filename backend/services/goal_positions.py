"""
Goal placement on a resolved timeline: one position per goal, plus Gantt bars.
Off-canvas goals are kept and flagged invisible.
"""
from collections.abc import Sequence

from schemas.goal import GoalIn
from schemas.timeline import GoalBar, GoalPosition, TimelineConfig
from services.timeline_scale import date_to_position, days_between

MIN_BAR_WIDTH_PX = 20.0


def calculate_goal_positions(
    goals: Sequence[GoalIn],
    config: TimelineConfig,
) -> list[GoalPosition]:
    """Position every goal by target date. Input order is preserved."""
    positions = []
    for goal in goals:
        x = date_to_position(goal.target_date, config)
        positions.append(
            GoalPosition(
                goal=goal,
                x_position=x,
                is_visible=0 <= x <= config.total_width,
            )
        )
    return positions


def calculate_goal_bars(
    goals: Sequence[GoalIn],
    config: TimelineConfig,
    today_position: int,
) -> list[GoalBar]:
    """Bars from today to each target date, earliest target first."""
    ordered = sorted(goals, key=lambda g: (g.target_date, g.id))
    return [
        GoalBar(
            goal=goal,
            bar_start_x=today_position,
            bar_width=max(
                days_between(config.start_date, goal.target_date) * config.pixels_per_day,
                MIN_BAR_WIDTH_PX,
            ),
        )
        for goal in ordered
    ]
