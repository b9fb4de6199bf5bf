"""
Timeline layout composition.

Invariants:
- Every goal gets a position; invisible ones are counted, never clustered.
- Clusters cover exactly the visible goals.
- Identical inputs give identical layouts (no hidden state between calls).
"""

from __future__ import annotations

from datetime import date

from schemas.timeline import ZoomLevel
from services.timeline import build_timeline_layout, list_zoom_levels
from services.timeline_scale import MIN_PIXELS_PER_DAY


def test_layout_for_mixed_goals(today: date, goal_in) -> None:
    goals = [
        goal_in("laptop", 130),
        goal_in("emergency", 120),
        goal_in("overdue", -30),
        goal_in("house", 365 * 4),
        goal_in("health", 300),
    ]

    layout = build_timeline_layout(goals, ZoomLevel.ONE_YEAR, today=today)

    assert [p.goal.id for p in layout.goal_positions] == [g.id for g in goals]
    visible = {p.goal.id for p in layout.goal_positions if p.is_visible}
    assert visible == {"laptop", "emergency", "health"}
    assert layout.hidden_count == 2

    assert [c.id for c in layout.clusters] == [
        "cluster_emergency_laptop",
        "cluster_health",
    ]
    assert layout.clusters[0].x_position == 375
    assert {g.id for c in layout.clusters for g in c.goals} == visible
    assert layout.today_position == 0
    assert layout.config.total_width == 1095


def test_overdue_goal_has_negative_position(today: date, goal_in) -> None:
    layout = build_timeline_layout([goal_in("late", -10)], ZoomLevel.ONE_YEAR, today=today)

    (position,) = layout.goal_positions
    assert position.x_position == -30
    assert not position.is_visible
    assert layout.clusters == ()


def test_empty_goal_list_under_all_zoom(today: date) -> None:
    layout = build_timeline_layout([], ZoomLevel.ALL, today=today)

    assert layout.goal_positions == ()
    assert layout.clusters == ()
    assert layout.bars == ()
    assert layout.hidden_count == 0
    assert layout.config.end_date == date(2028, 3, 14)
    assert layout.config.pixels_per_day >= MIN_PIXELS_PER_DAY
    assert layout.axis_marks


def test_all_zoom_shows_every_future_goal(today: date, goal_in) -> None:
    goals = [goal_in("soon", 10), goal_in("later", 365 * 30)]

    layout = build_timeline_layout(goals, ZoomLevel.ALL, today=today)

    assert all(p.is_visible for p in layout.goal_positions)
    assert layout.hidden_count == 0


def test_threshold_is_forwarded(today: date, goal_in) -> None:
    goals = [goal_in("a", 10), goal_in("b", 20)]  # 30 px apart at 1year

    assert len(build_timeline_layout(goals, ZoomLevel.ONE_YEAR, today=today).clusters) == 1
    assert (
        len(build_timeline_layout(goals, ZoomLevel.ONE_YEAR, today=today, threshold=10).clusters)
        == 2
    )


def test_bars_run_from_today_in_target_order(today: date, goal_in) -> None:
    goals = [goal_in("b", 200), goal_in("past", -50), goal_in("a", 100)]

    layout = build_timeline_layout(goals, ZoomLevel.ONE_YEAR, today=today)

    assert [bar.goal.id for bar in layout.bars] == ["past", "a", "b"]
    assert all(bar.bar_start_x == layout.today_position for bar in layout.bars)
    assert [bar.bar_width for bar in layout.bars] == [20.0, 300.0, 600.0]


def test_layout_is_recomputed_identically(today: date, goal_in) -> None:
    goals = [goal_in("a", 10), goal_in("b", 400), goal_in("c", 2000)]

    first = build_timeline_layout(goals, ZoomLevel.FIVE_YEARS, today=today)
    second = build_timeline_layout(list(reversed(goals)), ZoomLevel.FIVE_YEARS, today=today)

    assert first.config == second.config
    assert first.clusters == second.clusters
    assert first.axis_marks == second.axis_marks


def test_zoom_levels_in_display_order() -> None:
    options = list_zoom_levels()

    assert [o.level for o in options] == [
        ZoomLevel.ALL,
        ZoomLevel.ONE_YEAR,
        ZoomLevel.FIVE_YEARS,
        ZoomLevel.TEN_YEARS,
    ]
    assert [o.label for o in options] == ["All", "1 Year", "5 Years", "10+ Years"]
    assert [o.months for o in options] == [0, 12, 60, 120]


def test_far_future_goal_under_all_zoom(today: date, goal_on) -> None:
    layout = build_timeline_layout([goal_on("far", date(9500, 1, 1))], ZoomLevel.ALL, today=today)

    (position,) = layout.goal_positions
    assert position.is_visible
    assert layout.config.end_date == date.max
    assert [c.id for c in layout.clusters] == ["cluster_far"]
    assert layout.axis_marks[-1].date <= date.max
