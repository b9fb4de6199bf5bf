"""
Greedy chain clustering of visible goal markers.

Positions are sorted by x, then each goal is compared with the last goal added
to the open group: within `threshold` pixels it joins, otherwise the group is
closed and a new one starts. A long, evenly spaced chain can therefore span
more than `threshold` pixels end to end.
"""
from collections.abc import Sequence

from schemas.timeline import GoalCluster, GoalPosition

CLUSTER_THRESHOLD_PX = 40
CLUSTER_ID_PREFIX = "cluster"
CLUSTER_ID_SEPARATOR = "_"


def _sort_key(position: GoalPosition) -> tuple[int, object, str]:
    return (position.x_position, position.goal.target_date, position.goal.id)


def _make_cluster(group: list[GoalPosition]) -> GoalCluster:
    goals = tuple(p.goal for p in group)
    dates = [g.target_date for g in goals]
    member_ids = sorted(g.id for g in goals)
    return GoalCluster(
        id=CLUSTER_ID_SEPARATOR.join([CLUSTER_ID_PREFIX, *member_ids]),
        goals=goals,
        x_position=sum(p.x_position for p in group) / len(group),
        start_date=min(dates),
        end_date=max(dates),
    )


def cluster_goals(
    positions: Sequence[GoalPosition],
    threshold: float = CLUSTER_THRESHOLD_PX,
) -> list[GoalCluster]:
    """Partition the visible positions into clusters, left to right."""
    visible = sorted((p for p in positions if p.is_visible), key=_sort_key)
    if not visible:
        return []

    clusters: list[GoalCluster] = []
    group = [visible[0]]
    for current in visible[1:]:
        if current.x_position - group[-1].x_position <= threshold:
            group.append(current)
        else:
            clusters.append(_make_cluster(group))
            group = [current]
    clusters.append(_make_cluster(group))
    return clusters
