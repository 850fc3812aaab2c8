from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Dict, Iterable, List, Sequence

from .overlap import overlaps

if TYPE_CHECKING:
    from ..domain import Activity

logger = logging.getLogger(__name__)


class PackingOrder(str, Enum):
    INPUT = "input"
    START = "start"


class ColumnScope(str, Enum):
    DAY = "day"
    CLUSTER = "cluster"


@dataclass(frozen=True, slots=True)
class ColumnSlot:
    column: int
    total_columns: int


def packing_order(activities: Iterable["Activity"], policy: PackingOrder = PackingOrder.INPUT) -> List["Activity"]:
    """Return ``activities`` in the order the packer should see them."""

    ordered = list(activities)
    if PackingOrder(policy) is PackingOrder.START:
        ordered.sort(key=lambda item: (item.start_minutes, item.end_minutes, item.title, item.id))
    return ordered


def _first_fit(activities: Sequence["Activity"]) -> List[List["Activity"]]:
    columns: List[List["Activity"]] = []
    for activity in activities:
        for column in columns:
            if not any(overlaps(placed, activity) for placed in column):
                column.append(activity)
                break
        else:
            columns.append([activity])
    return columns


def pack_columns(activities: Sequence["Activity"]) -> Dict[str, ColumnSlot]:
    """Greedy first-fit column assignment for one day bucket.

    The caller's order is used as is. Every activity reports the number of
    columns opened for the whole day, so an activity that overlaps nothing is
    still narrowed when another pair on the same day overlaps.
    """

    columns = _first_fit(activities)
    total = len(columns)
    slots: Dict[str, ColumnSlot] = {}
    for index, column in enumerate(columns):
        for activity in column:
            slots[activity.id] = ColumnSlot(column=index, total_columns=total)
    logger.debug("Packed %d activities into %d columns", len(activities), total)
    return slots


def overlap_clusters(activities: Sequence["Activity"]) -> List[List["Activity"]]:
    """Connected components of the overlap graph, each in input order."""

    remaining = list(range(len(activities)))
    clusters: List[List["Activity"]] = []
    while remaining:
        component = {remaining.pop(0)}
        frontier = list(component)
        while frontier:
            current = activities[frontier.pop()]
            linked = [index for index in remaining if overlaps(current, activities[index])]
            for index in linked:
                remaining.remove(index)
                component.add(index)
                frontier.append(index)
        clusters.append([activities[index] for index in sorted(component)])
    return clusters


def pack_columns_by_cluster(activities: Sequence["Activity"]) -> Dict[str, ColumnSlot]:
    """Like :func:`pack_columns` but counts columns per overlap cluster."""

    slots: Dict[str, ColumnSlot] = {}
    for cluster in overlap_clusters(activities):
        slots.update(pack_columns(cluster))
    return slots


def assign_columns(
    activities: Sequence["Activity"],
    *,
    scope: ColumnScope = ColumnScope.DAY,
) -> Dict[str, ColumnSlot]:
    if ColumnScope(scope) is ColumnScope.CLUSTER:
        return pack_columns_by_cluster(activities)
    return pack_columns(activities)


__all__ = [
    "ColumnScope",
    "ColumnSlot",
    "PackingOrder",
    "assign_columns",
    "overlap_clusters",
    "pack_columns",
    "pack_columns_by_cluster",
    "packing_order",
]
