"""
Two-level topological ordering over dense task indices.

``two_level_order`` runs Kahn's algorithm twice:

1. Item order.  Edges run from each dependency to its dependent.  The ready
   queue is FIFO and is seeded with every zero in-degree task in ascending
   index order, so among tasks with no unmet dependency the one registered
   first is placed first.

   The item order is then walked once.  A task with a declared group is
   appended to that group's bucket; an ungrouped task is given a fresh group
   index the moment it is reached (not in registration order) and becomes a
   singleton bucket.  Every bucket therefore lists its members in item order.

2. Group order.  Each item edge whose endpoints sit in different groups
   becomes a group edge; edges inside one group are dropped because phase 1
   already fixed the intra-group order.  The same Kahn procedure orders the
   groups, and the buckets are concatenated in that order.

A cycle among tasks, or among groups only (possible when cross-group edges
close a loop even though the task graph is acyclic), raises
:class:`~taskorder.errors.CycleDetected` carrying the dense indices that could
not be placed.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence

from taskorder.errors import CycleDetected
from taskorder.ordering.virtualize import UNGROUPED


def kahn_order(successors: Sequence[Sequence[int]], in_degree: Sequence[int]) -> list[int]:
    """Return the nodes of a graph in Kahn (FIFO) order.

    The result is shorter than the node count when the graph has a cycle;
    the nodes on or behind the cycle are left out.
    """
    remaining = list(in_degree)
    queue = deque(node for node, degree in enumerate(remaining) if degree == 0)
    order: list[int] = []

    while queue:
        node = queue.popleft()
        order.append(node)
        for succ in successors[node]:
            remaining[succ] -= 1
            if remaining[succ] == 0:
                queue.append(succ)

    return order


def _unplaced(order: Sequence[int], count: int) -> list[int]:
    placed = set(order)
    return [node for node in range(count) if node not in placed]


def two_level_order(
    groups: Sequence[int],
    group_count: int,
    dependencies: Sequence[Sequence[int]],
) -> list[int]:
    """Order tasks so dependencies come first and each group is contiguous.

    Parameters
    ----------
    groups:
        Per task, its declared group index or ``UNGROUPED``.
    group_count:
        Number of distinct declared groups; declared indices are
        ``0 .. group_count - 1``.
    dependencies:
        Per task, the indices of the tasks that must precede it.

    Returns
    -------
    list[int]
        A permutation of ``range(len(groups))``.

    Raises
    ------
    CycleDetected
        ``level="task"`` with the unplaced task indices, or ``level="group"``
        with the members of every unplaced group (bucket by bucket).
    """
    n = len(groups)

    # Phase 1: item order.
    successors: list[list[int]] = [[] for _ in range(n)]
    in_degree = [0] * n
    for item, deps in enumerate(dependencies):
        for dep in deps:
            successors[dep].append(item)
            in_degree[item] += 1

    item_order = kahn_order(successors, in_degree)
    if len(item_order) != n:
        raise CycleDetected("task", tuple(_unplaced(item_order, n)))

    assigned = list(groups)
    buckets: list[list[int]] = [[] for _ in range(group_count)]
    for item in item_order:
        if assigned[item] == UNGROUPED:
            assigned[item] = len(buckets)
            buckets.append([])
        buckets[assigned[item]].append(item)

    # Phase 2: group order.
    group_successors: list[list[int]] = [[] for _ in buckets]
    group_in_degree = [0] * len(buckets)
    for item, deps in enumerate(dependencies):
        for dep in deps:
            src, dst = assigned[dep], assigned[item]
            if src == dst:
                continue
            group_successors[src].append(dst)
            group_in_degree[dst] += 1

    group_order = kahn_order(group_successors, group_in_degree)
    if len(group_order) != len(buckets):
        stuck = _unplaced(group_order, len(buckets))
        raise CycleDetected("group", tuple(item for g in stuck for item in buckets[g]))

    return [item for g in group_order for item in buckets[g]]
