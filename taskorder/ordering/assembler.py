"""
Partition a finished flat order into group buckets.

Buckets are opened in order of first occurrence of each label in the flat
order.  This matches the engine's group order but is computed independently
from the task records alone.  Ungrouped tasks always get a bucket of their own.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Sequence

from taskorder.schemas.task import Group, Task


def assemble_groups(ordered: Sequence[Task]) -> list[Group]:
    """Group consecutive runs of *ordered* by label, in one forward scan."""
    buckets: list[tuple[Hashable | None, list[Task]]] = []
    open_buckets: dict[Hashable, int] = {}

    for task in ordered:
        if task.group is None:
            buckets.append((None, [task]))
            continue
        position = open_buckets.get(task.group)
        if position is None:
            open_buckets[task.group] = len(buckets)
            buckets.append((task.group, [task]))
        else:
            buckets[position][1].append(task)

    return [Group(label=label, tasks=tuple(tasks)) for label, tasks in buckets]


def flatten(groups: Iterable[Group]) -> list[Task]:
    """Concatenate bucket members in bucket order."""
    return [task for group in groups for task in group.tasks]
