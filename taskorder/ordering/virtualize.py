"""
Identity virtualization: opaque task ids and group labels → dense indices.

``virtualize`` turns the registry's task list into the integer arrays the
topological engine works on:

- task index:  task id → position in registry insertion order
- group index: label   → order of first appearance while scanning the registry
- per task:    dependency ids rewritten as task indices, and the label
               rewritten as a group index or ``UNGROUPED``

Both indices are built completely before any task is resolved, so every
declared label is always found and ``MissingGroup`` cannot surface from
``virtualize``.  ``resolve_group`` still raises it for callers that resolve
against an index of their own.

Index assignment depends only on insertion order and first-seen label order,
never on the dependency structure.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Mapping, Sequence
from dataclasses import dataclass

from taskorder.errors import MissingGroup, MissingTask
from taskorder.schemas.task import Task

UNGROUPED = -1


@dataclass(frozen=True)
class VirtualTasks:
    """Dense-index view of a task list, sized to the task count."""

    task_ids: tuple[Hashable, ...]  # dense task index → identity
    group_labels: tuple[Hashable, ...]  # dense group index → label
    groups: tuple[int, ...]  # per task: group index or UNGROUPED
    dependencies: tuple[tuple[int, ...], ...]  # per task: predecessor indices

    @property
    def group_count(self) -> int:
        """Number of distinct declared labels (ungrouped tasks excluded)."""
        return len(self.group_labels)


def build_task_index(tasks: Sequence[Task]) -> dict[Hashable, int]:
    """Map each task id to its registry insertion position."""
    return {task.id: i for i, task in enumerate(tasks)}


def build_group_index(tasks: Sequence[Task]) -> dict[Hashable, int]:
    """Map each distinct declared label to its first-seen position."""
    index: dict[Hashable, int] = {}
    for task in tasks:
        if task.group is not None and task.group not in index:
            index[task.group] = len(index)
    return index


def resolve_dependencies(
    task: Task,
    task_index: Mapping[Hashable, int],
) -> tuple[int, ...]:
    """Rewrite *task*'s dependency ids as dense task indices.

    Raises
    ------
    MissingTask
        On the first dependency id absent from *task_index*.
    """
    resolved: list[int] = []
    for dep in task.dependencies:
        if dep not in task_index:
            raise MissingTask(dep, dependent=task.id)
        resolved.append(task_index[dep])
    return tuple(resolved)


def resolve_group(label: Hashable | None, group_index: Mapping[Hashable, int]) -> int:
    """Return the dense index of *label*, or ``UNGROUPED`` for None.

    Raises
    ------
    MissingGroup
        If *label* is not None and absent from *group_index*.
    """
    if label is None:
        return UNGROUPED
    if label not in group_index:
        raise MissingGroup(label)
    return group_index[label]


def virtualize(tasks: Iterable[Task]) -> VirtualTasks:
    """Build the dense-index view of *tasks* (in the order given).

    Raises
    ------
    MissingTask
        If any task depends on an id that is not among *tasks*.
    """
    tasks = tuple(tasks)
    task_index = build_task_index(tasks)
    group_index = build_group_index(tasks)

    groups: list[int] = []
    dependencies: list[tuple[int, ...]] = []
    for task in tasks:
        dependencies.append(resolve_dependencies(task, task_index))
        groups.append(resolve_group(task.group, group_index))

    return VirtualTasks(
        task_ids=tuple(task.id for task in tasks),
        group_labels=tuple(group_index),
        groups=tuple(groups),
        dependencies=tuple(dependencies),
    )
