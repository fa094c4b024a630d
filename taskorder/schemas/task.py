"""
Core record types for the task registry.

Task is the input record: an identity, an optional group label, and the
identities of the tasks that must precede it.  Group is an output record only;
it is built by the grouping assembler after a flat order exists and is never
constructed up front.

Identities and labels are opaque hashable values (strings, ints, enum members,
tuples ...).  Two tasks share a group iff their labels compare equal; a task
with no label is a singleton group of its own.
"""

from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass, field, replace


@dataclass(frozen=True)
class Task:
    """A unit of work with optional group membership and predecessor ids."""

    id: Hashable
    group: Hashable | None = None  # None = ungrouped (singleton group)
    dependencies: tuple[Hashable, ...] = field(default=())  # predecessors, not successors

    def __post_init__(self) -> None:
        if isinstance(self.dependencies, (str, bytes)):
            raise TypeError(
                f"dependencies of task {self.id!r} must be a sequence of ids, not a string"
            )
        # Accept lists at construction sites and promote to a tuple.
        if not isinstance(self.dependencies, tuple):
            object.__setattr__(self, "dependencies", tuple(self.dependencies))
        hash(self.id)
        if self.group is not None:
            hash(self.group)

    def with_group(self, group: Hashable | None) -> Task:
        """Return a copy of this task assigned to *group*."""
        return replace(self, group=group)

    def with_dependencies(self, *dependencies: Hashable) -> Task:
        """Return a copy of this task with *dependencies* replacing its own."""
        return replace(self, dependencies=tuple(dependencies))


@dataclass(frozen=True)
class Group:
    """A contiguous run of sorted tasks sharing one label.

    ``label`` is None for the singleton bucket of an ungrouped task.
    """

    label: Hashable | None
    tasks: tuple[Task, ...]

    @property
    def members(self) -> tuple[Hashable, ...]:
        """Identities of the tasks in this bucket, in sorted order."""
        return tuple(task.id for task in self.tasks)

    @property
    def is_ungrouped(self) -> bool:
        """True for the singleton bucket of a task that declared no group."""
        return self.label is None
