"""
TaskRegistry: an append-only, insertion-ordered collection of tasks.

Tasks are added and never removed or mutated.  Every call to ``sort()``
re-virtualizes the current contents from scratch; nothing is cached between
calls, so repeated sorts of an unchanged registry return identical results.

Cycle handling
--------------
By default a cyclic registry sorts to an empty list, the same result as an
empty registry, and a :class:`~taskorder.errors.CycleWarning` names the
tasks that could not be placed.  Pass ``strict=True`` to get a
:class:`~taskorder.errors.CycleDetected` exception instead.
"""

from __future__ import annotations

import warnings
from collections.abc import Hashable, Iterable, Iterator

from taskorder.errors import CycleDetected, CycleWarning, DuplicateTask
from taskorder.ordering.assembler import assemble_groups
from taskorder.ordering.engine import two_level_order
from taskorder.ordering.virtualize import virtualize
from taskorder.schemas.task import Group, Task
from taskorder.writer.mermaid import draw_mermaid


class TaskRegistry:
    """Insertion-ordered task collection with grouped topological sorting."""

    def __init__(self, tasks: Iterable[Task] = ()) -> None:
        self._tasks: list[Task] = []
        self._ids: set[Hashable] = set()
        self.extend(tasks)

    # ── Accumulation ───────────────────────────────────────────────────────────

    def add(self, task: Task) -> TaskRegistry:
        """Append *task* and return the registry for chaining.

        Raises
        ------
        DuplicateTask
            If a task with the same id is already registered.  The registry
            is left unchanged.
        """
        if task.id in self._ids:
            raise DuplicateTask(task.id)
        self._ids.add(task.id)
        self._tasks.append(task)
        return self

    def extend(self, tasks: Iterable[Task]) -> TaskRegistry:
        """Append every task in *tasks*, in order."""
        for task in tasks:
            self.add(task)
        return self

    @property
    def tasks(self) -> tuple[Task, ...]:
        return tuple(self._tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(tuple(self._tasks))

    def __contains__(self, identity: object) -> bool:
        return identity in self._ids

    def __repr__(self) -> str:
        return f"TaskRegistry({len(self._tasks)} tasks)"

    # ── Sorting ────────────────────────────────────────────────────────────────

    def sort(self, strict: bool = False) -> list[Task]:
        """Return the tasks in dependency order with each group contiguous.

        Among tasks that are ready at the same time, the one added first is
        placed first.

        Parameters
        ----------
        strict:
            When True, a cycle raises :class:`CycleDetected`.  When False
            (default) a cycle returns ``[]`` and emits a :class:`CycleWarning`.

        Raises
        ------
        MissingTask
            If any task depends on an id that is not registered.
        CycleDetected
            Only when *strict* is True.
        """
        return self._sort(strict, stacklevel=3)

    def sort_grouped(self, strict: bool = False) -> list[Group]:
        """Return ``sort()`` partitioned into contiguous group buckets.

        Raises the same errors as :meth:`sort`.
        """
        return assemble_groups(self._sort(strict, stacklevel=3))

    def _sort(self, strict: bool, stacklevel: int) -> list[Task]:
        virtual = virtualize(self._tasks)
        try:
            order = two_level_order(virtual.groups, virtual.group_count, virtual.dependencies)
        except CycleDetected as exc:
            members = tuple(virtual.task_ids[i] for i in exc.members)
            if strict:
                raise CycleDetected(exc.level, members) from exc
            warnings.warn(
                f"dependency cycle at {exc.level} level among {list(members)!r}; "
                "returning an empty order",
                CycleWarning,
                stacklevel=stacklevel,
            )
            return []
        return [self._tasks[i] for i in order]

    # ── Visualization ──────────────────────────────────────────────────────────

    def draw_mermaid(self) -> str:
        """Return a Mermaid flowchart of the registered tasks and dependencies."""
        return draw_mermaid(self._tasks)


def create() -> TaskRegistry:
    """Return a new empty registry."""
    return TaskRegistry()
