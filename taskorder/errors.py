"""
Error taxonomy for task ordering.

Every error raised by the library derives from :class:`OrderingError` and
carries structured attributes alongside its message, so callers can branch on
the failing identity rather than parsing text.

  MissingTask    — a dependency names a task that is not registered
  MissingGroup   — a group label is absent from the label index (not expected
                   to surface from TaskRegistry.sort(); see resolve_group)
  DuplicateTask  — a task id was added to a registry twice
  CycleDetected  — the task graph or the derived group graph is not a DAG

CycleWarning is the diagnostic emitted when a lenient sort returns an empty
result because of a cycle.
"""

from __future__ import annotations

from collections.abc import Hashable


class OrderingError(Exception):
    """Base class for all task ordering failures."""


class MissingTask(OrderingError):
    """Raised when a dependency identity does not resolve to a registered task.

    Attributes:
        identity: The unresolved dependency identity.
        dependent: The identity of the task that declared the dependency, or
            None when resolution happened outside a task context.
    """

    def __init__(self, identity: Hashable, dependent: Hashable | None = None) -> None:
        if dependent is None:
            message = f"unknown task {identity!r}"
        else:
            message = f"task {dependent!r} depends on unknown task {identity!r}"
        super().__init__(message)
        self.identity = identity
        self.dependent = dependent


class MissingGroup(OrderingError):
    """Raised when a group label is not present in the label index.

    Attributes:
        label: The unresolved group label.
    """

    def __init__(self, label: Hashable) -> None:
        super().__init__(f"unknown group {label!r}")
        self.label = label


class DuplicateTask(OrderingError):
    """Raised when a task id is registered more than once.

    Attributes:
        identity: The id that is already present in the registry.
    """

    def __init__(self, identity: Hashable) -> None:
        super().__init__(f"task {identity!r} is already registered")
        self.identity = identity


class CycleDetected(OrderingError):
    """Raised when no linear order exists.

    Attributes:
        level: ``"task"`` when the cycle runs through individual tasks,
            ``"group"`` when only the group-to-group graph is cyclic.
        members: Nodes Kahn's algorithm could not place.  Dense indices when
            raised by the engine; task identities once re-raised by the
            registry.
    """

    def __init__(self, level: str, members: tuple) -> None:
        super().__init__(
            f"dependency cycle at {level} level among: "
            + ", ".join(repr(m) for m in members)
        )
        self.level = level
        self.members = members


class CycleWarning(UserWarning):
    """Emitted when a lenient sort returns an empty order because of a cycle."""
