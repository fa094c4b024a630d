"""
taskorder — deterministic grouped topological ordering.

Typical use::

    from taskorder import Task, create

    registry = create()
    registry.add(Task("fetch")).add(Task("compile", group="build", dependencies=["fetch"]))
    order = registry.sort()
    groups = registry.sort_grouped()
"""

from taskorder.errors import (
    CycleDetected,
    CycleWarning,
    DuplicateTask,
    MissingGroup,
    MissingTask,
    OrderingError,
)
from taskorder.ordering import assemble_groups, flatten
from taskorder.registry import (
    TaskFileError,
    TaskRegistry,
    create,
    dump_order,
    load_registry,
    load_tasks,
)
from taskorder.schemas import Group, Task
from taskorder.writer import draw_mermaid

__all__ = [
    # Records
    "Task",
    "Group",
    # Registry
    "TaskRegistry",
    "create",
    "assemble_groups",
    "flatten",
    "draw_mermaid",
    # Task files
    "TaskFileError",
    "load_tasks",
    "load_registry",
    "dump_order",
    # Errors
    "OrderingError",
    "MissingTask",
    "MissingGroup",
    "DuplicateTask",
    "CycleDetected",
    "CycleWarning",
]
