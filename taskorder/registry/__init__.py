"""registry — task accumulation, sorting entry points, and task files."""

from taskorder.registry.loader import (
    TaskFileError,
    dump_order,
    load_registry,
    load_tasks,
    tasks_from_dict,
)
from taskorder.registry.registry import TaskRegistry, create

__all__ = [
    "TaskFileError",
    "TaskRegistry",
    "create",
    "dump_order",
    "load_registry",
    "load_tasks",
    "tasks_from_dict",
]
