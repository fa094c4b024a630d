"""ordering — virtualization, two-level topological engine, and group assembly."""

from taskorder.ordering.assembler import assemble_groups, flatten
from taskorder.ordering.engine import kahn_order, two_level_order
from taskorder.ordering.virtualize import (
    UNGROUPED,
    VirtualTasks,
    build_group_index,
    build_task_index,
    resolve_dependencies,
    resolve_group,
    virtualize,
)

__all__ = [
    "UNGROUPED",
    "VirtualTasks",
    "assemble_groups",
    "build_group_index",
    "build_task_index",
    "flatten",
    "kahn_order",
    "resolve_dependencies",
    "resolve_group",
    "two_level_order",
    "virtualize",
]
