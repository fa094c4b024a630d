"""schemas — Task and Group record types."""

from taskorder.schemas.task import Group, Task

__all__ = ["Group", "Task"]
