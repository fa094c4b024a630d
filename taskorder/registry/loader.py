"""
Task files: load tasks from YAML and write sorted orders back out.

File format::

    tasks:
      - id: fetch
      - id: compile
        group: build
        depends_on: [fetch]
      - id: link
        group: build
        depends_on: [compile]

``group`` is optional (missing or null = ungrouped) and ``depends_on``
defaults to an empty list.  Ids and labels may be any YAML scalar.

Structural problems are collected across the whole file and reported in a
single :class:`TaskFileError`.  Whether dependencies resolve, and whether ids
are unique, is not checked here: those surface from the registry
(``DuplicateTask``) and from sorting (``MissingTask``).
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import Any

import yaml

from taskorder.registry.registry import TaskRegistry
from taskorder.schemas.task import Task

_KNOWN_KEYS = frozenset({"id", "group", "depends_on"})


class TaskFileError(ValueError):
    """Raised when a task file does not match the expected structure.

    Attributes:
        problems: One message per problem found.
    """

    def __init__(self, problems: list[str]) -> None:
        super().__init__(
            "Task file validation failed:\n" + "\n".join(f"  • {p}" for p in problems)
        )
        self.problems = problems


def _is_scalar(value: Any) -> bool:
    return not isinstance(value, (list, dict))


def tasks_from_dict(data: Any) -> list[Task]:
    """Build tasks from an already-parsed task file document.

    Raises
    ------
    TaskFileError
        Listing every structural problem found.
    """
    if not isinstance(data, dict) or not isinstance(data.get("tasks"), list):
        raise TaskFileError(["top level must be a mapping with a 'tasks' list"])

    problems: list[str] = []
    tasks: list[Task] = []

    for position, entry in enumerate(data["tasks"]):
        where = f"tasks[{position}]"
        if not isinstance(entry, dict):
            problems.append(f"{where} must be a mapping, got {type(entry).__name__}")
            continue

        unknown = sorted(str(k) for k in entry if k not in _KNOWN_KEYS)
        if unknown:
            problems.append(f"{where} has unknown keys: {', '.join(unknown)}")

        identity = entry.get("id")
        if identity is None:
            problems.append(f"{where} is missing 'id'")
        elif not _is_scalar(identity):
            problems.append(f"{where} 'id' must be a scalar")

        group = entry.get("group")
        if group is not None and not _is_scalar(group):
            problems.append(f"{where} 'group' must be a scalar or null")

        depends_on = entry.get("depends_on")
        if depends_on is None:
            depends_on = []
        if not isinstance(depends_on, list):
            problems.append(f"{where} 'depends_on' must be a list")
            depends_on = []
        elif not all(_is_scalar(dep) for dep in depends_on):
            problems.append(f"{where} 'depends_on' entries must be scalars")
            depends_on = []

        if identity is not None and _is_scalar(identity) and (group is None or _is_scalar(group)):
            tasks.append(Task(id=identity, group=group, dependencies=tuple(depends_on)))

    if problems:
        raise TaskFileError(problems)
    return tasks


def load_tasks(path: str | Path) -> list[Task]:
    """Read and validate the task file at *path*.

    Raises
    ------
    TaskFileError
        If the file cannot be read, is not valid YAML, or fails validation.
    """
    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as exc:
        raise TaskFileError([f"failed to parse {path}: {exc}"]) from exc
    return tasks_from_dict(data)


def load_registry(path: str | Path) -> TaskRegistry:
    """Return a registry holding the tasks of the file at *path*, in file order."""
    return TaskRegistry(load_tasks(path))


def dump_order(tasks: Iterable[Task]) -> str:
    """Serialise *tasks* (typically a sorted order) in the task file format."""
    entries: list[dict[str, Any]] = []
    for task in tasks:
        entry: dict[str, Any] = {"id": task.id}
        if task.group is not None:
            entry["group"] = task.group
        if task.dependencies:
            entry["depends_on"] = list(task.dependencies)
        entries.append(entry)
    return yaml.safe_dump({"tasks": entries}, sort_keys=False)
