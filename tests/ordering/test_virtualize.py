"""Tests for ordering.virtualize — dense task and group indices."""

from __future__ import annotations

import pytest

from taskorder.errors import MissingGroup, MissingTask
from taskorder.ordering.virtualize import (
    UNGROUPED,
    build_group_index,
    build_task_index,
    resolve_dependencies,
    resolve_group,
    virtualize,
)
from taskorder.schemas.task import Task

_TASKS = (
    Task("lint"),
    Task("compile", group="build", dependencies=["lint"]),
    Task("unit", group="test", dependencies=["compile"]),
    Task("link", group="build", dependencies=["compile"]),
    Task("ship", dependencies=["link", "unit"]),
)


class TestIndices:
    def test_task_index_follows_insertion_order(self):
        assert build_task_index(_TASKS) == {"lint": 0, "compile": 1, "unit": 2, "link": 3, "ship": 4}

    def test_group_index_follows_first_appearance(self):
        assert build_group_index(_TASKS) == {"build": 0, "test": 1}

    def test_group_index_ignores_dependency_structure(self):
        reordered = (_TASKS[2], _TASKS[1])
        assert build_group_index(reordered) == {"test": 0, "build": 1}


class TestResolve:
    def test_dependencies_become_indices(self):
        index = build_task_index(_TASKS)
        assert resolve_dependencies(_TASKS[4], index) == (3, 2)

    def test_missing_dependency(self):
        with pytest.raises(MissingTask) as info:
            resolve_dependencies(Task("deploy", dependencies=["ship", "approve"]), {"ship": 0})
        assert info.value.identity == "approve"
        assert info.value.dependent == "deploy"

    def test_none_label_is_ungrouped(self):
        assert resolve_group(None, {}) == UNGROUPED

    def test_known_label(self):
        assert resolve_group("test", {"build": 0, "test": 1}) == 1

    def test_label_missing_from_partial_index(self):
        with pytest.raises(MissingGroup) as info:
            resolve_group("test", {"build": 0})
        assert info.value.label == "test"


class TestVirtualize:
    def test_full_view(self):
        virtual = virtualize(_TASKS)
        assert virtual.task_ids == ("lint", "compile", "unit", "link", "ship")
        assert virtual.group_labels == ("build", "test")
        assert virtual.groups == (UNGROUPED, 0, 1, 0, UNGROUPED)
        assert virtual.dependencies == ((), (0,), (1,), (1,), (3, 2))
        assert virtual.group_count == 2

    def test_label_used_before_its_first_dependency_target_resolves(self):
        # The label index is complete before any task is resolved.
        tasks = [Task("a", group="late-label", dependencies=["b"]), Task("b", group="late-label")]
        assert virtualize(tasks).groups == (0, 0)

    def test_missing_dependency_raises(self):
        with pytest.raises(MissingTask, match="'x' depends on unknown task 'y'"):
            virtualize([Task("x", dependencies=["y"])])

    def test_empty(self):
        virtual = virtualize([])
        assert virtual.task_ids == ()
        assert virtual.group_count == 0
