"""Tests for schemas.task — Task and Group records."""

import pytest

from taskorder.schemas.task import Group, Task


class TestTask:
    def test_defaults(self):
        task = Task("a")
        assert task.group is None
        assert task.dependencies == ()

    def test_list_dependencies_promoted_to_tuple(self):
        assert Task("a", dependencies=["b", "c"]).dependencies == ("b", "c")

    def test_is_frozen(self):
        task = Task("a")
        with pytest.raises(AttributeError):
            task.id = "b"  # type: ignore[misc]

    def test_with_group_returns_copy(self):
        task = Task("a", dependencies=["b"])
        grouped = task.with_group("G")
        assert grouped == Task("a", group="G", dependencies=("b",))
        assert task.group is None

    def test_with_dependencies_replaces(self):
        assert Task("a", dependencies=["x"]).with_dependencies("y", "z").dependencies == ("y", "z")

    @pytest.mark.parametrize("dependencies", ["bc", b"bc"])
    def test_string_dependencies_rejected(self, dependencies):
        with pytest.raises(TypeError, match="not a string"):
            Task("a", dependencies=dependencies)

    def test_unhashable_id_rejected(self):
        with pytest.raises(TypeError):
            Task(["not", "hashable"])

    def test_unhashable_group_rejected(self):
        with pytest.raises(TypeError):
            Task("a", group={"k": "v"})


class TestGroup:
    def test_members_are_ids(self):
        group = Group("G", (Task(1, group="G"), Task(2, group="G")))
        assert group.members == (1, 2)
        assert not group.is_ungrouped

    def test_ungrouped_bucket(self):
        assert Group(None, (Task(1),)).is_ungrouped
