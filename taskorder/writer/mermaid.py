"""
Mermaid flowchart rendering for a task list.

Pure read-only view: draws every task as a node, one subgraph per declared
group, and one edge per dependency.  Subgraphs are ordered by the text of
their label, so mixed label types (e.g. 7 and "build") still render.  Nothing
is sorted topologically or validated, so a registry with missing dependencies
or cycles still renders.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterable

from taskorder.schemas.task import Task


def _node(identity: Hashable) -> str:
    return f"t{identity}"


def draw_mermaid(tasks: Iterable[Task]) -> str:
    """Render *tasks* as a ``flowchart TB`` Mermaid diagram.

    Example output::

        flowchart TB
            t0["Task 0"]
            t1["Task 1"]
            subgraph A
                t0 --> t1
            end
    """
    tasks = list(tasks)
    lines = ["flowchart TB"]

    for task in tasks:
        lines.append(f'    {_node(task.id)}["Task {task.id}"]')

    grouped: dict[Hashable, list[Task]] = {}
    for task in tasks:
        if task.group is not None:
            grouped.setdefault(task.group, []).append(task)

    for label in sorted(grouped, key=str):
        lines.append(f"    subgraph {label}")
        for task in grouped[label]:
            for dep in task.dependencies:
                lines.append(f"        {_node(dep)} --> {_node(task.id)}")
        lines.append("    end")

    for task in tasks:
        if task.group is None:
            for dep in task.dependencies:
                lines.append(f"    {_node(dep)} --> {_node(task.id)}")

    return "\n".join(lines) + "\n"
