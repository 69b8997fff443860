"""Gantt chart emitter.

Tasks are grouped into sections by their dependency list joined verbatim
with commas, so ``[a, b]`` and ``[b, a]`` land in different sections.
Sections appear in the order their key is first seen.
"""

from __future__ import annotations

from collections.abc import Sequence

from mermaid_bridge.config import ConvertOptions
from mermaid_bridge.emitters.base import INDENT, Emission
from mermaid_bridge.model import Edge, GanttNode
from mermaid_bridge.types import GanttStatus

DATE_FORMAT = "YYYY-MM-DD"
TITLE = "Project Timeline"


def task_status(node: GanttNode) -> GanttStatus:
    if node.progress == 100:
        return GanttStatus.Done
    if node.progress > 0:
        return GanttStatus.Active
    return GanttStatus.Pending


def dependency_key(node: GanttNode) -> str:
    return ",".join(node.dependencies or [])


def group_by_dependencies(nodes: Sequence[GanttNode]) -> dict[str, list[GanttNode]]:
    groups: dict[str, list[GanttNode]] = {}
    for node in nodes:
        groups.setdefault(dependency_key(node), []).append(node)
    return groups


def task_line(node: GanttNode, deps: str) -> str:
    status = task_status(node).value
    if node.start_date and node.end_date:
        return f"{INDENT}{node.label}: {status}, {node.start_date}, {node.end_date}"
    return f"{INDENT}{node.label}: {status}, after {deps or 'start'}"


class GanttEmitter:
    """Edges are ignored; ordering comes from each task's dependencies."""

    def emit(self, nodes: Sequence[GanttNode], edges: Sequence[Edge], options: ConvertOptions) -> Emission:
        lines = [
            "gantt",
            f"{INDENT}dateFormat {DATE_FORMAT}",
            f"{INDENT}title {TITLE}",
            "",
        ]
        for deps, tasks in group_by_dependencies(nodes).items():
            lines.append(f"{INDENT}section After {deps}" if deps else f"{INDENT}section Start")
            lines.extend(task_line(task, deps) for task in tasks)
        return Emission(lines)
