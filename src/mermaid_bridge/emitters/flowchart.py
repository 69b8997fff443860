"""Flowchart emitter."""

from __future__ import annotations

from collections.abc import Sequence

from mermaid_bridge.config import ConvertOptions
from mermaid_bridge.emitters.base import INDENT, Emission
from mermaid_bridge.model import Edge, FlowchartNode
from mermaid_bridge.types import NodeShape

SHAPE_BRACKETS: dict[NodeShape, tuple[str, str]] = {
    NodeShape.Rectangle: ("[", "]"),
    NodeShape.Circle: ("((", "))"),
    NodeShape.Diamond: ("{", "}"),
    NodeShape.Hexagon: ("{{", "}}"),
    NodeShape.Parallelogram: ("[/", "/]"),
    NodeShape.Triangle: ("[\\", "\\]"),
}

ARROW = "-->"
ANIMATED_ARROW = "-..->"


def node_line(node: FlowchartNode) -> str:
    open_, close = SHAPE_BRACKETS[node.shape or NodeShape.default()]
    return f"{INDENT}{node.id}{open_}{node.label}{close}"


def edge_line(edge: Edge) -> str:
    arrow = ANIMATED_ARROW if edge.animated else ARROW
    line = f"{INDENT}{edge.source}{arrow}{edge.target}"
    if edge.label:
        line += f"|{edge.label}|"
    return line


class FlowchartEmitter:
    """`flowchart <dir>` with bracket-encoded node shapes."""

    def emit(self, nodes: Sequence[FlowchartNode], edges: Sequence[Edge], options: ConvertOptions) -> Emission:
        lines = [f"flowchart {options.direction.value}"]
        lines.extend(node_line(n) for n in nodes)
        lines.extend(edge_line(e) for e in edges)
        return Emission(lines)
