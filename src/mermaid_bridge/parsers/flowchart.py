"""Flowchart parser — line-oriented pattern matching.

Each line after the header is either a node declaration
(``id`` + bracket-encoded shape) or an edge (``a-->b|label|``). Inline
shapes inside edge statements and subgraphs are not recognised.
"""

from __future__ import annotations

import re

from mermaid_bridge.layout import node_position
from mermaid_bridge.model import Edge, FlowchartNode, Marker, ParsedDiagram
from mermaid_bridge.types import DiagramKind, MarkerType, NodeShape

# ─── Tokens ──────────────────────────────────────────────────────────────────

_NODE_RE = re.compile(r"^(?P<id>\w+)\s*(?P<body>[\[({].*[\])}])\s*;?$")

# Longer/more specific arrows first.
_ARROWS: list[str] = ["-..->", "-.->", "--->", "-->", "--x", "==>"]

_EDGE_RE = re.compile(
    r"^(?P<source>\w+)\s*"
    r"(?P<arrow>" + "|".join(re.escape(a) for a in _ARROWS) + r")\s*"
    r"(?:\|(?P<pre>[^|]*)\|)?\s*"
    r"(?P<target>\w+)\s*"
    r"(?:\|(?P<post>[^|]*)\|)?\s*;?$"
)

# Inverse of the emitter's bracket table, longest opening token first.
# Bodies matching none of these pairs read as rectangles.
_SHAPES: list[tuple[str, str, NodeShape]] = [
    ("((", "))", NodeShape.Circle),
    ("{{", "}}", NodeShape.Hexagon),
    ("[/", "/]", NodeShape.Parallelogram),
    ("[\\", "\\]", NodeShape.Triangle),
    ("{", "}", NodeShape.Diamond),
    ("[", "]", NodeShape.Rectangle),
    ("(", ")", NodeShape.Rectangle),
]


def _is_comment(line: str) -> bool:
    return line.startswith("%%")


def _parse_edge(line: str) -> Edge | None:
    m = _EDGE_RE.match(line)
    if m is None:
        return None
    source, target, arrow = m.group("source"), m.group("target"), m.group("arrow")
    label = (m.group("pre") or m.group("post") or "").strip()
    return Edge(
        id=f"{source}-{target}",
        source=source,
        target=target,
        label=label or None,
        animated=arrow.startswith("-."),
        marker_end=Marker.of(MarkerType.ArrowClosed),
    )


def _split_shape(body: str) -> tuple[NodeShape, str]:
    """Split ``((label))``-style text into its shape and label.

    Labels may themselves contain brackets: only the outermost pair counts.
    """
    for open_, close, shape in _SHAPES:
        if len(body) >= len(open_) + len(close) and body.startswith(open_) and body.endswith(close):
            return shape, body[len(open_) : len(body) - len(close)].strip()
    return NodeShape.Rectangle, body[1:-1].strip()


def _parse_node(line: str, index: int, total: int) -> FlowchartNode | None:
    m = _NODE_RE.match(line)
    if m is None:
        return None
    shape, label = _split_shape(m.group("body"))
    return FlowchartNode(
        id=m.group("id"),
        label=label,
        shape=shape,
        position=node_position(index, total, DiagramKind.Flowchart),
    )


class FlowchartParser:
    """Flowchart/graph markup parser."""

    def parse(self, lines: list[str]) -> ParsedDiagram:
        nodes: list[FlowchartNode] = []
        edges: list[Edge] = []
        seen: set[str] = set()
        for line in lines[1:]:
            if _is_comment(line):
                continue
            edge = _parse_edge(line)
            if edge is not None:
                edges.append(edge)
                continue
            node = _parse_node(line, len(nodes), len(lines))
            # First definition wins.
            if node is not None and node.id not in seen:
                seen.add(node.id)
                nodes.append(node)
        return ParsedDiagram(nodes=nodes, edges=edges)
