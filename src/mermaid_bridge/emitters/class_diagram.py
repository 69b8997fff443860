"""Class diagram emitter.

Member strings are written verbatim; visibility sigils (``+``, ``-``...)
are the editor's responsibility. Relationship kind is read from the edge's
end marker.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from mermaid_bridge.config import ConvertOptions
from mermaid_bridge.emitters.base import INDENT, Emission
from mermaid_bridge.ir.graph import DiagramGraph
from mermaid_bridge.model import ClassNode, Edge
from mermaid_bridge.types import MarkerType, RelationKind

logger = logging.getLogger(__name__)

RELATION_ARROWS: dict[RelationKind, str] = {
    RelationKind.Inheritance: "--|>",
    RelationKind.Composition: "*--",
    RelationKind.Association: "-->",
}


def relation_kind(edge: Edge) -> RelationKind:
    marker = edge.marker_end.type if edge.marker_end else None
    if marker == MarkerType.ArrowClosed.value:
        return RelationKind.Inheritance
    if marker == MarkerType.Diamond.value:
        return RelationKind.Composition
    return RelationKind.Association


def class_block(node: ClassNode) -> list[str]:
    lines = [f"{INDENT}class {node.label} {{"]
    if node.stereotype:
        lines.append(f"{INDENT * 2}<<{node.stereotype}>>")
    lines.extend(f"{INDENT * 2}{prop}" for prop in node.properties)
    lines.extend(f"{INDENT * 2}{method}" for method in node.methods)
    lines.append(f"{INDENT}}}")
    return lines


class ClassEmitter:
    def emit(self, nodes: Sequence[ClassNode], edges: Sequence[Edge], options: ConvertOptions) -> Emission:
        emission = Emission(["classDiagram"])
        for node in nodes:
            emission.lines.extend(class_block(node))

        graph = DiagramGraph.build(nodes, edges)
        for edge in edges:
            source = graph.label_of(edge.source)
            target = graph.label_of(edge.target)
            if source is None or target is None:
                emission.skipped_edges += 1
                continue
            arrow = RELATION_ARROWS[relation_kind(edge)]
            emission.lines.append(f"{INDENT}{source} {arrow} {target}")

        if emission.skipped_edges:
            logger.warning("class diagram: skipped %d edge(s) with unresolved endpoints", emission.skipped_edges)
        return emission
