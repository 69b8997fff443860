"""Entity-relationship emitter."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from mermaid_bridge.config import ConvertOptions
from mermaid_bridge.emitters.base import INDENT, Emission
from mermaid_bridge.ir.graph import DiagramGraph
from mermaid_bridge.model import ERAttribute, ERNode, Edge
from mermaid_bridge.types import AttributeKey

logger = logging.getLogger(__name__)

KEY_MARKS: dict[AttributeKey, str] = {
    AttributeKey.Primary: "PK",
    AttributeKey.Foreign: "FK",
}

# Every relationship is written one-to-zero-or-many.
CARDINALITY = "||--o{"


def attribute_line(attr: ERAttribute) -> str:
    mark = KEY_MARKS.get(attr.key, "")
    return f"{INDENT * 2}{attr.type} {attr.name} {mark}"


class ERDiagramEmitter:
    def emit(self, nodes: Sequence[ERNode], edges: Sequence[Edge], options: ConvertOptions) -> Emission:
        emission = Emission(["erDiagram"])
        for node in nodes:
            emission.lines.append(f"{INDENT}{node.label} {{")
            emission.lines.extend(attribute_line(a) for a in node.attributes)
            emission.lines.append(f"{INDENT}}}")

        graph = DiagramGraph.build(nodes, edges)
        for edge in edges:
            source = graph.label_of(edge.source)
            target = graph.label_of(edge.target)
            if source is None or target is None:
                emission.skipped_edges += 1
                continue
            emission.lines.append(f'{INDENT}{source} {CARDINALITY} {target} : "{edge.label or ""}"')

        if emission.skipped_edges:
            logger.warning("er diagram: skipped %d edge(s) with unresolved endpoints", emission.skipped_edges)
        return emission
