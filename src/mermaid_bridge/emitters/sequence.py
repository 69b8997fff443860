"""Sequence diagram emitter.

Messages are written in edge order; the caller is expected to supply
edges already sorted by the intended sequence.
"""

from __future__ import annotations

from collections.abc import Sequence

from mermaid_bridge.config import ConvertOptions
from mermaid_bridge.emitters.base import INDENT, Emission
from mermaid_bridge.model import Edge, SequenceNode


class SequenceEmitter:
    def emit(self, nodes: Sequence[SequenceNode], edges: Sequence[Edge], options: ConvertOptions) -> Emission:
        lines = ["sequenceDiagram"]
        for node in nodes:
            keyword = "actor" if node.actor else "participant"
            lines.append(f"{INDENT}{keyword} {node.id} as {node.label}")
        for edge in edges:
            lines.append(f"{INDENT}{edge.source}->>{edge.target}: {edge.label or ''}")
        return Emission(lines)
