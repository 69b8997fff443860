"""Persisted diagram document and its editing operations.

A document is what the hosted store keeps per diagram version: the node
and edge collections, the canvas viewport, and the markup last generated
from them. The editing methods mirror what the canvas does to its state.
"""

from __future__ import annotations

import json
from typing import Any

from pydantic import Field

from mermaid_bridge.config import ConvertOptions
from mermaid_bridge.convert import convert_with_report, from_mermaid
from mermaid_bridge.model import Edge, Node, WireModel


class Viewport(WireModel):
    x: float = 0
    y: float = 0
    zoom: float = 1


class DiagramDocument(WireModel):
    nodes: list[Node] = Field(default_factory=list)
    edges: list[Edge] = Field(default_factory=list)
    viewport: Viewport | None = None
    mermaid: str | None = None

    # ── Serialization ────────────────────────────────────────────────────────

    @classmethod
    def loads(cls, text: str) -> DiagramDocument:
        """Load a document from JSON; a bare JSON list is read as nodes."""
        data = json.loads(text)
        if isinstance(data, list):
            data = {"nodes": data}
        return cls.model_validate(data)

    def dumps(self, indent: int | None = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_mermaid(cls, markup: str) -> DiagramDocument:
        parsed = from_mermaid(markup)
        return cls(nodes=parsed.nodes, edges=parsed.edges, mermaid=markup)

    def to_mermaid(self, options: ConvertOptions | None = None) -> str:
        """Convert to markup and remember it as the document's last export."""
        result = convert_with_report(self.nodes, self.edges, options)
        self.mermaid = result.markup
        return result.markup

    # ── Editing ──────────────────────────────────────────────────────────────

    def node(self, node_id: str) -> Node | None:
        return next((n for n in self.nodes if n.id == node_id), None)

    def add_node(self, node: Node) -> None:
        self.nodes.append(node)

    def update_node(self, node_id: str, **changes: Any) -> Node:
        """Merge ``changes`` into a node; its id and type cannot change.

        Raises:
            KeyError: If no node has ``node_id``.
            pydantic.ValidationError: If a change does not fit the node's kind.
        """
        for i, node in enumerate(self.nodes):
            if node.id == node_id:
                changes.pop("id", None)
                changes.pop("type", None)
                merged = {**node.model_dump(), **changes}
                updated = type(node).model_validate(merged)
                self.nodes[i] = updated
                return updated
        raise KeyError(node_id)

    def remove_node(self, node_id: str) -> None:
        """Remove a node and every edge touching it."""
        self.nodes = [n for n in self.nodes if n.id != node_id]
        self.edges = [e for e in self.edges if e.source != node_id and e.target != node_id]

    def connect(self, source: str, target: str, label: str | None = None) -> Edge:
        edge = Edge(id=f"{source}-{target}", source=source, target=target, label=label)
        self.edges.append(edge)
        return edge

    def remove_edge(self, edge_id: str) -> None:
        self.edges = [e for e in self.edges if e.id != edge_id]
