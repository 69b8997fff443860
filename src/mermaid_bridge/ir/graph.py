"""Diagram graph — wraps nodes and edges in a networkx MultiDiGraph.

Emitters that resolve edge endpoints (class, ER) or look up a node's first
incoming/outgoing edge (state) go through this module rather than scanning
the raw lists. Edges whose endpoints are not declared nodes are kept in the
graph as placeholder vertices without node data, so lookups on them miss
instead of failing.
"""

from __future__ import annotations

from collections.abc import Sequence

import networkx as nx

from mermaid_bridge.model import Edge, Node


class DiagramGraph:
    """Topology view over one diagram's nodes and edges.

    Insertion order of ``nodes`` and ``edges`` is preserved by the
    underlying graph, so "first" edge queries follow input order.
    """

    def __init__(self, digraph: nx.MultiDiGraph) -> None:
        self.digraph = digraph

    @classmethod
    def build(cls, nodes: Sequence[Node], edges: Sequence[Edge]) -> DiagramGraph:
        digraph: nx.MultiDiGraph = nx.MultiDiGraph()
        for node in nodes:
            # First definition wins for duplicate ids.
            if node.id not in digraph:
                digraph.add_node(node.id, data=node)
        for order, edge in enumerate(edges):
            for endpoint in (edge.source, edge.target):
                if endpoint not in digraph:
                    digraph.add_node(endpoint, data=None)
            digraph.add_edge(edge.source, edge.target, key=order, data=edge, order=order)
        return cls(digraph)

    def node(self, node_id: str) -> Node | None:
        if node_id not in self.digraph:
            return None
        return self.digraph.nodes[node_id]["data"]

    def label_of(self, node_id: str) -> str | None:
        """Label of a declared node, or None for unknown/dangling ids."""
        node = self.node(node_id)
        if node is None or not node.label:
            return None
        return node.label

    def first_outgoing(self, node_id: str) -> Edge | None:
        if node_id not in self.digraph:
            return None
        return _earliest(self.digraph.out_edges(node_id, data=True))

    def first_incoming(self, node_id: str) -> Edge | None:
        if node_id not in self.digraph:
            return None
        return _earliest(self.digraph.in_edges(node_id, data=True))


def _earliest(edge_view) -> Edge | None:
    best = min(edge_view, key=lambda e: e[2]["order"], default=None)
    return best[2]["data"] if best is not None else None
