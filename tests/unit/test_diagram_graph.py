"""Tests for mermaid_bridge.ir.graph — endpoint lookup and first-edge queries."""

from mermaid_bridge.ir import DiagramGraph
from mermaid_bridge.model import Edge, StateNode


def _node(id: str, label: str | None = None) -> StateNode:
    return StateNode(id=id, label=label if label is not None else id.upper())


def _edge(source: str, target: str, id: str | None = None) -> Edge:
    return Edge(id=id or f"{source}-{target}", source=source, target=target)


class TestBuild:
    def test_dangling_endpoint_is_placeholder(self):
        g = DiagramGraph.build([_node("a"), _node("b")], [_edge("a", "b"), _edge("a", "ghost")])
        assert "ghost" in g.digraph
        assert g.node("ghost") is None
        assert g.digraph.number_of_edges() == 2

    def test_duplicate_node_first_wins(self):
        g = DiagramGraph.build([_node("a", "First"), _node("a", "Second")], [])
        assert g.label_of("a") == "First"

    def test_parallel_edges_kept(self):
        g = DiagramGraph.build([_node("a"), _node("b")], [_edge("a", "b", "e1"), _edge("a", "b", "e1")])
        assert g.digraph.number_of_edges() == 2


class TestLookup:
    def test_label_of(self):
        g = DiagramGraph.build([_node("a")], [_edge("a", "ghost")])
        assert g.label_of("a") == "A"
        assert g.label_of("ghost") is None
        assert g.label_of("never-seen") is None

    def test_empty_label_does_not_resolve(self):
        g = DiagramGraph.build([_node("a", "")], [])
        assert g.label_of("a") is None

    def test_first_outgoing_follows_edge_order(self):
        edges = [_edge("x", "y"), _edge("a", "c"), _edge("a", "b"), _edge("a", "c", "again")]
        g = DiagramGraph.build([_node("a"), _node("b"), _node("c")], edges)
        assert g.first_outgoing("a").target == "c"
        assert g.first_incoming("c").source == "a"
        assert g.first_incoming("a") is None
        assert g.first_outgoing("missing") is None
