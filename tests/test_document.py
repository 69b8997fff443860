"""Tests for mermaid_bridge.document — persisted shape and editing operations."""

import json

import pytest
from pydantic import ValidationError

from mermaid_bridge import DiagramDocument, FlowchartNode, StateNode, Viewport


def _doc() -> DiagramDocument:
    doc = DiagramDocument(viewport=Viewport(x=0, y=0, zoom=1.5))
    doc.add_node(StateNode(id="a", label="Idle"))
    doc.add_node(StateNode(id="b", label="Busy"))
    doc.add_node(StateNode(id="c", label="Done"))
    doc.connect("a", "b", "start")
    doc.connect("b", "c")
    return doc


class TestEditing:
    def test_connect_ids(self):
        doc = _doc()
        assert [e.id for e in doc.edges] == ["a-b", "b-c"]

    def test_remove_node_cascades(self):
        doc = _doc()
        doc.remove_node("b")
        assert [n.id for n in doc.nodes] == ["a", "c"]
        assert doc.edges == []

    def test_remove_edge(self):
        doc = _doc()
        doc.remove_edge("a-b")
        assert [e.id for e in doc.edges] == ["b-c"]

    def test_update_node_merges(self):
        doc = _doc()
        updated = doc.update_node("a", label="Waiting", entry_action="reset", type="flowchart", id="zzz")
        assert isinstance(updated, StateNode)
        assert updated.id == "a"
        assert updated.label == "Waiting"
        assert updated.entry_action == "reset"
        assert doc.node("a") is updated

    def test_update_node_validates(self):
        doc = DiagramDocument(nodes=[FlowchartNode(id="a", label="A")])
        with pytest.raises(ValidationError):
            doc.update_node("a", shape="blob")

    def test_update_missing_node(self):
        with pytest.raises(KeyError):
            _doc().update_node("nope", label="x")


class TestSerialization:
    def test_to_mermaid_records_markup(self):
        doc = _doc()
        markup = doc.to_mermaid()
        assert doc.mermaid == markup
        assert "    a --> b: start" in markup

    def test_dumps_and_loads(self):
        doc = _doc()
        doc.update_node("a", entry_action="reset")
        data = json.loads(doc.dumps())
        assert data["viewport"] == {"x": 0, "y": 0, "zoom": 1.5}
        assert data["nodes"][0]["entryAction"] == "reset"
        again = DiagramDocument.loads(doc.dumps())
        assert again == doc

    def test_loads_bare_node_list(self):
        doc = DiagramDocument.loads('[{"id": "x", "type": "flowchart", "label": "X"}]')
        assert doc.edges == []
        assert doc.to_mermaid() == "```mermaid\nflowchart TB\n    x[X]\n```"

    def test_from_mermaid(self):
        markup = "```mermaid\nsequenceDiagram\n    actor u as User\n    u->>u: think\n```"
        doc = DiagramDocument.from_mermaid(markup)
        assert doc.mermaid == markup
        assert doc.nodes[0].actor
        assert doc.edges[0].label == "think"
