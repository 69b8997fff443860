"""Tests for mermaid_bridge.parsers — dialect detection and line parsers."""

import pytest

from mermaid_bridge.errors import UnimplementedParserError, UnsupportedDiagramTypeError
from mermaid_bridge.parsers import detect_kind, parse_lines
from mermaid_bridge.types import DiagramKind, NodeShape


def _lines(src: str) -> list[str]:
    return [line.strip() for line in src.split("\n") if line.strip()]


class TestDetectKind:
    @pytest.mark.parametrize(
        "header,kind",
        [
            ("flowchart TB", DiagramKind.Flowchart),
            ("graph LR", DiagramKind.Flowchart),
            ("sequenceDiagram", DiagramKind.Sequence),
            ("SEQUENCEDIAGRAM", DiagramKind.Sequence),
            ("classDiagram", DiagramKind.Class),
            ("stateDiagram-v2", DiagramKind.State),
            ("erDiagram", DiagramKind.ER),
            ("gantt", DiagramKind.Gantt),
        ],
    )
    def test_known_headers(self, header, kind):
        assert detect_kind(header) is kind

    def test_unknown_header(self):
        with pytest.raises(UnsupportedDiagramTypeError, match="Unsupported diagram type: pie"):
            detect_kind("pie title Pets")


class TestFlowchartParser:
    def test_shapes(self):
        parsed = parse_lines(
            _lines(
                """
                flowchart TB
                r[Rect]
                c((Circle))
                d{Decision}
                h{{Hex}}
                p[/Input/]
                t[\\Tri\\]
                o(Rounded)
                """
            )
        )
        shapes = {n.id: n.shape for n in parsed.nodes}
        assert shapes == {
            "r": NodeShape.Rectangle,
            "c": NodeShape.Circle,
            "d": NodeShape.Diamond,
            "h": NodeShape.Hexagon,
            "p": NodeShape.Parallelogram,
            "t": NodeShape.Triangle,
            "o": NodeShape.Rectangle,
        }
        assert [n.label for n in parsed.nodes] == ["Rect", "Circle", "Decision", "Hex", "Input", "Tri", "Rounded"]

    def test_edges(self):
        parsed = parse_lines(_lines("graph TD\nA-->B|yes|\nB -.-> C\nC -->|no| A\nC==>D"))
        assert [(e.source, e.target, e.label) for e in parsed.edges] == [
            ("A", "B", "yes"),
            ("B", "C", None),
            ("C", "A", "no"),
            ("C", "D", None),
        ]
        assert [e.animated for e in parsed.edges] == [False, True, False, False]
        assert parsed.edges[0].id == "A-B"
        assert parsed.edges[0].marker_end is not None
        assert parsed.edges[0].marker_end.type == "arrowclosed"

    def test_animated_arrow_from_emitter(self):
        parsed = parse_lines(["flowchart TB", "a-..->b|later|"])
        assert parsed.edges[0].animated
        assert parsed.edges[0].label == "later"

    def test_edges_do_not_declare_nodes(self):
        parsed = parse_lines(["flowchart TB", "a-->b"])
        assert parsed.nodes == []
        assert len(parsed.edges) == 1

    def test_labels_containing_brackets(self):
        parsed = parse_lines(["flowchart TB", "a[f(x)]", "b((g(y)))", "c[a[b]]", "d{is (x) > 0?}", "e[/odd\\]"])
        assert [(n.id, n.label, n.shape) for n in parsed.nodes] == [
            ("a", "f(x)", NodeShape.Rectangle),
            ("b", "g(y)", NodeShape.Circle),
            ("c", "a[b]", NodeShape.Rectangle),
            ("d", "is (x) > 0?", NodeShape.Diamond),
            ("e", "/odd\\", NodeShape.Rectangle),
        ]

    def test_trailing_semicolons(self):
        parsed = parse_lines(["graph TD", "A[Start];", "B((End)) ;", "A-->B;", "B -->|back| A ;"])
        assert [(n.id, n.label) for n in parsed.nodes] == [("A", "Start"), ("B", "End")]
        assert [(e.source, e.target, e.label) for e in parsed.edges] == [("A", "B", None), ("B", "A", "back")]

    def test_first_definition_wins(self):
        parsed = parse_lines(["graph TD", "A[Hello]", "A[World]"])
        assert len(parsed.nodes) == 1
        assert parsed.nodes[0].label == "Hello"

    def test_comments_and_noise_ignored(self):
        parsed = parse_lines(["graph TD", "%% A[Hidden]", "classDef x fill:#fff", "A[Shown]"])
        assert [n.label for n in parsed.nodes] == ["Shown"]

    def test_positions_are_synthesized(self):
        parsed = parse_lines(["flowchart TB", "a[A]", "b[B]", "c[C]"])
        # Four lines in total -> two grid columns.
        assert [(n.position.x, n.position.y) for n in parsed.nodes] == [(100, 100), (300, 100), (100, 250)]


class TestSequenceParser:
    def test_participants_and_messages(self):
        parsed = parse_lines(
            _lines(
                """
                sequenceDiagram
                participant A
                A->>B: hello
                actor B as Bob
                B-->A: back
                A-B:
                """
            )
        )
        assert [(n.id, n.label, n.actor) for n in parsed.nodes] == [("A", "A", False), ("B", "Bob", True)]
        assert [(n.position.x, n.position.y) for n in parsed.nodes] == [(100, 100), (300, 100)]
        assert [(e.id, e.label, e.animated) for e in parsed.edges] == [
            ("A-B-0", "hello", False),
            ("B-A-1", "back", True),
            ("A-B-2", None, False),
        ]


class TestUnimplemented:
    @pytest.mark.parametrize(
        "header,dialect",
        [
            ("classDiagram", "Class diagram"),
            ("stateDiagram-v2", "State diagram"),
            ("erDiagram", "ER diagram"),
            ("gantt", "Gantt chart"),
        ],
    )
    def test_raises_regardless_of_body(self, header, dialect):
        with pytest.raises(UnimplementedParserError, match=f"{dialect} parsing not implemented yet"):
            parse_lines([header, "anything at all"])
