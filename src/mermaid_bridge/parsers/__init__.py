"""Parser registry — detect the dialect of markup and dispatch to its parser."""

from __future__ import annotations

from mermaid_bridge.errors import UnsupportedDiagramTypeError
from mermaid_bridge.model import ParsedDiagram
from mermaid_bridge.parsers.base import Parser
from mermaid_bridge.parsers.flowchart import FlowchartParser
from mermaid_bridge.parsers.sequence import SequenceParser
from mermaid_bridge.parsers.unimplemented import (
    ClassDiagramParser,
    ERDiagramParser,
    GanttParser,
    StateDiagramParser,
)
from mermaid_bridge.types import DiagramKind

# Header prefixes, matched case-insensitively against the first line.
_PREFIXES: list[tuple[str, DiagramKind]] = [
    ("flowchart", DiagramKind.Flowchart),
    ("graph", DiagramKind.Flowchart),
    ("sequencediagram", DiagramKind.Sequence),
    ("classdiagram", DiagramKind.Class),
    ("statediagram", DiagramKind.State),
    ("erdiagram", DiagramKind.ER),
    ("gantt", DiagramKind.Gantt),
]

_PARSERS: dict[DiagramKind, type[Parser]] = {
    DiagramKind.Flowchart: FlowchartParser,
    DiagramKind.Sequence: SequenceParser,
    DiagramKind.Class: ClassDiagramParser,
    DiagramKind.State: StateDiagramParser,
    DiagramKind.ER: ERDiagramParser,
    DiagramKind.Gantt: GanttParser,
}


def detect_kind(header: str) -> DiagramKind:
    """Detect the dialect from the markup's first line."""
    lower = header.lower()
    for prefix, kind in _PREFIXES:
        if lower.startswith(prefix):
            return kind
    raise UnsupportedDiagramTypeError(lower)


def parse_lines(lines: list[str]) -> ParsedDiagram:
    """Detect the dialect of ``lines[0]`` and parse all lines with its parser."""
    kind = detect_kind(lines[0])
    parser_cls = _PARSERS.get(kind)
    if parser_cls is None:
        raise UnsupportedDiagramTypeError(kind.value)
    return parser_cls().parse(lines)


__all__ = [
    "Parser",
    "detect_kind",
    "parse_lines",
]
