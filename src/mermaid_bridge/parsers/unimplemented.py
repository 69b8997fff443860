"""Placeholders for dialects that can be emitted but not parsed back."""

from __future__ import annotations

from mermaid_bridge.errors import UnimplementedParserError
from mermaid_bridge.model import ParsedDiagram


class UnimplementedParser:
    """Raises for any input, whatever the body holds."""

    dialect = "Diagram"

    def parse(self, lines: list[str]) -> ParsedDiagram:
        raise UnimplementedParserError(self.dialect)


class ClassDiagramParser(UnimplementedParser):
    dialect = "Class diagram"


class StateDiagramParser(UnimplementedParser):
    dialect = "State diagram"


class ERDiagramParser(UnimplementedParser):
    dialect = "ER diagram"


class GanttParser(UnimplementedParser):
    dialect = "Gantt chart"
