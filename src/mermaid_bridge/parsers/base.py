"""Base parser protocol."""

from __future__ import annotations

from typing import Protocol

from mermaid_bridge.model import ParsedDiagram


class Parser(Protocol):
    """Protocol that all dialect parsers must implement."""

    def parse(self, lines: list[str]) -> ParsedDiagram:
        """Parse trimmed, non-empty markup lines (header first) into a graph."""
        ...
