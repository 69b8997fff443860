"""Base emitter protocol."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Protocol

from mermaid_bridge.config import ConvertOptions
from mermaid_bridge.model import Edge, Node

INDENT = "    "


@dataclass
class Emission:
    """Body lines of one dialect plus edges dropped for unresolved endpoints."""

    lines: list[str] = field(default_factory=list)
    skipped_edges: int = 0

    @property
    def body(self) -> str:
        return "\n".join(self.lines)


class Emitter(Protocol):
    """Protocol that all dialect emitters must implement."""

    def emit(self, nodes: Sequence[Node], edges: Sequence[Edge], options: ConvertOptions) -> Emission:
        """Produce the dialect body (without fence) for homogeneous nodes."""
        ...
