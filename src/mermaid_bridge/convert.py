"""Graph <-> Mermaid markup conversion entry points.

``convert`` resolves the single diagram kind of a node collection,
dispatches to that kind's emitter and fences the result. ``from_mermaid``
goes the other way for the dialects that have a parser. Both are pure:
inputs are never mutated and no state is kept between calls.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from mermaid_bridge.config import ConvertOptions
from mermaid_bridge.emitters import get_emitter
from mermaid_bridge.errors import EmptyDiagramError, MixedTypesError
from mermaid_bridge.model import ParsedDiagram, coerce_edges, coerce_nodes
from mermaid_bridge.parsers import parse_lines
from mermaid_bridge.types import DiagramKind

logger = logging.getLogger(__name__)

FENCE_OPEN = "```mermaid"
FENCE_CLOSE = "```"

_FENCED_RE = re.compile(r"```mermaid\n([\s\S]*?)```")


@dataclass
class ConversionResult:
    """Fenced markup plus what the emitter had to leave out."""

    kind: DiagramKind
    markup: str
    skipped_edges: int = 0


def resolve_kind(nodes: Sequence[Any]) -> DiagramKind:
    """Return the one diagram kind shared by every node.

    Raises:
        EmptyDiagramError: If ``nodes`` is empty.
        MixedTypesError: If more than one kind is present.
    """
    if not nodes:
        raise EmptyDiagramError("No nodes provided")
    kinds = list(dict.fromkeys(node.kind for node in nodes))
    if len(kinds) != 1:
        raise MixedTypesError([k.value for k in kinds])
    return kinds[0]


def fence(body: str) -> str:
    return "\n".join([FENCE_OPEN, body, FENCE_CLOSE])


def unfence(markup: str) -> str:
    """Strip the first ```mermaid wrapper, if any, and surrounding whitespace."""
    return _FENCED_RE.sub(r"\1", markup, count=1).strip()


def convert_with_report(
    nodes: Sequence[Any],
    edges: Sequence[Any],
    options: ConvertOptions | None = None,
) -> ConversionResult:
    """Convert nodes and edges to fenced markup, reporting skipped edges.

    Args:
        nodes: Node models or raw node dicts (flat or canvas shape).
        edges: Edge models or raw edge dicts.
        options: Conversion options; direction only affects flowcharts.

    Returns:
        The resolved kind, the fenced markup, and the number of edges
        dropped because an endpoint did not resolve to a node.

    Raises:
        EmptyDiagramError: If there are no nodes.
        MixedTypesError: If nodes span more than one diagram kind.
        UnsupportedDiagramTypeError: If the kind has no emitter.
        pydantic.ValidationError: If a raw payload is malformed.
    """
    typed_nodes = coerce_nodes(list(nodes))
    typed_edges = coerce_edges(list(edges))
    kind = resolve_kind(typed_nodes)
    emitter = get_emitter(kind)
    logger.debug("emitting %s diagram: %d node(s), %d edge(s)", kind.value, len(typed_nodes), len(typed_edges))
    emission = emitter.emit(typed_nodes, typed_edges, options or ConvertOptions())
    return ConversionResult(kind=kind, markup=fence(emission.body), skipped_edges=emission.skipped_edges)


def convert(
    nodes: Sequence[Any],
    edges: Sequence[Any],
    options: ConvertOptions | None = None,
) -> str:
    """Convert a homogeneous node/edge collection to fenced Mermaid markup."""
    return convert_with_report(nodes, edges, options).markup


def from_mermaid(markup: str) -> ParsedDiagram:
    """Parse Mermaid markup back into nodes and edges.

    Positions are synthesized from insertion order, not read from the text.

    Raises:
        EmptyDiagramError: If no non-empty lines remain after unfencing.
        UnsupportedDiagramTypeError: If the header names no known dialect.
        UnimplementedParserError: For class, state, er and gantt markup.
    """
    lines = [line.strip() for line in unfence(markup).split("\n")]
    lines = [line for line in lines if line]
    if not lines:
        raise EmptyDiagramError("Empty Mermaid diagram")
    return parse_lines(lines)
