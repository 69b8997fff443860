"""Sequence diagram parser.

Two passes over the lines: participants/actors first, then messages, so
declaration order and message order are each preserved independently.
"""

from __future__ import annotations

import re

from mermaid_bridge.layout import node_position
from mermaid_bridge.model import Edge, Marker, ParsedDiagram, SequenceNode
from mermaid_bridge.types import DiagramKind, MarkerType

_PARTICIPANT_RE = re.compile(r"^(?P<kind>participant|actor)\s+(?P<id>\w+)(?:\s+as\s+(?P<label>.+))?$")
_MESSAGE_RE = re.compile(r"^(?P<source>\w+)(?P<arrow>->>|-->|-)(?P<target>\w+):(?P<label>.*)$")


class SequenceParser:
    def parse(self, lines: list[str]) -> ParsedDiagram:
        body = lines[1:]
        nodes: list[SequenceNode] = []
        for line in body:
            m = _PARTICIPANT_RE.match(line)
            if m is None:
                continue
            nodes.append(
                SequenceNode(
                    id=m.group("id"),
                    label=(m.group("label") or m.group("id")).strip(),
                    actor=m.group("kind") == "actor",
                    position=node_position(len(nodes), len(lines), DiagramKind.Sequence),
                )
            )

        edges: list[Edge] = []
        for line in body:
            m = _MESSAGE_RE.match(line)
            if m is None:
                continue
            source, target = m.group("source"), m.group("target")
            edges.append(
                Edge(
                    id=f"{source}-{target}-{len(edges)}",
                    source=source,
                    target=target,
                    label=m.group("label").strip() or None,
                    animated="--" in m.group("arrow"),
                    marker_end=Marker.of(MarkerType.ArrowClosed),
                )
            )
        return ParsedDiagram(nodes=nodes, edges=edges)
