"""State diagram emitter.

Nodes labelled ``initial`` or ``final`` (any case) are not declared as
states; they become ``[*]`` pseudo-transitions built from their first
outgoing or incoming edge.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from mermaid_bridge.config import ConvertOptions
from mermaid_bridge.emitters.base import INDENT, Emission
from mermaid_bridge.ir.graph import DiagramGraph
from mermaid_bridge.model import Edge, StateNode

logger = logging.getLogger(__name__)

PSEUDO_STATE = "[*]"
INITIAL_LABEL = "initial"
FINAL_LABEL = "final"


def state_block(node: StateNode) -> list[str]:
    details: list[str] = []
    if node.description:
        details.append(f"{INDENT * 2}description: {node.description}")
    if node.entry_action:
        details.append(f"{INDENT * 2}entry/ {node.entry_action}")
    if node.exit_action:
        details.append(f"{INDENT * 2}exit/ {node.exit_action}")
    if not details:
        return [f"{INDENT}state {node.label}"]
    return [f"{INDENT}state {node.label} {{", *details, f"{INDENT}}}"]


def transition_line(edge: Edge) -> str:
    line = f"{INDENT}{edge.source} --> {edge.target}"
    if edge.label:
        line += f": {edge.label}"
    return line


class StateEmitter:
    def emit(self, nodes: Sequence[StateNode], edges: Sequence[Edge], options: ConvertOptions) -> Emission:
        lines = ["stateDiagram-v2"]
        graph = DiagramGraph.build(nodes, edges)

        for node in nodes:
            label = node.label.lower()
            if label == INITIAL_LABEL:
                edge = graph.first_outgoing(node.id)
                if edge is None:
                    logger.debug("initial state %r has no outgoing edge", node.id)
                    continue
                lines.append(f"{INDENT}{PSEUDO_STATE} --> {edge.target}")
            elif label == FINAL_LABEL:
                edge = graph.first_incoming(node.id)
                if edge is None:
                    logger.debug("final state %r has no incoming edge", node.id)
                    continue
                lines.append(f"{INDENT}{edge.source} --> {PSEUDO_STATE}")
            else:
                lines.extend(state_block(node))

        lines.extend(
            transition_line(e) for e in edges if e.source != PSEUDO_STATE and e.target != PSEUDO_STATE
        )
        return Emission(lines)
