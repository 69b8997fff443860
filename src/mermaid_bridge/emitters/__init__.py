"""Emitter registry — one graph-to-markup emitter per diagram kind."""

from __future__ import annotations

from mermaid_bridge.emitters.base import Emission, Emitter
from mermaid_bridge.emitters.class_diagram import ClassEmitter
from mermaid_bridge.emitters.er import ERDiagramEmitter
from mermaid_bridge.emitters.flowchart import FlowchartEmitter
from mermaid_bridge.emitters.gantt import GanttEmitter
from mermaid_bridge.emitters.sequence import SequenceEmitter
from mermaid_bridge.emitters.state import StateEmitter
from mermaid_bridge.errors import UnsupportedDiagramTypeError
from mermaid_bridge.types import DiagramKind

# Architecture nodes have no dialect of their own.
_EMITTERS: dict[DiagramKind, type[Emitter]] = {
    DiagramKind.Flowchart: FlowchartEmitter,
    DiagramKind.Sequence: SequenceEmitter,
    DiagramKind.Class: ClassEmitter,
    DiagramKind.State: StateEmitter,
    DiagramKind.ER: ERDiagramEmitter,
    DiagramKind.Gantt: GanttEmitter,
}


def get_emitter(kind: DiagramKind) -> Emitter:
    emitter_cls = _EMITTERS.get(kind)
    if emitter_cls is None:
        raise UnsupportedDiagramTypeError(kind.value)
    return emitter_cls()


__all__ = [
    "Emission",
    "Emitter",
    "get_emitter",
]
