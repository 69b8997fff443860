"""mermaid-bridge: convert editor node/edge graphs to Mermaid markup and back."""

from mermaid_bridge.config import ConvertOptions
from mermaid_bridge.convert import ConversionResult, convert, convert_with_report, from_mermaid, resolve_kind
from mermaid_bridge.document import DiagramDocument, Viewport
from mermaid_bridge.errors import (
    EmptyDiagramError,
    MermaidBridgeError,
    MixedTypesError,
    UnimplementedParserError,
    UnsupportedDiagramTypeError,
)
from mermaid_bridge.model import (
    ArchitectureNode,
    ClassNode,
    Edge,
    ERAttribute,
    ERNode,
    FlowchartNode,
    GanttNode,
    Marker,
    Node,
    ParsedDiagram,
    Position,
    SequenceNode,
    StateNode,
    Style,
)
from mermaid_bridge.types import DiagramKind, Direction, MarkerType, NodeShape

__all__ = [
    "ArchitectureNode",
    "ClassNode",
    "ConversionResult",
    "ConvertOptions",
    "DiagramDocument",
    "DiagramKind",
    "Direction",
    "Edge",
    "EmptyDiagramError",
    "ERAttribute",
    "ERNode",
    "FlowchartNode",
    "GanttNode",
    "Marker",
    "MarkerType",
    "MermaidBridgeError",
    "MixedTypesError",
    "Node",
    "NodeShape",
    "ParsedDiagram",
    "Position",
    "SequenceNode",
    "StateNode",
    "Style",
    "UnimplementedParserError",
    "UnsupportedDiagramTypeError",
    "Viewport",
    "convert",
    "convert_with_report",
    "from_mermaid",
    "resolve_kind",
]
