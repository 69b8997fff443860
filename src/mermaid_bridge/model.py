"""Diagram data model: typed nodes, edges and parsed diagrams.

A node is a tagged union over ``DiagramKind``; the ``type`` field selects
the variant, so each emitter receives a narrowed node class and reads its
kind-specific fields directly.

Two input shapes are accepted for nodes:

- flat: ``{"id": "a", "type": "flowchart", "label": "Start", ...}``
- canvas: ``{"id": "a", "position": {...}, "data": {"type": "flowchart", ...}}``

The canvas shape is what the editor persists; it is flattened before the
variant is chosen. Field names are snake_case in Python and camelCase on
the wire (``entryAction``, ``markerEnd``, ``strokeWidth``...).
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, TypeAdapter
from pydantic.alias_generators import to_camel

from mermaid_bridge.types import AttributeKey, DiagramKind, MarkerType, NodeShape


class WireModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_dict(self) -> dict[str, Any]:
        """Serialize with camelCase keys, dropping unset optionals."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class Position(WireModel):
    x: float
    y: float


class Style(WireModel):
    fill: str | None = None
    stroke: str | None = None
    stroke_width: float | None = None
    dash_array: str | None = None


class _NodeBase(WireModel):
    id: str
    label: str
    description: str | None = None
    shape: NodeShape | None = None
    style: Style | None = None
    position: Position | None = None

    @property
    def kind(self) -> DiagramKind:
        return DiagramKind(self.type)  # type: ignore[attr-defined]


class FlowchartNode(_NodeBase):
    type: Literal["flowchart"] = "flowchart"
    condition: str | None = None


class SequenceNode(_NodeBase):
    type: Literal["sequence"] = "sequence"
    actor: bool = False


class ClassNode(_NodeBase):
    type: Literal["class"] = "class"
    methods: list[str] = Field(default_factory=list)
    properties: list[str] = Field(default_factory=list)
    stereotype: str | None = None


class StateNode(_NodeBase):
    type: Literal["state"] = "state"
    entry_action: str | None = None
    exit_action: str | None = None


class ERAttribute(WireModel):
    name: str
    type: str
    key: AttributeKey | None = None


class ERNode(_NodeBase):
    type: Literal["er"] = "er"
    attributes: list[ERAttribute] = Field(default_factory=list)


class GanttNode(_NodeBase):
    type: Literal["gantt"] = "gantt"
    start_date: str | None = None
    end_date: str | None = None
    dependencies: list[str] | None = None
    progress: float = Field(default=0, ge=0, le=100)


class ArchitectureNode(_NodeBase):
    type: Literal["architecture"] = "architecture"
    technology: str | None = None
    protocol: str | None = None
    scalability: str | None = None
    reliability: str | None = None
    data_flow: str | None = None


def _flatten_canvas_node(value: Any) -> Any:
    """Lift ``data`` of a canvas node onto the top level."""
    if isinstance(value, dict) and isinstance(value.get("data"), dict):
        flat = {k: v for k, v in value.items() if k not in ("data", "type")}
        flat.update(value["data"])
        return flat
    return value


Node = Annotated[
    Annotated[
        Union[
            FlowchartNode,
            SequenceNode,
            ClassNode,
            StateNode,
            ERNode,
            GanttNode,
            ArchitectureNode,
        ],
        Field(discriminator="type"),
    ],
    BeforeValidator(_flatten_canvas_node),
]


class Marker(WireModel):
    # Kept as a plain string: canvas edges may carry marker types the
    # converter does not know, which read as plain associations.
    type: str

    @classmethod
    def of(cls, marker_type: MarkerType) -> Marker:
        return cls(type=marker_type.value)


class Edge(WireModel):
    id: str
    source: str
    target: str
    label: str | None = None
    animated: bool = False
    marker_end: Marker | None = None


class ParsedDiagram(WireModel):
    """Result of parsing markup back into a graph."""

    nodes: list[Node] = Field(default_factory=list)
    edges: list[Edge] = Field(default_factory=list)


_NODES_ADAPTER: TypeAdapter[list[Node]] = TypeAdapter(list[Node])
_EDGES_ADAPTER: TypeAdapter[list[Edge]] = TypeAdapter(list[Edge])


def coerce_nodes(nodes: list[Any]) -> list[Node]:
    """Validate raw node payloads; model instances pass through unchanged."""
    if all(isinstance(n, _NodeBase) for n in nodes):
        return list(nodes)
    return _NODES_ADAPTER.validate_python(
        [n.to_dict() if isinstance(n, _NodeBase) else n for n in nodes]
    )


def coerce_edges(edges: list[Any]) -> list[Edge]:
    """Validate raw edge payloads; model instances pass through unchanged."""
    if all(isinstance(e, Edge) for e in edges):
        return list(edges)
    return _EDGES_ADAPTER.validate_python(
        [e.to_dict() if isinstance(e, Edge) else e for e in edges]
    )
