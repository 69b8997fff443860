"""Shared type definitions for mermaid-bridge.

Enums used across the model, emitters, parsers and layout. Values are the
strings the editor stores, so they serialize unchanged.
"""

from __future__ import annotations

from enum import Enum


class DiagramKind(str, Enum):
    Flowchart = "flowchart"
    Sequence = "sequence"
    Class = "class"
    State = "state"
    ER = "er"
    Gantt = "gantt"
    Architecture = "architecture"


class Direction(str, Enum):
    TB = "TB"
    BT = "BT"
    LR = "LR"
    RL = "RL"

    @classmethod
    def default(cls) -> Direction:
        return cls.TB


class NodeShape(str, Enum):
    Rectangle = "rectangle"  # id[Label]
    Circle = "circle"  # id((Label))
    Diamond = "diamond"  # id{Label}
    Hexagon = "hexagon"  # id{{Label}}
    Parallelogram = "parallelogram"  # id[/Label/]
    Triangle = "triangle"  # id[\Label\]

    @classmethod
    def default(cls) -> NodeShape:
        return cls.Rectangle


class MarkerType(str, Enum):
    ArrowClosed = "arrowclosed"
    Diamond = "diamond"


class RelationKind(str, Enum):
    Inheritance = "inheritance"  # A --|> B
    Composition = "composition"  # A *-- B
    Association = "association"  # A --> B


class AttributeKey(str, Enum):
    Primary = "primary"
    Foreign = "foreign"


class GanttStatus(str, Enum):
    Done = "done"
    Active = "active"
    Pending = "pending"
