"""Synthesized node positions for parsed markup.

Markup carries no coordinates, so parsed nodes are placed by insertion
index: sequence participants on one row, gantt tasks in one column, and
everything else on a square-ish grid.
"""

from __future__ import annotations

import math

from mermaid_bridge.model import Position
from mermaid_bridge.types import DiagramKind

SPACING = 200
VERTICAL_SPACING = 150
ORIGIN = 100


def grid_position(index: int, total: int) -> Position:
    """Row-major grid with ceil(sqrt(total)) columns."""
    columns = max(1, math.ceil(math.sqrt(total)))
    return Position(
        x=(index % columns) * SPACING + ORIGIN,
        y=(index // columns) * VERTICAL_SPACING + ORIGIN,
    )


def node_position(index: int, total: int, kind: DiagramKind) -> Position:
    if kind is DiagramKind.Sequence:
        return Position(x=index * SPACING + ORIGIN, y=ORIGIN)
    if kind is DiagramKind.Gantt:
        return Position(x=ORIGIN, y=index * VERTICAL_SPACING + ORIGIN)
    return grid_position(index, total)
