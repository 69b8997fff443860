"""Tests for mermaid_bridge.layout — synthesized positions."""

from mermaid_bridge.layout import grid_position, node_position
from mermaid_bridge.types import DiagramKind


def _xy(pos):
    return (pos.x, pos.y)


def test_grid_wraps_at_sqrt_of_total():
    assert [_xy(grid_position(i, 9)) for i in range(4)] == [(100, 100), (300, 100), (500, 100), (100, 250)]


def test_grid_rounds_columns_up():
    # ceil(sqrt(5)) == 3
    assert _xy(grid_position(3, 5)) == (100, 250)


def test_grid_single_item():
    assert _xy(grid_position(0, 1)) == (100, 100)


def test_sequence_is_one_row():
    assert [_xy(node_position(i, 100, DiagramKind.Sequence)) for i in range(3)] == [(100, 100), (300, 100), (500, 100)]


def test_gantt_is_one_column():
    assert [_xy(node_position(i, 100, DiagramKind.Gantt)) for i in range(3)] == [(100, 100), (100, 250), (100, 400)]


def test_other_kinds_use_grid():
    assert _xy(node_position(2, 4, DiagramKind.Flowchart)) == (100, 250)
