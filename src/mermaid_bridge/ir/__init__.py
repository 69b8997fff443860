"""Intermediate representation: networkx-backed diagram graph."""

from mermaid_bridge.ir.graph import DiagramGraph

__all__ = [
    "DiagramGraph",
]
