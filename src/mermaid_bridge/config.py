"""Centralized configuration for mermaid-bridge."""

from __future__ import annotations

from dataclasses import dataclass, field

from mermaid_bridge.types import Direction


@dataclass
class ConvertOptions:
    """Options for graph-to-markup conversion.

    Only the flowchart emitter reads ``direction``; other dialects ignore it.
    """

    direction: Direction = field(default_factory=Direction.default)

    def __post_init__(self) -> None:
        # Plain strings such as "LR" are accepted; bad values raise ValueError.
        self.direction = Direction(self.direction)

    @classmethod
    def from_direction(cls, direction: str | None) -> ConvertOptions:
        """Build options from a direction string such as ``"lr"``."""
        if direction is None:
            return cls()
        key = direction.upper()
        if key not in Direction.__members__:
            raise ValueError(f"Unknown direction '{direction}'; use TB, BT, LR, or RL")
        return cls(direction=Direction[key])
