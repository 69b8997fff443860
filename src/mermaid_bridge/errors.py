"""Error taxonomy for conversions in both directions.

All errors derive from ValueError so callers that only care about
"bad input" can keep catching that, as the CLI does.
"""

from __future__ import annotations


class MermaidBridgeError(ValueError):
    """Base class for every conversion failure."""


class EmptyDiagramError(MermaidBridgeError):
    """No nodes were given to convert, or the markup had no content lines."""


class MixedTypesError(MermaidBridgeError):
    """The nodes of one diagram span more than one diagram kind."""

    def __init__(self, kinds: list[str]) -> None:
        self.kinds = kinds
        super().__init__("Mixed diagram types are not supported")


class UnsupportedDiagramTypeError(MermaidBridgeError):
    """No emitter or parser exists for the resolved/detected dialect."""

    def __init__(self, diagram_type: str) -> None:
        self.diagram_type = diagram_type
        super().__init__(f"Unsupported diagram type: {diagram_type}")


class UnimplementedParserError(MermaidBridgeError):
    """The dialect was recognised but markup-to-graph parsing is not available."""

    def __init__(self, dialect: str) -> None:
        self.dialect = dialect
        super().__init__(f"{dialect} parsing not implemented yet")
