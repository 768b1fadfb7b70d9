from __future__ import annotations

"""
Layout Parsing Errors.

Structural failures raised while turning tree text into a LayoutNode tree.
All of them are recoverable: callers discard the text and ask for a new one.
"""


class LayoutParseError(ValueError):
    """Base class for every structural failure of the layout parser."""


class EmptyLayoutError(LayoutParseError):
    """Raised when the text holds no line that can become the root."""

    def __init__(self, message: str = "") -> None:
        super().__init__(
            message
            or "failed to parse any valid root node from the layout. "
               "The layout might be malformed or empty after cleaning"
        )


class OrphanedNodeError(LayoutParseError):
    """
    Raised when a line cannot be attached under any open directory.

    Attributes:
        line_number: 1-based line number inside the parsed text.
        name: Item name of the offending line.
        depth: Depth inferred for the offending line.
    """

    def __init__(self, line_number: int, name: str, depth: int) -> None:
        self.line_number = line_number
        self.name = name
        self.depth = depth
        super().__init__(
            f"invalid tree structure: could not find parent for line {line_number}: "
            f"'{name}' (depth {depth}). Structure might have multiple roots "
            f"or inconsistent indentation"
        )
