"""Core placeholder types used by the rewriter."""

from enum import Enum
from typing import Any, NamedTuple

__all__ = ("PlaceholderInfo", "PlaceholderStyle", "RewriteResult")


class PlaceholderStyle(str, Enum):
    """Named placeholder forms recognized in a query template."""

    SCALAR = "scalar"
    """``:name``, bound to exactly one positional value."""
    ARRAY = "array"
    """``[:name]``, expands to one positional marker per element of a sequence."""

    def __str__(self) -> str:
        """String representation for better error messages.

        Returns:
            The enum value as a string.
        """
        return self.value


class PlaceholderInfo:
    """Immutable placeholder occurrence information."""

    __slots__ = ("name", "ordinal", "placeholder_text", "position", "style")

    def __init__(self, name: str, style: PlaceholderStyle, position: int, ordinal: int, placeholder_text: str) -> None:
        self.name = name
        self.style = style
        self.position = position
        self.ordinal = ordinal
        self.placeholder_text = placeholder_text

    @property
    def end(self) -> int:
        """Offset just past the matched placeholder text."""
        return self.position + len(self.placeholder_text)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return False
        return (
            self.name == other.name
            and self.style == other.style
            and self.position == other.position
            and self.placeholder_text == other.placeholder_text
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join([f'name={self.name!r}', f'ordinal={self.ordinal!r}', f'placeholder_text={self.placeholder_text!r}', f'position={self.position!r}', f'style={self.style!r}'])})"

    def __hash__(self) -> int:
        return hash((self.name, self.style, self.position, self.placeholder_text))


class RewriteResult(NamedTuple):
    """Query text with positional markers and the values to bind, in order."""

    sql: str
    parameters: "list[Any]"
