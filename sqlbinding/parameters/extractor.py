"""Named placeholder extraction.

Scans a query template for ``:name`` and ``[:name]`` occurrences. No SQL
awareness: quoted strings and comments are scanned like any other text.
"""

import re
from typing import Final

from sqlbinding.parameters.types import PlaceholderInfo, PlaceholderStyle

__all__ = ("PLACEHOLDER_REGEX", "extract_placeholders", "has_placeholders")


# The bracketed alternative must come first so ``[:ids]`` is not read as a bare ``:ids``.
PLACEHOLDER_REGEX: Final = re.compile(
    r"""
    (?P<array>\[\s*:\s*(?P<array_name>[A-Za-z0-9_]+)\s*\]) |   # [:name], [ : name ]
    (?P<scalar>:(?P<scalar_name>[A-Za-z0-9_]+))                # :name
    """,
    re.VERBOSE,
)


def extract_placeholders(sql: str) -> "list[PlaceholderInfo]":
    """Extract every named placeholder occurrence from a query template.

    Args:
        sql: Query template to scan.

    Returns:
        Placeholder occurrences in left-to-right order.
    """
    placeholders: list[PlaceholderInfo] = []
    for ordinal, match in enumerate(PLACEHOLDER_REGEX.finditer(sql)):
        name = match.group("scalar_name")
        if name is not None:
            style = PlaceholderStyle.SCALAR
        else:
            name = match.group("array_name")
            style = PlaceholderStyle.ARRAY
        placeholders.append(
            PlaceholderInfo(
                name=name, style=style, position=match.start(), ordinal=ordinal, placeholder_text=match.group(0)
            )
        )
    return placeholders


def has_placeholders(sql: str) -> bool:
    """Quick check if a query template contains any named placeholder."""
    return PLACEHOLDER_REGEX.search(sql) is not None
