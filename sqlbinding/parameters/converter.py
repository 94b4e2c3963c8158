"""Named to positional (qmark) placeholder rewriting."""

from collections.abc import Mapping
from typing import Any, Final, Optional

from sqlbinding.parameters.extractor import extract_placeholders
from sqlbinding.parameters.types import PlaceholderStyle, RewriteResult
from sqlbinding.utils.type_guards import is_sequence_parameter

__all__ = ("POSITIONAL_PLACEHOLDER", "positional_run", "rewrite")

POSITIONAL_PLACEHOLDER: Final = "?"


def positional_run(count: int) -> str:
    """Build a comma-joined run of ``count`` positional markers.

    ``positional_run(0)`` is the empty string.
    """
    return ",".join([POSITIONAL_PLACEHOLDER] * count)


def rewrite(sql: str, parameters: "Optional[Mapping[str, Any]]" = None) -> RewriteResult:
    """Convert named placeholders to positional ``?`` markers.

    ``:name`` is replaced by a single ``?``. ``[:name]`` bound to a sequence is
    replaced by one ``?`` per element and the elements are bound in order; bound
    to anything else it behaves like ``:name``. Each occurrence is handled on its
    own, so a repeated name binds its value once per occurrence. Names missing
    from ``parameters`` are left in the text and bind nothing.

    A zero-length sequence produces an empty run (``IN ()``). Avoiding that is
    up to the caller.

    Args:
        sql: Query template with named placeholders.
        parameters: Mapping of placeholder names to values.

    Returns:
        The rewritten query and the positional values in binding order.

    Example:
        >>> rewrite("SELECT * FROM t WHERE id IN ([:ids]) AND kind = :kind", {"ids": [1, 2], "kind": "a"})
        RewriteResult(sql='SELECT * FROM t WHERE id IN (?,?) AND kind = ?', parameters=[1, 2, 'a'])
    """
    if not parameters:
        return RewriteResult(sql, [])

    fragments: list[str] = []
    positional: list[Any] = []
    cursor = 0
    for placeholder in extract_placeholders(sql):
        if placeholder.name not in parameters:
            continue
        value = parameters[placeholder.name]
        fragments.append(sql[cursor : placeholder.position])
        if placeholder.style is PlaceholderStyle.ARRAY and is_sequence_parameter(value):
            positional.extend(value)
            fragments.append(positional_run(len(value)))
        else:
            positional.append(value)
            fragments.append(POSITIONAL_PLACEHOLDER)
        cursor = placeholder.end
    fragments.append(sql[cursor:])
    return RewriteResult("".join(fragments), positional)
