from collections.abc import Mapping, Sequence
from typing import Any, Union

from typing_extensions import TypeAlias, TypeVar

__all__ = (
    "AffectedRowCount",
    "ConnectionT",
    "DictRow",
    "ParameterMapping",
    "ParameterValue",
    "StatementResult",
)

ConnectionT = TypeVar("ConnectionT")
"""Type variable for a DB-API style connection."""

ParameterValue: TypeAlias = Union[Any, Sequence[Any]]
"""A bound value: an opaque scalar, or a sequence of scalars for ``[:name]``."""
ParameterMapping: TypeAlias = Mapping[str, ParameterValue]
"""Placeholder name to value mapping."""
DictRow: TypeAlias = dict[str, Any]
"""A result row keyed by column name."""
AffectedRowCount: TypeAlias = int
StatementResult: TypeAlias = Union[list[DictRow], bool, AffectedRowCount]
"""Row list for reads, success flag or affected row count for writes."""
