"""Type guard functions for runtime type checking in sqlbinding."""

from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from typing_extensions import TypeGuard

__all__ = ("is_parameter_mapping", "is_sequence_parameter")


def is_sequence_parameter(value: Any) -> "TypeGuard[Sequence[Any]]":
    """Check if a bound value should expand an array placeholder.

    Strings and byte strings are sequences to Python but scalars to SQL.

    Args:
        value: The bound value to check

    Returns:
        True if the value is a non-string sequence, False otherwise
    """
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def is_parameter_mapping(obj: Any) -> "TypeGuard[Mapping[str, Any]]":
    """Check if an object is a name-to-value parameter mapping.

    Args:
        obj: Value to check.

    Returns:
        bool
    """
    return isinstance(obj, Mapping)
