"""Shared pieces of the sync and async binding layers."""

import logging
from enum import Enum
from typing import TYPE_CHECKING, Any, Optional, Union

from sqlbinding.exceptions import ImproperConfigurationError
from sqlbinding.parameters import rewrite
from sqlbinding.utils.logging import get_logger, log_with_context

if TYPE_CHECKING:
    from sqlbinding.parameters import RewriteResult
    from sqlbinding.typing import ParameterMapping

__all__ = ("StatementCategory", "StatementCategoryLike", "log_dispatch", "prepare_binding")

logger = get_logger("driver")


class StatementCategory(str, Enum):
    """Execution categories a bound statement can be dispatched to.

    Each member names the executor method that runs the statement and fixes the
    shape of its result.
    """

    SELECT = "select"
    """Read query. Returns a list of rows."""
    INSERT = "insert"
    """Insert. Returns ``True`` on success."""
    UPDATE = "update"
    """Update. Returns the affected row count."""
    DELETE = "delete"
    """Delete. Returns the affected row count."""
    STATEMENT = "statement"
    """Generic statement (DDL and the like). Returns ``True`` on success."""
    AFFECTING_STATEMENT = "affecting_statement"
    """Any statement whose affected row count is wanted."""

    def __str__(self) -> str:
        return self.value

    @property
    def returns_rows(self) -> bool:
        return self is StatementCategory.SELECT

    @property
    def returns_row_count(self) -> bool:
        return self in {StatementCategory.UPDATE, StatementCategory.DELETE, StatementCategory.AFFECTING_STATEMENT}

    @classmethod
    def from_value(cls, value: "StatementCategoryLike") -> "StatementCategory":
        """Resolve a category from a member, its value or its name.

        Matching is case-insensitive and accepts the camel-case spelling
        ``affectingStatement``.

        Args:
            value: Category member or string.

        Raises:
            ImproperConfigurationError: The value names no category.

        Returns:
            The matching category.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            normalized = value.strip().lower()
            if normalized == "affectingstatement":
                return cls.AFFECTING_STATEMENT
            for member in cls:
                if normalized in {member.value, member.name.lower()}:
                    return member
        valid = ", ".join(member.value for member in cls)
        msg = f"Unknown statement category {value!r}. Expected one of: {valid}"
        raise ImproperConfigurationError(msg)


StatementCategoryLike = Union[StatementCategory, str]


def prepare_binding(sql: str, bindings: "Optional[ParameterMapping]" = None) -> "RewriteResult":
    """Rewrite named placeholders and log the prepared statement.

    Args:
        sql: Query template with named placeholders.
        bindings: Placeholder name to value mapping.

    Returns:
        Rewritten query and positional values.
    """
    prepared = rewrite(sql, bindings)
    log_with_context(
        logger,
        logging.DEBUG,
        "Prepared bound statement",
        sql=prepared.sql,
        parameter_count=len(prepared.parameters),
        binding_names=sorted(bindings) if bindings else [],
    )
    return prepared


def log_dispatch(category: StatementCategory, sql: str, parameters: "list[Any]") -> None:
    log_with_context(
        logger, logging.DEBUG, "Dispatching statement", category=category.value, sql=sql, parameter_count=len(parameters)
    )
