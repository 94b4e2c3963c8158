"""Synchronous binding layer."""

from typing import TYPE_CHECKING, Any, Optional, Protocol, runtime_checkable

from sqlbinding.driver._common import StatementCategory, log_dispatch, prepare_binding

if TYPE_CHECKING:
    from sqlbinding.driver._common import StatementCategoryLike
    from sqlbinding.typing import DictRow, ParameterMapping, StatementResult

__all__ = ("SyncBindingMixin", "SyncStatementExecutor", "binding", "execute_statement")


@runtime_checkable
class SyncStatementExecutor(Protocol):
    """Executes statements that use positional ``?`` placeholders."""

    def select(self, sql: str, parameters: "list[Any]") -> "list[DictRow]": ...  # pragma: no cover

    def insert(self, sql: str, parameters: "list[Any]") -> bool: ...  # pragma: no cover

    def update(self, sql: str, parameters: "list[Any]") -> int: ...  # pragma: no cover

    def delete(self, sql: str, parameters: "list[Any]") -> int: ...  # pragma: no cover

    def statement(self, sql: str, parameters: "list[Any]") -> bool: ...  # pragma: no cover

    def affecting_statement(self, sql: str, parameters: "list[Any]") -> int: ...  # pragma: no cover


def execute_statement(
    executor: SyncStatementExecutor, category: "StatementCategoryLike", sql: str, parameters: "list[Any]"
) -> "StatementResult":
    """Run an already rewritten statement with the executor method for ``category``.

    Errors raised by the executor propagate unchanged.

    Args:
        executor: Statement executor.
        category: Statement category, member or string.
        sql: Query with positional placeholders.
        parameters: Positional values.

    Raises:
        ImproperConfigurationError: ``category`` names no statement category.

    Returns:
        Rows for ``select``, a success flag or an affected row count otherwise.
    """
    category = StatementCategory.from_value(category)
    log_dispatch(category, sql, parameters)
    if category is StatementCategory.SELECT:
        return executor.select(sql, parameters)
    if category is StatementCategory.INSERT:
        return executor.insert(sql, parameters)
    if category is StatementCategory.UPDATE:
        return executor.update(sql, parameters)
    if category is StatementCategory.DELETE:
        return executor.delete(sql, parameters)
    if category is StatementCategory.STATEMENT:
        return executor.statement(sql, parameters)
    return executor.affecting_statement(sql, parameters)


def binding(
    executor: SyncStatementExecutor,
    sql: str,
    bindings: "Optional[ParameterMapping]" = None,
    statement_type: "StatementCategoryLike" = StatementCategory.SELECT,
) -> "StatementResult":
    """Execute a statement written with named placeholders.

    Example:
        >>> binding(driver, "SELECT * FROM users WHERE id IN ([:ids]) AND status = :status", {"ids": [1, 2, 3], "status": "active"})
        >>> binding(driver, "DELETE FROM users WHERE id = :id", {"id": 1}, "delete")

    Args:
        executor: Statement executor.
        sql: Query template with ``:name`` and ``[:name]`` placeholders.
        bindings: Placeholder name to value mapping.
        statement_type: Statement category. Defaults to ``select``.

    Returns:
        The executor result for the category.
    """
    category = StatementCategory.from_value(statement_type)
    prepared = prepare_binding(sql, bindings)
    return execute_statement(executor, category, prepared.sql, prepared.parameters)


class SyncBindingMixin:
    """Adds :meth:`binding` to a class implementing :class:`SyncStatementExecutor`."""

    __slots__ = ()

    def binding(
        self,
        sql: str,
        bindings: "Optional[ParameterMapping]" = None,
        statement_type: "StatementCategoryLike" = StatementCategory.SELECT,
    ) -> "StatementResult":
        """Rewrite named placeholders and execute on this executor."""
        return binding(self, sql, bindings, statement_type)  # type: ignore[arg-type]
