"""Asynchronous binding layer."""

from typing import TYPE_CHECKING, Any, Optional, Protocol, runtime_checkable

from sqlbinding.driver._common import StatementCategory, log_dispatch, prepare_binding

if TYPE_CHECKING:
    from sqlbinding.driver._common import StatementCategoryLike
    from sqlbinding.typing import DictRow, ParameterMapping, StatementResult

__all__ = ("AsyncBindingMixin", "AsyncStatementExecutor", "binding_async", "execute_statement_async")


@runtime_checkable
class AsyncStatementExecutor(Protocol):
    """Executes statements that use positional ``?`` placeholders."""

    async def select(self, sql: str, parameters: "list[Any]") -> "list[DictRow]": ...  # pragma: no cover

    async def insert(self, sql: str, parameters: "list[Any]") -> bool: ...  # pragma: no cover

    async def update(self, sql: str, parameters: "list[Any]") -> int: ...  # pragma: no cover

    async def delete(self, sql: str, parameters: "list[Any]") -> int: ...  # pragma: no cover

    async def statement(self, sql: str, parameters: "list[Any]") -> bool: ...  # pragma: no cover

    async def affecting_statement(self, sql: str, parameters: "list[Any]") -> int: ...  # pragma: no cover


async def execute_statement_async(
    executor: AsyncStatementExecutor, category: "StatementCategoryLike", sql: str, parameters: "list[Any]"
) -> "StatementResult":
    """Async counterpart of :func:`sqlbinding.driver.execute_statement`."""
    category = StatementCategory.from_value(category)
    log_dispatch(category, sql, parameters)
    if category is StatementCategory.SELECT:
        return await executor.select(sql, parameters)
    if category is StatementCategory.INSERT:
        return await executor.insert(sql, parameters)
    if category is StatementCategory.UPDATE:
        return await executor.update(sql, parameters)
    if category is StatementCategory.DELETE:
        return await executor.delete(sql, parameters)
    if category is StatementCategory.STATEMENT:
        return await executor.statement(sql, parameters)
    return await executor.affecting_statement(sql, parameters)


async def binding_async(
    executor: AsyncStatementExecutor,
    sql: str,
    bindings: "Optional[ParameterMapping]" = None,
    statement_type: "StatementCategoryLike" = StatementCategory.SELECT,
) -> "StatementResult":
    """Execute a statement written with named placeholders.

    Example:
        >>> await binding_async(driver, "SELECT * FROM users WHERE id IN ([:ids]) AND status = :status", {"ids": [1, 2, 3], "status": "active"})
        >>> await binding_async(driver, "DELETE FROM users WHERE id = :id", {"id": 1}, "delete")

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
    return await execute_statement_async(executor, category, prepared.sql, prepared.parameters)


class AsyncBindingMixin:
    """Adds :meth:`binding` to a class implementing :class:`AsyncStatementExecutor`."""

    __slots__ = ()

    async def binding(
        self,
        sql: str,
        bindings: "Optional[ParameterMapping]" = None,
        statement_type: "StatementCategoryLike" = StatementCategory.SELECT,
    ) -> "StatementResult":
        """Rewrite named placeholders and execute on this executor."""
        return await binding_async(self, sql, bindings, statement_type)  # type: ignore[arg-type]
