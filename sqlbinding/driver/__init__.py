"""Binding layer: rewrite named placeholders, then dispatch by statement category."""

from sqlbinding.driver._async import AsyncBindingMixin, AsyncStatementExecutor, binding_async, execute_statement_async
from sqlbinding.driver._common import StatementCategory, StatementCategoryLike, prepare_binding
from sqlbinding.driver._sync import SyncBindingMixin, SyncStatementExecutor, binding, execute_statement

__all__ = (
    "AsyncBindingMixin",
    "AsyncStatementExecutor",
    "StatementCategory",
    "StatementCategoryLike",
    "SyncBindingMixin",
    "SyncStatementExecutor",
    "binding",
    "binding_async",
    "execute_statement",
    "execute_statement_async",
    "prepare_binding",
)
