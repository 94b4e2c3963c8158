"""sqlbinding: named and array-expanding placeholders for positional-parameter SQL APIs."""

from sqlbinding import config, driver, exceptions, parameters, typing, utils
from sqlbinding.__metadata__ import __version__
from sqlbinding.driver import (
    AsyncBindingMixin,
    AsyncStatementExecutor,
    StatementCategory,
    SyncBindingMixin,
    SyncStatementExecutor,
    binding,
    binding_async,
    execute_statement,
    execute_statement_async,
)
from sqlbinding.exceptions import ImproperConfigurationError, MissingDependencyError, SQLBindingError
from sqlbinding.parameters import PlaceholderInfo, PlaceholderStyle, RewriteResult, extract_placeholders, rewrite

__all__ = (
    "AsyncBindingMixin",
    "AsyncStatementExecutor",
    "ImproperConfigurationError",
    "MissingDependencyError",
    "PlaceholderInfo",
    "PlaceholderStyle",
    "RewriteResult",
    "SQLBindingError",
    "StatementCategory",
    "SyncBindingMixin",
    "SyncStatementExecutor",
    "__version__",
    "binding",
    "binding_async",
    "config",
    "driver",
    "exceptions",
    "execute_statement",
    "execute_statement_async",
    "extract_placeholders",
    "parameters",
    "rewrite",
    "typing",
    "utils",
)
