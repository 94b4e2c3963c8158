"""SQLite database configuration."""

import sqlite3
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any, ClassVar, Optional, TypedDict, Union

from typing_extensions import NotRequired

from sqlbinding.adapters.sqlite.driver import SqliteDriver
from sqlbinding.config import NoPoolSyncConfig
from sqlbinding.utils.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Generator

__all__ = ("SqliteConfig", "SqliteConnectionParams")

logger = get_logger("adapters.sqlite")


class SqliteConnectionParams(TypedDict, total=False):
    """SQLite connection parameters."""

    database: NotRequired[str]
    timeout: NotRequired[float]
    detect_types: NotRequired[int]
    isolation_level: "NotRequired[Optional[str]]"
    check_same_thread: NotRequired[bool]
    cached_statements: NotRequired[int]
    uri: NotRequired[bool]


def normalize_connection_config(connection_config: "Optional[dict[str, Any]]") -> "dict[str, Any]":
    """Apply sqlite defaults shared by the sync and async configurations.

    An unset database means ``:memory:``. An unset ``isolation_level`` means
    autocommit, so each write is visible as soon as it returns.
    """
    config = dict(connection_config or {})
    config.setdefault("database", ":memory:")
    config.setdefault("isolation_level", None)
    database_path = str(config["database"])
    if database_path.startswith("file:") and not config.get("uri"):
        logger.debug("Database URI detected (%s) but uri=True not set. Enabling URI mode.", database_path)
        config["uri"] = True
    return config


class SqliteConfig(NoPoolSyncConfig[sqlite3.Connection, SqliteDriver]):
    """SQLite configuration, one connection per session."""

    driver_type: "ClassVar[type[SqliteDriver]]" = SqliteDriver
    connection_type: "ClassVar[type[sqlite3.Connection]]" = sqlite3.Connection

    def __init__(self, *, connection_config: "Optional[Union[SqliteConnectionParams, dict[str, Any]]]" = None) -> None:
        """Initialize SQLite configuration.

        Args:
            connection_config: Keyword arguments for :func:`sqlite3.connect`.
        """
        super().__init__(connection_config=normalize_connection_config(dict(connection_config or {})))

    def create_connection(self) -> sqlite3.Connection:
        return sqlite3.connect(**self.connection_config)

    @contextmanager
    def provide_connection(self, *args: Any, **kwargs: Any) -> "Generator[sqlite3.Connection, None, None]":
        """Provide a SQLite connection that is closed on exit."""
        connection = self.create_connection()
        try:
            yield connection
        finally:
            connection.close()

    @contextmanager
    def provide_session(self, *args: Any, **kwargs: Any) -> "Generator[SqliteDriver, None, None]":
        """Provide a SQLite driver session.

        Yields:
            SqliteDriver: A driver bound to a fresh connection
        """
        with self.provide_connection(*args, **kwargs) as connection:
            yield self.driver_type(connection)
