import contextlib
import sqlite3
from typing import TYPE_CHECKING, Any, Optional

from sqlbinding.driver import SyncBindingMixin
from sqlbinding.utils.logging import get_logger

if TYPE_CHECKING:
    from sqlbinding.typing import DictRow

__all__ = ("SqliteCursor", "SqliteDriver")

logger = get_logger("adapters.sqlite")


class SqliteCursor:
    """Context manager for SQLite cursor management."""

    __slots__ = ("connection", "cursor")

    def __init__(self, connection: "sqlite3.Connection") -> None:
        self.connection = connection
        self.cursor: Optional[sqlite3.Cursor] = None

    def __enter__(self) -> "sqlite3.Cursor":
        self.cursor = self.connection.cursor()
        return self.cursor

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        if self.cursor is not None:
            with contextlib.suppress(sqlite3.Error):
                self.cursor.close()


class SqliteDriver(SyncBindingMixin):
    """Statement executor over a ``sqlite3`` connection.

    Database errors are raised as ``sqlite3`` raised them.
    """

    __slots__ = ("connection",)
    dialect = "sqlite"

    def __init__(self, connection: "sqlite3.Connection") -> None:
        self.connection = connection

    def with_cursor(self, connection: "sqlite3.Connection") -> SqliteCursor:
        return SqliteCursor(connection)

    def _execute_for_row_count(self, sql: str, parameters: "list[Any]") -> int:
        with self.with_cursor(self.connection) as cursor:
            cursor.execute(sql, parameters)
            # sqlite reports -1 for statements that do not modify rows
            return max(cursor.rowcount, 0)

    def _execute_for_success(self, sql: str, parameters: "list[Any]") -> bool:
        with self.with_cursor(self.connection) as cursor:
            cursor.execute(sql, parameters)
        return True

    def select(self, sql: str, parameters: "list[Any]") -> "list[DictRow]":
        with self.with_cursor(self.connection) as cursor:
            cursor.execute(sql, parameters)
            column_names = [col[0] for col in cursor.description or []]
            rows = [dict(zip(column_names, row)) for row in cursor.fetchall()]
        logger.debug("Fetched %d rows", len(rows))
        return rows

    def insert(self, sql: str, parameters: "list[Any]") -> bool:
        return self._execute_for_success(sql, parameters)

    def update(self, sql: str, parameters: "list[Any]") -> int:
        return self._execute_for_row_count(sql, parameters)

    def delete(self, sql: str, parameters: "list[Any]") -> int:
        return self._execute_for_row_count(sql, parameters)

    def statement(self, sql: str, parameters: "list[Any]") -> bool:
        return self._execute_for_success(sql, parameters)

    def affecting_statement(self, sql: str, parameters: "list[Any]") -> int:
        return self._execute_for_row_count(sql, parameters)
