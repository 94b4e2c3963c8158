import contextlib
import sqlite3
from typing import TYPE_CHECKING, Any, Optional

from sqlbinding.driver import AsyncBindingMixin
from sqlbinding.utils.logging import get_logger

if TYPE_CHECKING:
    import aiosqlite

    from sqlbinding.typing import DictRow

__all__ = ("AiosqliteCursor", "AiosqliteDriver")

logger = get_logger("adapters.aiosqlite")


class AiosqliteCursor:
    """Async context manager for aiosqlite cursor management."""

    __slots__ = ("connection", "cursor")

    def __init__(self, connection: "aiosqlite.Connection") -> None:
        self.connection = connection
        self.cursor: "Optional[aiosqlite.Cursor]" = None

    async def __aenter__(self) -> "aiosqlite.Cursor":
        self.cursor = await self.connection.cursor()
        return self.cursor

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        if self.cursor is not None:
            with contextlib.suppress(sqlite3.Error):
                await self.cursor.close()


class AiosqliteDriver(AsyncBindingMixin):
    """Async statement executor over an ``aiosqlite`` connection."""

    __slots__ = ("connection",)
    dialect = "sqlite"

    def __init__(self, connection: "aiosqlite.Connection") -> None:
        self.connection = connection

    def with_cursor(self, connection: "aiosqlite.Connection") -> AiosqliteCursor:
        return AiosqliteCursor(connection)

    async def _execute_for_row_count(self, sql: str, parameters: "list[Any]") -> int:
        async with self.with_cursor(self.connection) as cursor:
            await cursor.execute(sql, parameters)
            return max(cursor.rowcount, 0)

    async def _execute_for_success(self, sql: str, parameters: "list[Any]") -> bool:
        async with self.with_cursor(self.connection) as cursor:
            await cursor.execute(sql, parameters)
        return True

    async def select(self, sql: str, parameters: "list[Any]") -> "list[DictRow]":
        async with self.with_cursor(self.connection) as cursor:
            await cursor.execute(sql, parameters)
            column_names = [col[0] for col in cursor.description or []]
            rows = [dict(zip(column_names, row)) for row in await cursor.fetchall()]
        logger.debug("Fetched %d rows", len(rows))
        return rows

    async def insert(self, sql: str, parameters: "list[Any]") -> bool:
        return await self._execute_for_success(sql, parameters)

    async def update(self, sql: str, parameters: "list[Any]") -> int:
        return await self._execute_for_row_count(sql, parameters)

    async def delete(self, sql: str, parameters: "list[Any]") -> int:
        return await self._execute_for_row_count(sql, parameters)

    async def statement(self, sql: str, parameters: "list[Any]") -> bool:
        return await self._execute_for_success(sql, parameters)

    async def affecting_statement(self, sql: str, parameters: "list[Any]") -> int:
        return await self._execute_for_row_count(sql, parameters)
