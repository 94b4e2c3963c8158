"""Aiosqlite database configuration."""

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING, Any, ClassVar, Optional, TypedDict, Union

from typing_extensions import NotRequired

from sqlbinding.adapters.aiosqlite.driver import AiosqliteDriver
from sqlbinding.adapters.sqlite.config import normalize_connection_config
from sqlbinding.config import NoPoolAsyncConfig
from sqlbinding.utils.module_loader import ensure_dependency

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    import aiosqlite

__all__ = ("AiosqliteConfig", "AiosqliteConnectionParams")


class AiosqliteConnectionParams(TypedDict, total=False):
    """TypedDict for aiosqlite connection parameters."""

    database: NotRequired[str]
    timeout: NotRequired[float]
    detect_types: NotRequired[int]
    isolation_level: NotRequired[Optional[str]]
    check_same_thread: NotRequired[bool]
    cached_statements: NotRequired[int]
    uri: NotRequired[bool]


class AiosqliteConfig(NoPoolAsyncConfig["aiosqlite.Connection", AiosqliteDriver]):
    """Database configuration for aiosqlite, one connection per session."""

    driver_type: "ClassVar[type[AiosqliteDriver]]" = AiosqliteDriver

    def __init__(
        self, *, connection_config: "Optional[Union[AiosqliteConnectionParams, dict[str, Any]]]" = None
    ) -> None:
        """Initialize aiosqlite configuration.

        Args:
            connection_config: Keyword arguments for :func:`aiosqlite.connect`.

        Raises:
            MissingDependencyError: ``aiosqlite`` is not installed.
        """
        ensure_dependency("aiosqlite")
        super().__init__(connection_config=normalize_connection_config(dict(connection_config or {})))

    async def create_connection(self) -> "aiosqlite.Connection":
        import aiosqlite

        return await aiosqlite.connect(**self.connection_config)

    @asynccontextmanager
    async def provide_connection(self, *args: Any, **kwargs: Any) -> "AsyncGenerator[aiosqlite.Connection, None]":
        """Provide an aiosqlite connection that is closed on exit."""
        connection = await self.create_connection()
        try:
            yield connection
        finally:
            await connection.close()

    @asynccontextmanager
    async def provide_session(self, *args: Any, **kwargs: Any) -> "AsyncGenerator[AiosqliteDriver, None]":
        """Provide an aiosqlite driver session."""
        async with self.provide_connection(*args, **kwargs) as connection:
            yield self.driver_type(connection)
