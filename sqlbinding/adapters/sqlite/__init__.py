"""SQLite adapter for sqlbinding."""

from sqlbinding.adapters.sqlite.config import SqliteConfig, SqliteConnectionParams
from sqlbinding.adapters.sqlite.driver import SqliteCursor, SqliteDriver

__all__ = ("SqliteConfig", "SqliteConnectionParams", "SqliteCursor", "SqliteDriver")
