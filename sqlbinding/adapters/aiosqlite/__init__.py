"""Aiosqlite adapter for sqlbinding. Requires the ``aiosqlite`` extra."""

from sqlbinding.adapters.aiosqlite.config import AiosqliteConfig, AiosqliteConnectionParams
from sqlbinding.adapters.aiosqlite.driver import AiosqliteCursor, AiosqliteDriver

__all__ = ("AiosqliteConfig", "AiosqliteConnectionParams", "AiosqliteCursor", "AiosqliteDriver")
