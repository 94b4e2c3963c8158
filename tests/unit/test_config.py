"""Unit tests for the sqlite and aiosqlite configurations."""

import sqlite3
from unittest.mock import patch

import pytest

from sqlbinding.adapters.aiosqlite import AiosqliteConfig, AiosqliteDriver
from sqlbinding.adapters.sqlite import SqliteConfig, SqliteDriver
from sqlbinding.exceptions import MissingDependencyError


def test_sqlite_config_defaults() -> None:
    config = SqliteConfig()

    assert config.connection_config == {"database": ":memory:", "isolation_level": None}
    assert config.is_async is False
    assert config.driver_type is SqliteDriver


def test_sqlite_config_keeps_explicit_values() -> None:
    config = SqliteConfig(connection_config={"database": "app.db", "isolation_level": "DEFERRED", "timeout": 2.0})

    assert config.connection_config == {"database": "app.db", "isolation_level": "DEFERRED", "timeout": 2.0}


def test_sqlite_config_enables_uri_mode_for_file_urls() -> None:
    config = SqliteConfig(connection_config={"database": "file:memdb1?mode=memory&cache=shared"})

    assert config.connection_config["uri"] is True


def test_sqlite_config_does_not_mutate_input() -> None:
    params = {"database": ":memory:"}

    SqliteConfig(connection_config=params)

    assert params == {"database": ":memory:"}


def test_sqlite_config_equality_and_repr() -> None:
    assert SqliteConfig() == SqliteConfig()
    assert SqliteConfig() != SqliteConfig(connection_config={"database": "other.db"})
    assert repr(SqliteConfig()).startswith("SqliteConfig(connection_config=")


def test_sqlite_provide_connection_closes_on_exit() -> None:
    config = SqliteConfig()

    with config.provide_connection() as connection:
        assert connection.execute("SELECT 1").fetchone() == (1,)

    with pytest.raises(sqlite3.ProgrammingError):
        connection.execute("SELECT 1")


def test_sqlite_provide_session_yields_driver() -> None:
    with SqliteConfig().provide_session() as session:
        assert isinstance(session, SqliteDriver)
        assert session.dialect == "sqlite"


def test_aiosqlite_config_defaults() -> None:
    config = AiosqliteConfig()

    assert config.connection_config == {"database": ":memory:", "isolation_level": None}
    assert config.is_async is True
    assert config.driver_type is AiosqliteDriver


def test_aiosqlite_config_requires_dependency() -> None:
    with patch("sqlbinding.utils.module_loader.find_spec", return_value=None):
        with pytest.raises(MissingDependencyError, match="aiosqlite"):
            AiosqliteConfig()
