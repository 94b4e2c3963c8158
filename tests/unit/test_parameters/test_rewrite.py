"""Tests for named to positional placeholder rewriting."""

from __future__ import annotations

import re
from typing import Any

import pytest

from sqlbinding.parameters import RewriteResult, positional_run, rewrite

NAMED_PLACEHOLDER = re.compile(r"\[\s*:\s*\w+\s*\]|:\w+")


def test_rewrite_without_placeholders_returns_template_unchanged() -> None:
    assert rewrite("SELECT 1+1 as total", {}) == ("SELECT 1+1 as total", [])


def test_rewrite_without_parameters_argument() -> None:
    result = rewrite("SELECT * FROM users WHERE id = :id")

    assert result.sql == "SELECT * FROM users WHERE id = :id"
    assert result.parameters == []


def test_rewrite_returns_named_tuple() -> None:
    result = rewrite("SELECT :num1+:num2 as total", {"num1": 5, "num2": 3})

    assert isinstance(result, RewriteResult)
    sql, parameters = result
    assert sql == "SELECT ?+? as total"
    assert parameters == [5, 3]


def test_rewrite_array_placeholder_expands_sequence() -> None:
    sql = (
        "SELECT COUNT(*) as count FROM (SELECT 1 as id UNION SELECT 2 UNION SELECT 3 UNION SELECT 4) t "
        "WHERE t.id IN ([:ids])"
    )

    result = rewrite(sql, {"ids": [1, 3, 4]})

    assert "t.id IN (?,?,?)" in result.sql
    assert result.parameters == [1, 3, 4]


def test_rewrite_single_scalar() -> None:
    result = rewrite("SELECT 1 as found FROM (SELECT 1 as id) t WHERE t.id = :id", {"id": 1})

    assert result == ("SELECT 1 as found FROM (SELECT 1 as id) t WHERE t.id = ?", [1])


def test_rewrite_update_statement() -> None:
    result = rewrite(
        "UPDATE test_table SET name = :new_name WHERE name = :old_name", {"new_name": "updated", "old_name": "test"}
    )

    assert result == ("UPDATE test_table SET name = ? WHERE name = ?", ["updated", "test"])


@pytest.mark.parametrize(
    "placeholder",
    [
        pytest.param("[:ids]", id="compact"),
        pytest.param("[: ids]", id="space_after_colon"),
        pytest.param("[ :ids ]", id="space_inside_brackets"),
        pytest.param("[ : ids ]", id="spaces_everywhere"),
        pytest.param("[\n\t:\n ids\n]", id="newlines_and_tabs"),
    ],
)
def test_rewrite_array_placeholder_tolerates_whitespace(placeholder: str) -> None:
    result = rewrite(f"SELECT * FROM t WHERE id IN ({placeholder})", {"ids": (7, 8)})

    assert result.sql == "SELECT * FROM t WHERE id IN (?,?)"
    assert result.parameters == [7, 8]


def test_rewrite_preserves_binding_order_across_mixed_placeholders() -> None:
    sql = "SELECT * FROM t WHERE a = :a AND id IN ([:ids]) AND b = :b"

    result = rewrite(sql, {"b": "bee", "ids": [10, 20, 30], "a": "ay"})

    assert result.sql == "SELECT * FROM t WHERE a = ? AND id IN (?,?,?) AND b = ?"
    assert result.parameters == ["ay", 10, 20, 30, "bee"]


def test_rewrite_leaves_unknown_placeholders_verbatim() -> None:
    result = rewrite("SELECT * FROM t WHERE a = :a AND b = :missing AND c IN ([:others])", {"a": 1})

    assert result.sql == "SELECT * FROM t WHERE a = ? AND b = :missing AND c IN ([:others])"
    assert result.parameters == [1]


def test_rewrite_repeated_name_binds_once_per_occurrence() -> None:
    result = rewrite("SELECT * FROM t WHERE a = :v OR b = :v OR c IN ([:v])", {"v": 4})

    assert result.sql == "SELECT * FROM t WHERE a = ? OR b = ? OR c IN (?)"
    assert result.parameters == [4, 4, 4]


def test_rewrite_repeated_array_expands_each_occurrence() -> None:
    result = rewrite("SELECT * FROM t WHERE a IN ([:ids]) OR b IN ([:ids])", {"ids": [1, 2]})

    assert result.sql == "SELECT * FROM t WHERE a IN (?,?) OR b IN (?,?)"
    assert result.parameters == [1, 2, 1, 2]


def test_rewrite_bracket_and_bare_forms_of_same_name() -> None:
    result = rewrite("SELECT * FROM t WHERE id IN ([:id]) AND parent = :id", {"id": [5, 6]})

    assert result.sql == "SELECT * FROM t WHERE id IN (?,?) AND parent = ?"
    assert result.parameters == [5, 6, [5, 6]]


def test_rewrite_does_not_substitute_prefix_names() -> None:
    result = rewrite("SELECT :id, :id_list, :identifier", {"id": 1, "id_list": 2, "identifier": 3})

    assert result == ("SELECT ?, ?, ?", [1, 2, 3])


def test_rewrite_bracket_placeholder_with_scalar_value() -> None:
    result = rewrite("SELECT * FROM t WHERE id IN ([:id])", {"id": 9})

    assert result == ("SELECT * FROM t WHERE id IN (?)", [9])


@pytest.mark.parametrize(
    "value",
    [
        pytest.param("abc", id="str"),
        pytest.param(b"abc", id="bytes"),
        pytest.param(bytearray(b"abc"), id="bytearray"),
    ],
)
def test_rewrite_bracket_placeholder_treats_strings_as_scalars(value: Any) -> None:
    result = rewrite("SELECT * FROM t WHERE code IN ([:code])", {"code": value})

    assert result.sql == "SELECT * FROM t WHERE code IN (?)"
    assert result.parameters == [value]


def test_rewrite_empty_array_yields_empty_run() -> None:
    result = rewrite("SELECT * FROM t WHERE id IN ([:ids])", {"ids": []})

    assert result.sql == "SELECT * FROM t WHERE id IN ()"
    assert result.parameters == []


def test_rewrite_array_bound_to_bare_placeholder_is_unsupported() -> None:
    """A sequence bound to ``:name`` is passed through as one positional value."""
    result = rewrite("SELECT * FROM t WHERE id IN (:ids)", {"ids": [1, 2, 3]})

    assert result.sql == "SELECT * FROM t WHERE id IN (?)"
    assert result.parameters == [[1, 2, 3]]


def test_rewrite_passes_values_through_unchanged() -> None:
    marker = object()

    result = rewrite("INSERT INTO t VALUES (:a, :b, :c)", {"a": None, "b": marker, "c": 1.5})

    assert result.parameters[0] is None
    assert result.parameters[1] is marker
    assert result.parameters[2] == 1.5


def test_rewrite_does_not_mutate_inputs() -> None:
    ids = [1, 2]
    parameters = {"ids": ids}

    result = rewrite("SELECT * FROM t WHERE id IN ([:ids])", parameters)
    result.parameters.append(3)

    assert ids == [1, 2]
    assert parameters == {"ids": [1, 2]}


def test_rewrite_ignores_malformed_placeholder_syntax() -> None:
    sql = "SELECT ':' AS sep, a::int, [:] FROM t WHERE x = : y AND z IN ([: ])"

    assert rewrite(sql, {"y": 1}) == (sql, [])


def test_rewrite_postgres_cast_is_not_special_cased() -> None:
    result = rewrite("SELECT :value::text", {"value": "1"})

    assert result == ("SELECT ?::text", ["1"])


def test_rewrite_accepts_any_mapping() -> None:
    from types import MappingProxyType

    result = rewrite("SELECT :a", MappingProxyType({"a": 1}))

    assert result == ("SELECT ?", [1])


@pytest.mark.parametrize(
    ("sql", "parameters"),
    [
        pytest.param("SELECT :a, :b", {"a": 1, "b": 2}, id="scalars"),
        pytest.param("SELECT * FROM t WHERE id IN ([:ids]) AND x = :x", {"ids": [1, 2, 3, 4], "x": 0}, id="mixed"),
        pytest.param("SELECT :a WHERE b IN ([ : a ]) OR c IN ([:c])", {"a": [1, 2], "c": (3,)}, id="repeated"),
        pytest.param("SELECT 1", {"unused": 5}, id="unused_binding"),
    ],
)
def test_rewrite_placeholder_count_matches_parameter_count(sql: str, parameters: dict[str, Any]) -> None:
    result = rewrite(sql, parameters)

    assert NAMED_PLACEHOLDER.search(result.sql) is None
    assert result.sql.count("?") == len(result.parameters)


@pytest.mark.parametrize(("count", "expected"), [(0, ""), (1, "?"), (3, "?,?,?")])
def test_positional_run(count: int, expected: str) -> None:
    assert positional_run(count) == expected
