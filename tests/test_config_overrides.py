"""Unit tests for CLI configuration overrides (--set SECTION.KEY=VALUE)."""

from __future__ import annotations

import pytest
from lib_layered_config import Config

from junior_exercises.adapters.config.overrides import (
    ConfigOverride,
    _nest_override,
    apply_overrides,
    coerce_value,
    parse_override,
)

# ======================== parse_override tests ========================


@pytest.mark.os_agnostic
def test_parse_override_simple_key() -> None:
    """SECTION.KEY=VALUE produces a single-element key path."""
    result = parse_override("exercises.hours_worked=38")

    assert result == ConfigOverride(section="exercises", key_path=("hours_worked",), value=38)


@pytest.mark.os_agnostic
def test_parse_override_nested_key() -> None:
    """Dots after the section build a multi-element key path."""
    result = parse_override("lib_log_rich.payload_limits.message_max_chars=8192")

    assert result.key_path == ("payload_limits", "message_max_chars")
    assert result.value == 8192


@pytest.mark.os_agnostic
def test_parse_override_value_may_contain_equals() -> None:
    """Only the first '=' splits path from value."""
    assert parse_override("exercises.name=a=b").value == "a=b"


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("raw", "message"),
    [
        ("exercises.age", "expected SECTION.KEY=VALUE"),
        ("age=3", "a key is needed after the section"),
        (".age=3", "empty section name"),
        ("exercises..age=3", "empty key between dots"),
        ("exercises.=3", "empty key between dots"),
    ],
)
def test_parse_override_rejects_malformed_input(raw: str, message: str) -> None:
    """Malformed overrides raise ValueError naming the problem."""
    with pytest.raises(ValueError, match=message):
        parse_override(raw)


# ======================== coerce_value tests ========================


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("raw", "expected"),
    [("true", True), ("42", 42), ("5.5", 5.5), ("null", None), ('["a"]', ["a"]), ("Ada", "Ada"), ("", "")],
)
def test_coerce_value_parses_json_and_falls_back_to_text(raw: str, expected: object) -> None:
    """JSON literals become Python values; anything else stays text."""
    assert coerce_value(raw) == expected


# ======================== _nest_override / apply_overrides ========================


@pytest.mark.os_agnostic
def test_nest_override_refuses_to_descend_into_scalar() -> None:
    """A scalar already at an intermediate key cannot become a table."""
    target: dict[str, dict[str, object]] = {"exercises": {"age": 26}}

    with pytest.raises(TypeError, match="cannot nest below 'age'"):
        _nest_override(target, ConfigOverride(section="exercises", key_path=("age", "years"), value=1))


@pytest.mark.os_agnostic
def test_apply_overrides_merges_into_existing_section() -> None:
    """Overridden keys change; sibling keys survive."""
    config = Config({"exercises": {"age": 26, "name": "Jefry Astacio"}}, {})

    result = apply_overrides(config, ("exercises.age=30",))

    assert result["exercises"]["age"] == 30
    assert result["exercises"]["name"] == "Jefry Astacio"


@pytest.mark.os_agnostic
def test_apply_overrides_creates_missing_section() -> None:
    """Overrides may introduce a section that was not configured."""
    result = apply_overrides(Config({}, {}), ("exercises.inventory_start=5",))

    assert result["exercises"]["inventory_start"] == 5


@pytest.mark.os_agnostic
def test_apply_overrides_without_overrides_returns_same_config() -> None:
    """No overrides, no new Config."""
    config = Config({"exercises": {}}, {})

    assert apply_overrides(config, ()) is config


@pytest.mark.os_agnostic
def test_apply_overrides_last_one_wins() -> None:
    """Repeated keys resolve to the last value given."""
    result = apply_overrides(Config({}, {}), ("exercises.age=1", "exercises.age=2"))

    assert result["exercises"]["age"] == 2
