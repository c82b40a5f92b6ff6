"""Parse and apply ``--set SECTION.KEY=VALUE`` CLI overrides to Config."""

from __future__ import annotations

from dataclasses import dataclass
from typing import cast

import orjson
from lib_layered_config import Config

CoercedValue = str | int | float | bool | None | list[object] | dict[str, object]
"""Union of types that :func:`coerce_value` can produce."""


@dataclass(frozen=True, slots=True)
class ConfigOverride:
    """A single parsed configuration override."""

    section: str
    key_path: tuple[str, ...]
    value: CoercedValue


def parse_override(raw: str) -> ConfigOverride:
    """Split a ``SECTION.KEY[.SUBKEY...]=VALUE`` string into a ConfigOverride.

    The first dot separates the section from the key path and the first
    ``=`` separates the dotted path from the value, so values may contain
    further ``=`` or ``.`` characters.

    Raises:
        ValueError: If the string lacks ``=``, has no dot in the key, or has
            empty section/key components.

    Examples:
        >>> override = parse_override("exercises.hours_worked=38")
        >>> override.section, override.key_path, override.value
        ('exercises', ('hours_worked',), 38)

        >>> parse_override("exercises.name=A=B").value
        'A=B'
    """
    path_part, sep, value_str = raw.partition("=")
    if not sep:
        raise ValueError(f"--set {raw!r}: expected SECTION.KEY=VALUE")
    if "." not in path_part:
        raise ValueError(f"--set {raw!r}: a key is needed after the section, e.g. exercises.age=30")

    section, *key_parts = path_part.split(".")
    if not section:
        raise ValueError(f"--set {raw!r}: empty section name")
    if not all(key_parts):
        raise ValueError(f"--set {raw!r}: empty key between dots")

    return ConfigOverride(section=section, key_path=tuple(key_parts), value=coerce_value(value_str))


def coerce_value(raw: str) -> CoercedValue:
    """Coerce a raw string with JSON parsing, falling back to the string itself.

    Examples:
        >>> coerce_value("true"), coerce_value("42"), coerce_value("5.5")
        (True, 42, 5.5)
        >>> coerce_value("abc")
        'abc'
        >>> coerce_value("")
        ''
    """
    if raw == "":
        return ""
    try:
        return orjson.loads(raw)
    except (orjson.JSONDecodeError, ValueError):
        return raw


def _nest_override(target: dict[str, dict[str, object]], override: ConfigOverride) -> None:
    """Insert ``override`` into a nested dict, creating intermediate tables.

    Raises:
        TypeError: If an intermediate key already holds a non-dict value.

    Example:
        >>> d: dict[str, dict[str, object]] = {}
        >>> _nest_override(d, ConfigOverride(section="s", key_path=("x", "y"), value=3))
        >>> d["s"]["x"]["y"]
        3
    """
    table: dict[str, object] = target.setdefault(override.section, {})
    *parents, leaf = override.key_path
    for key in parents:
        child = table.setdefault(key, {})
        if not isinstance(child, dict):
            raise TypeError(f"--set cannot nest below {key!r}: it already holds a {type(child).__name__}")
        table = cast("dict[str, object]", child)
    table[leaf] = override.value


def apply_overrides(config: Config, raw_overrides: tuple[str, ...]) -> Config:
    """Deep-merge CLI overrides into a Config instance.

    Args:
        config: Original immutable Config from file/env layers.
        raw_overrides: Tuple of ``SECTION.KEY=VALUE`` strings from ``--set``.

    Returns:
        New Config with overrides applied, or ``config`` itself when
        ``raw_overrides`` is empty.

    Raises:
        ValueError: If any override string is malformed.

    Examples:
        >>> cfg = Config({"exercises": {"age": 26}}, {})
        >>> apply_overrides(cfg, ("exercises.age=30",))["exercises"]["age"]
        30
        >>> apply_overrides(cfg, ()) is cfg
        True
    """
    if not raw_overrides:
        return config

    merged: dict[str, dict[str, object]] = {}
    for raw in raw_overrides:
        _nest_override(merged, parse_override(raw))
    return config.with_overrides(merged)


__all__ = [
    "CoercedValue",
    "ConfigOverride",
    "apply_overrides",
    "coerce_value",
    "parse_override",
]
