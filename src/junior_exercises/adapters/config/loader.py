"""Read the layered configuration for junior_exercises.

Layers, lowest precedence first: bundled ``defaultconfig.toml``, app,
host, user, ``.env``, environment variables. A profile inserts a
``profile/<name>/`` directory into each file layer.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Protocol, cast

from lib_layered_config import DEFAULT_MAX_PROFILE_LENGTH, Config, read_config, validate_profile_name

from junior_exercises import __init__conf__

_DEFAULT_CONFIG_FILE = "defaultconfig.toml"


class CachedConfigLoader(Protocol):
    """``get_config`` signature plus the cache reset used by tests."""

    def __call__(self, *, profile: str | None = None, start_dir: str | None = None) -> Config: ...
    def cache_clear(self) -> None: ...


def validate_profile(profile: str, max_length: int = DEFAULT_MAX_PROFILE_LENGTH) -> None:
    """Reject profile names that could escape the configuration directories.

    Raises:
        ValueError: Empty, overlong, or containing path characters.

    Examples:
        >>> validate_profile("classroom")
        >>> validate_profile("../up")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ValueError: ...
    """
    validate_profile_name(profile, max_length=max_length)


@lru_cache(maxsize=1)
def get_default_config_path() -> Path:
    """Location of the bundled defaults shipped inside the package.

    Example:
        >>> get_default_config_path().is_file()
        True
    """
    return Path(__file__).with_name(_DEFAULT_CONFIG_FILE)


@lru_cache(maxsize=4)
def _read_layers(profile: str | None, start_dir: str | None) -> Config:
    return read_config(
        vendor=__init__conf__.LAYEREDCONF_VENDOR,
        app=__init__conf__.LAYEREDCONF_APP,
        slug=__init__conf__.LAYEREDCONF_SLUG,
        profile=profile,
        default_file=get_default_config_path(),
        start_dir=start_dir,
    )


def _load(*, profile: str | None = None, start_dir: str | None = None) -> Config:
    """Return the merged configuration, read once per profile and start dir.

    Args:
        profile: Named profile, validated before any path is built.
        start_dir: Where ``.env`` discovery begins; the working directory
            when omitted.

    Raises:
        ValueError: If ``profile`` is not a valid name.

    Example:
        >>> get_config().get("exercises", default={})["hours_worked"]
        45
    """
    if profile is not None:
        validate_profile(profile)
    return _read_layers(profile, start_dir)


_load.cache_clear = _read_layers.cache_clear  # type: ignore[attr-defined]
get_config = cast(CachedConfigLoader, _load)


__all__ = ["get_config", "get_default_config_path", "validate_profile"]
