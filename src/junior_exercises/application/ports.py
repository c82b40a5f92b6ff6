"""Callable Protocols the CLI depends on instead of concrete adapters.

Each Protocol mirrors the signature of one adapter function, so plain
functions satisfy it structurally. ``Config`` is only needed for typing.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import TYPE_CHECKING, Any, Protocol

from ..domain.enums import OutputFormat
from ..domain.values import ExerciseInputs

if TYPE_CHECKING:
    from lib_layered_config import Config


class GetConfig(Protocol):
    """Merged configuration for an optional profile."""

    def __call__(self, *, profile: str | None = ..., start_dir: str | None = ...) -> Config: ...


class GetDefaultConfigPath(Protocol):
    """Where the packaged defaultconfig.toml lives."""

    def __call__(self) -> Path: ...


class DisplayConfig(Protocol):
    """Print a configuration, or one section of it."""

    def __call__(
        self, config: Config, *, output_format: OutputFormat = ..., section: str | None = ..., profile: str | None = ...
    ) -> None: ...


class LoadExerciseInputs(Protocol):
    """Build ExerciseInputs from the ``[exercises]`` configuration section."""

    def __call__(self, section: Mapping[str, Any]) -> ExerciseInputs: ...


class WriteLines(Protocol):
    """Write output lines to the console as they are produced."""

    def __call__(self, lines: Iterable[str]) -> int: ...


class InitLogging(Protocol):
    """Start logging from the loaded configuration."""

    def __call__(self, config: Config) -> None: ...


__all__ = [
    "DisplayConfig",
    "GetConfig",
    "GetDefaultConfigPath",
    "InitLogging",
    "LoadExerciseInputs",
    "WriteLines",
]
