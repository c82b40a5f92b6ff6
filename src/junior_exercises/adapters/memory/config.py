"""Stand-ins for the configuration and logging adapters.

Nothing here touches the filesystem or the lib_log_rich runtime: the
configuration is always empty, so exercise settings resolve to the values
baked into :class:`~junior_exercises.domain.values.ExerciseInputs`.
"""

from __future__ import annotations

import tempfile
from pathlib import Path

from lib_layered_config import Config

from ...domain.enums import OutputFormat


def get_config_in_memory(*, profile: str | None = None, start_dir: str | None = None) -> Config:
    """Return a Config with no sections, whatever the profile."""
    return Config({}, {})


def get_default_config_path_in_memory() -> Path:
    """Return a path under the temp directory; the file is never created."""
    return Path(tempfile.gettempdir()) / "junior_exercises" / "defaultconfig.toml"


def display_config_in_memory(
    config: Config,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    section: str | None = None,
    profile: str | None = None,
) -> None:
    """Discard the display request."""


def init_logging_in_memory(config: Config) -> None:
    """Leave the lib_log_rich runtime untouched."""


__all__ = [
    "display_config_in_memory",
    "get_config_in_memory",
    "get_default_config_path_in_memory",
    "init_logging_in_memory",
]
