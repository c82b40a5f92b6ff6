"""In-memory adapters used by ``build_testing`` and the test suite.

Contents:
    * :mod:`.config` - empty configuration, silent display, no-op logging
    * :mod:`.output` - :class:`OutputSpy` recording exercise lines
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .config import (
    display_config_in_memory,
    get_config_in_memory,
    get_default_config_path_in_memory,
    init_logging_in_memory,
)
from .output import OutputSpy

if TYPE_CHECKING:
    from junior_exercises.application.ports import (
        DisplayConfig,
        GetConfig,
        GetDefaultConfigPath,
        InitLogging,
        WriteLines,
    )

    _get_config: GetConfig = get_config_in_memory
    _get_default_config_path: GetDefaultConfigPath = get_default_config_path_in_memory
    _display_config: DisplayConfig = display_config_in_memory
    _init_logging: InitLogging = init_logging_in_memory
    _write_lines: WriteLines = OutputSpy().write_lines

__all__ = [
    "OutputSpy",
    "display_config_in_memory",
    "get_config_in_memory",
    "get_default_config_path_in_memory",
    "init_logging_in_memory",
]
