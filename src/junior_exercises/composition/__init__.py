"""Composition root: the only place where adapters meet the ports.

:func:`build_production` is handed to the CLI by the console script and
``python -m``; :func:`build_testing` swaps every side effect for an
in-memory stand-in while keeping the real ``[exercises]`` validation.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..adapters.config.display import display_config
from ..adapters.config.exercises import load_exercise_inputs
from ..adapters.config.loader import get_config, get_default_config_path
from ..adapters.console.writer import write_lines
from ..adapters.logging.setup import init_logging

if TYPE_CHECKING:
    from ..adapters.memory.output import OutputSpy
    from ..application.ports import (
        DisplayConfig,
        GetConfig,
        GetDefaultConfigPath,
        InitLogging,
        LoadExerciseInputs,
        WriteLines,
    )

    _get_config: GetConfig = get_config
    _get_default_config_path: GetDefaultConfigPath = get_default_config_path
    _display_config: DisplayConfig = display_config
    _load_exercise_inputs: LoadExerciseInputs = load_exercise_inputs
    _write_lines: WriteLines = write_lines
    _init_logging: InitLogging = init_logging


@dataclass(frozen=True, slots=True)
class AppServices:
    """Port implementations handed to the CLI through ``ctx.obj``."""

    get_config: GetConfig
    get_default_config_path: GetDefaultConfigPath
    display_config: DisplayConfig
    load_exercise_inputs: LoadExerciseInputs
    write_lines: WriteLines
    init_logging: InitLogging


def build_production() -> AppServices:
    """Layered config files, lib_log_rich and stdout."""
    return AppServices(
        get_config=get_config,
        get_default_config_path=get_default_config_path,
        display_config=display_config,
        load_exercise_inputs=load_exercise_inputs,
        write_lines=write_lines,
        init_logging=init_logging,
    )


def build_testing(*, spy: OutputSpy | None = None) -> AppServices:
    """Empty config, no logging, output captured by an OutputSpy.

    Args:
        spy: Spy to record exercise lines into; a new one is used when omitted.

    Example:
        >>> from junior_exercises.adapters.memory import OutputSpy
        >>> spy = OutputSpy()
        >>> services = build_testing(spy=spy)
        >>> services.write_lines(["Total inventory: 20"])
        1
        >>> spy.lines
        ['Total inventory: 20']
    """
    from ..adapters.memory import (
        OutputSpy,
        display_config_in_memory,
        get_config_in_memory,
        get_default_config_path_in_memory,
        init_logging_in_memory,
    )

    return AppServices(
        get_config=get_config_in_memory,
        get_default_config_path=get_default_config_path_in_memory,
        display_config=display_config_in_memory,
        load_exercise_inputs=load_exercise_inputs,
        write_lines=(spy or OutputSpy()).write_lines,
        init_logging=init_logging_in_memory,
    )


__all__ = [
    "AppServices",
    "build_production",
    "build_testing",
    "display_config",
    "get_config",
    "get_default_config_path",
    "init_logging",
    "load_exercise_inputs",
    "write_lines",
]
