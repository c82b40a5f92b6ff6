"""State the root command hands to its subcommands, and traceback flags."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, NamedTuple

import lib_cli_exit_tools
import rich_click as click
from lib_layered_config import Config

if TYPE_CHECKING:
    from junior_exercises.composition import AppServices
    from junior_exercises.domain.values import ExerciseInputs


class TracebackState(NamedTuple):
    """The two lib_cli_exit_tools flags that ``--traceback`` toggles."""

    enabled: bool
    force_color: bool


@dataclass(slots=True)
class CLIContext:
    """Resolved global options.

    Attributes:
        traceback: ``--traceback`` was given.
        config: Configuration after ``--set`` overrides.
        services: Port implementations from the composition root.
        profile: ``--profile`` value, if any.
        set_overrides: Raw ``--set`` strings, kept so ``config --profile``
            can reapply them to a freshly loaded profile.
    """

    traceback: bool
    config: Config
    services: AppServices
    profile: str | None = None
    set_overrides: tuple[str, ...] = ()

    def exercise_inputs(self) -> ExerciseInputs:
        """Validate the ``[exercises]`` section into ExerciseInputs.

        A missing section yields the built-in course values.

        Raises:
            ConfigurationError: If a value has the wrong type or range.
        """
        section = self.config.get("exercises", default={})
        return self.services.load_exercise_inputs(section or {})


def store_cli_context(
    ctx: click.Context,
    *,
    traceback: bool,
    config: Config,
    services: AppServices,
    profile: str | None = None,
    set_overrides: tuple[str, ...] = (),
) -> None:
    """Swap the services factory in ``ctx.obj`` for a :class:`CLIContext`."""
    ctx.obj = CLIContext(traceback, config, services, profile, set_overrides)


def get_cli_context(ctx: click.Context) -> CLIContext:
    """Fetch what :func:`store_cli_context` put into ``ctx.obj``.

    Raises:
        RuntimeError: If the root command did not run first.

    Example:
        >>> from unittest.mock import MagicMock
        >>> ctx = MagicMock()
        >>> ctx.obj = CLIContext(traceback=True, config=Config({}, {}), services=MagicMock())
        >>> get_cli_context(ctx).traceback
        True
    """
    obj = ctx.obj
    if isinstance(obj, CLIContext):
        return obj
    raise RuntimeError("CLI context missing; subcommands must run below the junior-exercises group")


def apply_traceback_preferences(enabled: bool) -> None:
    """Set both lib_cli_exit_tools traceback flags to ``enabled``."""
    lib_cli_exit_tools.config.traceback = enabled
    lib_cli_exit_tools.config.traceback_force_color = enabled


def snapshot_traceback_state() -> TracebackState:
    """Read the current flags so they can be put back later.

    Example:
        >>> saved = snapshot_traceback_state()
        >>> apply_traceback_preferences(not saved.enabled)
        >>> restore_traceback_state(saved)
        >>> snapshot_traceback_state() == saved
        True
    """
    config = lib_cli_exit_tools.config
    return TracebackState(
        bool(getattr(config, "traceback", False)),
        bool(getattr(config, "traceback_force_color", False)),
    )


def restore_traceback_state(state: TracebackState) -> None:
    lib_cli_exit_tools.config.traceback = state.enabled
    lib_cli_exit_tools.config.traceback_force_color = state.force_color


__all__ = [
    "CLIContext",
    "TracebackState",
    "apply_traceback_preferences",
    "get_cli_context",
    "restore_traceback_state",
    "snapshot_traceback_state",
    "store_cli_context",
]
