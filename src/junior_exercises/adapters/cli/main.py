"""Run the command group and turn every outcome into an exit code.

Contents:
    * :func:`main` - shared by the console script and ``python -m``.
"""

from __future__ import annotations

import sys
import threading
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

import click
import lib_cli_exit_tools
import lib_log_rich.runtime

from junior_exercises import __init__conf__

from .constants import TRACEBACK_SUMMARY_LIMIT, TRACEBACK_VERBOSE_LIMIT
from .context import apply_traceback_preferences, restore_traceback_state, snapshot_traceback_state

if TYPE_CHECKING:
    from junior_exercises.composition import AppServices


def _report_failure(exc: BaseException) -> int:
    """Print ``exc`` the lib_cli_exit_tools way and return its exit code.

    With ``--traceback`` the full traceback is shown, otherwise a one-line
    summary such as ``InvalidNumericLiteral: Invalid numeric literal: 'abc'``.
    """
    verbose = bool(getattr(lib_cli_exit_tools.config, "traceback", False))
    apply_traceback_preferences(verbose)
    lib_cli_exit_tools.print_exception_message(
        trace_back=verbose,
        length_limit=TRACEBACK_VERBOSE_LIMIT if verbose else TRACEBACK_SUMMARY_LIMIT,
    )
    return lib_cli_exit_tools.get_system_exit_code(exc)


def _invoke(args: list[str], services_factory: Callable[[], AppServices]) -> int:
    """Call the group in non-standalone mode so ``obj`` can carry the factory."""
    from .root import cli

    try:
        cli.main(args=args, prog_name=__init__conf__.shell_command, obj=services_factory, standalone_mode=False)
    except click.exceptions.Exit as exc:
        return exc.exit_code
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except SystemExit as exc:
        # Commands that exit with a numeric code have already reported the problem.
        if exc.code is None or isinstance(exc.code, int):
            return int(exc.code or 0)
        return _report_failure(exc)
    except BaseException as exc:  # noqa: BLE001 - KeyboardInterrupt is reported too
        return _report_failure(exc)
    return 0


def _shutdown_logging() -> None:
    # A worker thread calling main must not stop logging for the whole process.
    if threading.current_thread() is not threading.main_thread():
        return
    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.shutdown()


def main(
    argv: Sequence[str] | None = None,
    *,
    restore_traceback: bool = True,
    services_factory: Callable[[], AppServices] | None = None,
) -> int:
    """Run the CLI and return its exit code.

    Args:
        argv: Arguments without the program name; ``sys.argv[1:]`` when None.
        restore_traceback: Put the traceback flags back as they were afterwards.
        services_factory: Usually ``build_production``; tests pass their own.

    Returns:
        0 when every lesson printed, 2 for usage errors, 78 for invalid
        exercise settings, and the lib_cli_exit_tools code of any other error.

    Raises:
        ValueError: If ``services_factory`` is missing.

    Example:
        >>> from junior_exercises.composition import build_production
        >>> main(["lessons"], services_factory=build_production)  # doctest: +SKIP
        0
    """
    if services_factory is None:
        raise ValueError("services_factory is required; pass build_production from the composition root")

    saved = snapshot_traceback_state()
    try:
        return _invoke(list(argv) if argv is not None else sys.argv[1:], services_factory)
    finally:
        if restore_traceback:
            restore_traceback_state(saved)
        _shutdown_logging()


__all__ = ["main"]
