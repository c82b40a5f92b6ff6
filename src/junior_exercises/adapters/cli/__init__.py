"""The ``junior-exercises`` command line.

Contents:
    * :func:`cli` - command group with ``--traceback``, ``--profile``, ``--set``
    * :func:`main` - exit-code wrapper used by the console script
    * ``cli_*`` - the subcommands
    * context and traceback helpers shared by the commands
"""

from __future__ import annotations

from .commands import cli_config, cli_info, cli_lessons, cli_run
from .constants import CLICK_CONTEXT_SETTINGS, TRACEBACK_SUMMARY_LIMIT, TRACEBACK_VERBOSE_LIMIT
from .context import (
    CLIContext,
    TracebackState,
    apply_traceback_preferences,
    get_cli_context,
    restore_traceback_state,
    snapshot_traceback_state,
    store_cli_context,
)
from .exit_codes import ExitCode
from .main import main
from .root import cli

__all__ = [
    "CLICK_CONTEXT_SETTINGS",
    "CLIContext",
    "ExitCode",
    "TRACEBACK_SUMMARY_LIMIT",
    "TRACEBACK_VERBOSE_LIMIT",
    "TracebackState",
    "apply_traceback_preferences",
    "cli",
    "cli_config",
    "cli_info",
    "cli_lessons",
    "cli_run",
    "get_cli_context",
    "main",
    "restore_traceback_state",
    "snapshot_traceback_state",
    "store_cli_context",
]
