"""POSIX-conventional exit codes for CLI error paths.

Signal codes (130, 141, 143) are informational constants only; the
application never raises ``SystemExit`` with them, ``lib_cli_exit_tools``
translates signals itself.
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes raised explicitly by CLI commands.

    * 0-1: generic success / failure
    * 2: usage error (Click)
    * 22: EINVAL
    * 78: EX_CONFIG (sysexits.h)
    * 128+N: signal N (informational only)

    Example:
        >>> int(ExitCode.CONFIG_ERROR)
        78
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    USAGE_ERROR = 2
    INVALID_ARGUMENT = 22
    CONFIG_ERROR = 78
    SIGNAL_INT = 130
    BROKEN_PIPE = 141
    SIGNAL_TERM = 143


__all__ = ["ExitCode"]
