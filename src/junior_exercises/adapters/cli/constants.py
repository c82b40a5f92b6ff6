"""Settings shared by every command of the CLI."""

from __future__ import annotations

from typing import Final

#: ``-h`` works as well as ``--help`` on the group and on each subcommand.
CLICK_CONTEXT_SETTINGS: Final[dict[str, list[str]]] = {"help_option_names": ["-h", "--help"]}

#: Maximum characters of an error report without ``--traceback``.
TRACEBACK_SUMMARY_LIMIT: Final[int] = 500

#: Maximum characters of an error report with ``--traceback``.
TRACEBACK_VERBOSE_LIMIT: Final[int] = 10_000

__all__ = ["CLICK_CONTEXT_SETTINGS", "TRACEBACK_SUMMARY_LIMIT", "TRACEBACK_VERBOSE_LIMIT"]
