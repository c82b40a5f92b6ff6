"""Subcommands attached to the ``junior-exercises`` group."""

from __future__ import annotations

from .config import cli_config
from .info import cli_info
from .lessons_cmd import cli_lessons, cli_run

__all__ = ["cli_config", "cli_info", "cli_lessons", "cli_run"]
