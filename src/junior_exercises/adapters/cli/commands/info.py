"""``info`` command: show what is installed."""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from junior_exercises import __init__conf__

from ..constants import CLICK_CONTEXT_SETTINGS

logger = logging.getLogger(__name__)


@click.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Show the package name, version, homepage and author."""
    with lib_log_rich.runtime.bind(job_id="cli-info", extra={"command": "info"}):
        logger.debug("Printing package metadata", extra={"version": __init__conf__.version})
        __init__conf__.print_info()


__all__ = ["cli_info"]
