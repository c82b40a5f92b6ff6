"""``config`` command: print the merged configuration and where it came from."""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click
from lib_layered_config import Config

from junior_exercises.adapters.config.overrides import apply_overrides
from junior_exercises.domain.enums import OutputFormat

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import CLIContext, get_cli_context
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)

_FORMAT_CHOICE = click.Choice([fmt.value for fmt in OutputFormat], case_sensitive=False)


def _resolve_config(cli_ctx: CLIContext, profile: str | None) -> tuple[Config, str | None]:
    """Pick the configuration to show.

    Without ``profile`` this is the root command's configuration. With one,
    that profile is loaded and the root ``--set`` overrides go on top again.
    """
    if not profile:
        return cli_ctx.config, cli_ctx.profile
    reloaded = cli_ctx.services.get_config(profile=profile)
    return apply_overrides(reloaded, cli_ctx.set_overrides), profile


@click.command("config", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--format", "output_format", type=_FORMAT_CHOICE, default=OutputFormat.HUMAN.value, help="human or json")
@click.option("--section", default=None, help="Print a single section, e.g. 'exercises'")
@click.option("--profile", default=None, help="Show this profile instead of the root --profile")
@click.pass_context
def cli_config(ctx: click.Context, output_format: str, section: str | None, profile: str | None) -> None:
    """Show the configuration the lessons will run with.

    Later layers win: defaults, app, host, user, .env, environment, --set.
    An unknown ``--section`` exits with code 22.
    """
    cli_ctx = get_cli_context(ctx)
    config, shown_profile = _resolve_config(cli_ctx, profile)
    fmt = OutputFormat(output_format.lower())

    with lib_log_rich.runtime.bind(
        job_id="cli-config", extra={"command": "config", "format": fmt.value, "profile": shown_profile}
    ):
        logger.info("Showing configuration", extra={"section": section})
        try:
            cli_ctx.services.display_config(config, output_format=fmt, section=section, profile=shown_profile)
        except ValueError as exc:
            logger.warning("Configuration section unavailable", extra={"section": section})
            click.echo(f"\nError: {exc}", err=True)
            raise SystemExit(ExitCode.INVALID_ARGUMENT) from exc


__all__ = ["cli_config"]
