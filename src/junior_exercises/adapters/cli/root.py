"""The ``junior-exercises`` command group.

Global options are resolved here once; subcommands read the result from
:class:`~.context.CLIContext`. Invoked without a subcommand the group runs
every lesson, exactly like ``junior-exercises run``.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, cast

import rich_click as click
from lib_layered_config import Config

from junior_exercises import __init__conf__
from junior_exercises.adapters.config.overrides import apply_overrides

from .constants import CLICK_CONTEXT_SETTINGS
from .context import apply_traceback_preferences, store_cli_context

if TYPE_CHECKING:
    from junior_exercises.composition import AppServices


def _services_from(obj: object) -> AppServices:
    """Call the factory that ``main`` or a test passed as ``obj``."""
    if not callable(obj):
        raise RuntimeError("ctx.obj must be a services factory such as build_production")
    return cast("Callable[[], AppServices]", obj)()


def _load_config(services: AppServices, profile: str | None, set_overrides: tuple[str, ...]) -> Config:
    """Read configuration for ``profile`` and layer the ``--set`` values on top.

    Raises:
        click.UsageError: An override is malformed or nests below a scalar.
    """
    config = services.get_config(profile=profile)
    try:
        return apply_overrides(config, set_overrides)
    except (ValueError, TypeError) as exc:
        raise click.UsageError(str(exc)) from exc


@click.group(help=__init__conf__.title, context_settings=CLICK_CONTEXT_SETTINGS, invoke_without_command=True)
@click.version_option(
    __init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option("--traceback/--no-traceback", default=False, help="Print the full Python traceback when a lesson fails")
@click.option("--profile", default=None, help="Configuration profile to load, e.g. 'classroom'")
@click.option(
    "--set",
    "set_overrides",
    multiple=True,
    metavar="SECTION.KEY=VALUE",
    help="Override one configuration value; repeatable, e.g. exercises.hours_worked=38",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, profile: str | None, set_overrides: tuple[str, ...]) -> None:
    """Prepare configuration and logging, then hand over to the subcommand.

    Example:
        >>> from click.testing import CliRunner
        >>> from junior_exercises.composition import build_production
        >>> result = CliRunner().invoke(cli, ["run", "operators"], obj=build_production)
        >>> "Total salary: 1000" in result.output
        True
    """
    services = _services_from(ctx.obj)
    config = _load_config(services, profile, set_overrides)
    services.init_logging(config)
    store_cli_context(
        ctx,
        traceback=traceback,
        config=config,
        services=services,
        profile=profile,
        set_overrides=set_overrides,
    )
    apply_traceback_preferences(traceback)

    if ctx.invoked_subcommand is None:
        from .commands import cli_run

        ctx.invoke(cli_run)


# Command modules import this package, so they are attached after ``cli`` is defined.
def _register_commands() -> None:
    from .commands import cli_config, cli_info, cli_lessons, cli_run

    for command in (cli_run, cli_lessons, cli_info, cli_config):
        cli.add_command(command)


_register_commands()


__all__ = ["cli"]
