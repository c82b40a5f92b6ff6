"""Lesson commands: run exercises and list the catalogue.

Contents:
    * :func:`cli_run` - Print the output of the selected lessons.
    * :func:`cli_lessons` - List lessons and exercises.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

import lib_log_rich.runtime
import rich_click as click

from junior_exercises.domain.enums import Lesson
from junior_exercises.domain.errors import ConfigurationError
from junior_exercises.domain.lessons import CATALOGUE, LESSON_TITLES, NOT_IMPLEMENTED_NOTE, render_all

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import get_cli_context
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)

_LESSON_CHOICE = click.Choice([lesson.value for lesson in Lesson], case_sensitive=False)


@click.command("run", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("lessons", nargs=-1, type=_LESSON_CHOICE)
@click.pass_context
def cli_run(ctx: click.Context, lessons: tuple[str, ...] = ()) -> None:
    """Run LESSONS (default: all) and print their output in course order.

    Output is written line by line. An invalid ``exercises.numeric_text``
    aborts the run after the lines produced so far have been printed.
    """
    cli_ctx = get_cli_context(ctx)
    selected = [Lesson(name.lower()) for name in lessons] or None
    names = [lesson.value for lesson in selected] if selected else [lesson.value for lesson in Lesson]

    with lib_log_rich.runtime.bind(job_id="cli-run", extra={"command": "run", "lessons": names}):
        try:
            inputs = cli_ctx.exercise_inputs()
        except ConfigurationError as exc:
            logger.error("Invalid exercise configuration", extra={"error": str(exc)})
            lib_log_rich.runtime.flush()
            click.echo(f"Error: {exc}", err=True)
            raise SystemExit(ExitCode.CONFIG_ERROR) from exc

        logger.info("Running lessons", extra={"lessons": names, "profile": cli_ctx.profile})
        written = cli_ctx.services.write_lines(render_all(inputs, selected))
        logger.info("Lessons finished", extra={"lines": written})


def _catalogue_lines() -> Iterator[str]:
    for lesson in Lesson:
        yield f"{lesson.value}: {LESSON_TITLES[lesson]}"
        for number, exercise in enumerate(CATALOGUE[lesson], start=1):
            suffix = "" if exercise.implemented else f" {NOT_IMPLEMENTED_NOTE}"
            yield f"  {number}. {exercise.title}{suffix}"


@click.command("lessons", context_settings=CLICK_CONTEXT_SETTINGS)
@click.pass_context
def cli_lessons(ctx: click.Context) -> None:
    """List lessons and their exercises, marking the unimplemented ones."""
    cli_ctx = get_cli_context(ctx)
    with lib_log_rich.runtime.bind(job_id="cli-lessons", extra={"command": "lessons"}):
        logger.info("Listing lessons")
        cli_ctx.services.write_lines(_catalogue_lines())


__all__ = ["cli_lessons", "cli_run"]
