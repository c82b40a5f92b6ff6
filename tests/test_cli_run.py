"""CLI lesson stories: run, default invocation, lessons listing, failures."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

import pytest
from click.testing import CliRunner, Result

from junior_exercises.adapters import cli as cli_mod
from junior_exercises.adapters.cli.exit_codes import ExitCode
from junior_exercises.domain.errors import InvalidNumericLiteral
from junior_exercises.domain.lessons import render_all
from junior_exercises.domain.values import ExerciseInputs

if TYPE_CHECKING:
    from conftest import OutputCliContext


@pytest.mark.os_agnostic
def test_run_without_lessons_prints_every_lesson(
    cli_runner: CliRunner,
    output_cli_context: Callable[[dict[str, Any]], OutputCliContext],
) -> None:
    """`run` writes the full course output."""
    ctx = output_cli_context({})

    result: Result = cli_runner.invoke(cli_mod.cli, ["run"], obj=ctx.factory)

    assert result.exit_code == 0
    assert ctx.spy.lines == list(render_all(ExerciseInputs()))


@pytest.mark.os_agnostic
def test_invocation_without_subcommand_runs_every_lesson(
    cli_runner: CliRunner,
    output_cli_context: Callable[[dict[str, Any]], OutputCliContext],
) -> None:
    """The bare command behaves like `run`."""
    ctx = output_cli_context({})

    result: Result = cli_runner.invoke(cli_mod.cli, [], obj=ctx.factory)

    assert result.exit_code == 0
    assert ctx.spy.lines == list(render_all(ExerciseInputs()))


@pytest.mark.os_agnostic
def test_run_selected_lessons_keeps_course_order(
    cli_runner: CliRunner,
    output_cli_context: Callable[[dict[str, Any]], OutputCliContext],
) -> None:
    """Lessons given out of order still run in course order."""
    ctx = output_cli_context({})

    result: Result = cli_runner.invoke(cli_mod.cli, ["run", "OPERATORS", "introduction"], obj=ctx.factory)

    assert result.exit_code == 0
    titles = [line for line in ctx.spy.lines if line.startswith("Lesson ")]
    assert titles == ["Lesson 1: Introduction", "Lesson 3: Operators"]


@pytest.mark.os_agnostic
def test_run_rejects_unknown_lesson(
    cli_runner: CliRunner,
    output_cli_context: Callable[[dict[str, Any]], OutputCliContext],
) -> None:
    """An unknown lesson name is a usage error."""
    ctx = output_cli_context({})

    result: Result = cli_runner.invoke(cli_mod.cli, ["run", "advanced"], obj=ctx.factory)

    assert result.exit_code == ExitCode.USAGE_ERROR
    assert ctx.spy.lines == []


@pytest.mark.os_agnostic
def test_two_runs_write_identical_output(
    cli_runner: CliRunner,
    output_cli_context: Callable[[dict[str, Any]], OutputCliContext],
) -> None:
    """Identical inputs give identical output."""
    first = output_cli_context({})
    second = output_cli_context({})

    cli_runner.invoke(cli_mod.cli, ["run"], obj=first.factory)
    cli_runner.invoke(cli_mod.cli, ["run"], obj=second.factory)

    assert first.spy.text == second.spy.text
    assert first.spy.lines


@pytest.mark.os_agnostic
def test_configured_values_change_the_output(
    cli_runner: CliRunner,
    output_cli_context: Callable[[dict[str, Any]], OutputCliContext],
) -> None:
    """The [exercises] section feeds the lessons."""
    ctx = output_cli_context({"exercises": {"hours_worked": 38, "inventory_start": 10}})

    result: Result = cli_runner.invoke(cli_mod.cli, ["run", "operators"], obj=ctx.factory)

    assert result.exit_code == 0
    assert "Total salary: 760" in ctx.spy.lines
    assert "Total inventory after devices delivered: 5" in ctx.spy.lines


@pytest.mark.os_agnostic
def test_set_override_changes_the_output(
    cli_runner: CliRunner,
    output_cli_context: Callable[[dict[str, Any]], OutputCliContext],
) -> None:
    """--set exercises.KEY=VALUE applies to the run."""
    ctx = output_cli_context({})

    result: Result = cli_runner.invoke(
        cli_mod.cli, ["--set", "exercises.name=Ada", "run", "introduction"], obj=ctx.factory
    )

    assert result.exit_code == 0
    assert "Hello! My name is Ada!" in ctx.spy.lines


@pytest.mark.os_agnostic
def test_invalid_numeric_text_aborts_after_earlier_output(
    cli_runner: CliRunner,
    output_cli_context: Callable[[dict[str, Any]], OutputCliContext],
) -> None:
    """The parse failure propagates; lines before it were already written."""
    ctx = output_cli_context({"exercises": {"numeric_text": "abc"}})

    result: Result = cli_runner.invoke(cli_mod.cli, ["run"], obj=ctx.factory)

    assert result.exit_code != 0
    assert isinstance(result.exception, InvalidNumericLiteral)
    assert ctx.spy.lines[-1] == "4. Integer price: 19."
    assert "The sum of 10 and 15 is: 25" in ctx.spy.lines


@pytest.mark.os_agnostic
def test_invalid_exercise_config_exits_with_config_error(
    cli_runner: CliRunner,
    output_cli_context: Callable[[dict[str, Any]], OutputCliContext],
) -> None:
    """Invalid [exercises] values exit 78 before any output."""
    ctx = output_cli_context({"exercises": {"grade": "AB"}})

    result: Result = cli_runner.invoke(cli_mod.cli, ["run"], obj=ctx.factory)

    assert result.exit_code == ExitCode.CONFIG_ERROR
    assert "exercises.grade" in result.stderr
    assert ctx.spy.lines == []


@pytest.mark.os_agnostic
def test_lessons_lists_catalogue_and_marks_unimplemented(
    cli_runner: CliRunner,
    output_cli_context: Callable[[dict[str, Any]], OutputCliContext],
) -> None:
    """`lessons` lists every exercise; undone ones carry a note."""
    ctx = output_cli_context({})

    result: Result = cli_runner.invoke(cli_mod.cli, ["lessons"], obj=ctx.factory)

    assert result.exit_code == 0
    assert ctx.spy.lines[0] == "introduction: Lesson 1: Introduction"
    assert "  3. Access validation (not implemented)" in ctx.spy.lines
    assert "  2. Salary with overtime" in ctx.spy.lines


@pytest.mark.os_agnostic
def test_run_writes_to_stdout_with_production_services(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
) -> None:
    """Production wiring echoes lesson output to stdout."""
    result: Result = cli_runner.invoke(cli_mod.cli, ["run", "operators"], obj=production_factory)

    assert result.exit_code == 0
    assert "Total inventory after new devices arrived: 25" in result.stdout
    assert "Total salary: 1000" in result.stdout
