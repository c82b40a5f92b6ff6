"""Shared pytest fixtures for domain, CLI, and module-entry tests.

All shared fixtures live here; tests receive them through pytest's conftest
discovery. Fixture names read as plain English.
"""

from __future__ import annotations

import contextlib
import os
import re
import tempfile
from collections.abc import Callable, Iterator
from dataclasses import dataclass, fields
from pathlib import Path
from typing import TYPE_CHECKING, Any

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner
from lib_layered_config import Config

if TYPE_CHECKING:
    from junior_exercises.adapters.memory.output import OutputSpy
    from junior_exercises.composition import AppServices

_COVERAGE_BASENAME = ".coverage.junior_exercises"


def pytest_configure(config: pytest.Config) -> None:
    """Keep the coverage database on a local temp directory.

    SQLite needs POSIX locking that network mounts do not reliably provide,
    and stale journal files from a crashed run make the next open fail.
    """
    if "COVERAGE_FILE" not in os.environ:
        cov_path = Path(tempfile.gettempdir()) / _COVERAGE_BASENAME
        for suffix in ("", "-journal", "-wal", "-shm"):
            with contextlib.suppress(FileNotFoundError):
                Path(str(cov_path) + suffix).unlink()
        os.environ["COVERAGE_FILE"] = str(cov_path)


def _load_dotenv() -> None:
    """Load a project-level .env file when one exists."""
    from dotenv import load_dotenv

    env_file = Path(__file__).parent.parent / ".env"
    if env_file.exists():
        load_dotenv(env_file)


_load_dotenv()

ANSI_ESCAPE_PATTERN = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")
CONFIG_FIELDS: tuple[str, ...] = tuple(field.name for field in fields(type(lib_cli_exit_tools.config)))


def _snapshot_cli_config() -> dict[str, object]:
    """Capture every attribute from ``lib_cli_exit_tools.config``."""
    return {name: getattr(lib_cli_exit_tools.config, name) for name in CONFIG_FIELDS}


def _restore_cli_config(snapshot: dict[str, object]) -> None:
    """Reapply a configuration snapshot captured by ``_snapshot_cli_config``."""
    for name, value in snapshot.items():
        setattr(lib_cli_exit_tools.config, name, value)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a fresh CliRunner per test.

    Use ``result.stdout`` when exact output matters; log records go to stderr.
    """
    return CliRunner()


@pytest.fixture
def production_factory() -> Callable[[], AppServices]:
    """Provide the production services factory (real adapters)."""
    from junior_exercises.composition import build_production

    return build_production


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Return a helper that strips ANSI escape sequences from a string."""

    def _strip(value: str) -> str:
        return ANSI_ESCAPE_PATTERN.sub("", value)

    return _strip


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Reset traceback flags to a known baseline and restore them after the test."""
    lib_cli_exit_tools.reset_config()
    lib_cli_exit_tools.config.traceback = False
    lib_cli_exit_tools.config.traceback_force_color = False
    snapshot = _snapshot_cli_config()
    try:
        yield
    finally:
        _restore_cli_config(snapshot)


@pytest.fixture
def clear_config_cache() -> Iterator[None]:
    """Clear the get_config cache before the test.

    Only clears before, since a test may monkeypatch ``get_config`` away.
    """
    from junior_exercises.adapters.config import loader as config_mod

    config_mod.get_config.cache_clear()
    yield


@pytest.fixture
def config_factory() -> Callable[[dict[str, Any]], Config]:
    """Create real Config instances from test data without filesystem I/O."""

    def _factory(data: dict[str, Any]) -> Config:
        return Config(data, {})

    return _factory


@dataclass
class OutputCliContext:
    """Services factory plus the spy capturing everything it writes.

    Attributes:
        factory: Callable returning wired AppServices for ``cli_runner.invoke(obj=...)``.
        spy: OutputSpy holding the lines written by lesson commands.
    """

    factory: Callable[[], Any]
    spy: OutputSpy


@pytest.fixture
def output_cli_context(
    clear_config_cache: None,
) -> Callable[[dict[str, Any]], OutputCliContext]:
    """Create a CLI test context with injected config and captured output.

    Replaces only the I/O boundaries: ``get_config`` returns a Config built
    from the given dict and ``write_lines`` records into an OutputSpy.
    Logging and config display use the production adapters.

    Example:
        def test_run(cli_runner, output_cli_context) -> None:
            ctx = output_cli_context({"exercises": {"hours_worked": 38}})
            cli_runner.invoke(cli, ["run", "operators"], obj=ctx.factory)
            assert "Total salary: 760" in ctx.spy.lines
    """
    from junior_exercises.adapters.memory import OutputSpy
    from junior_exercises.composition import AppServices, build_production

    def _create(config_data: dict[str, Any]) -> OutputCliContext:
        config = Config(config_data, {})
        spy = OutputSpy()
        prod = build_production()

        def _fake_get_config(**_kwargs: Any) -> Config:
            return config

        test_services = AppServices(
            get_config=_fake_get_config,
            get_default_config_path=prod.get_default_config_path,
            display_config=prod.display_config,
            load_exercise_inputs=prod.load_exercise_inputs,
            write_lines=spy.write_lines,
            init_logging=prod.init_logging,
        )
        return OutputCliContext(factory=lambda: test_services, spy=spy)

    return _create


@pytest.fixture
def config_cli_context(
    output_cli_context: Callable[[dict[str, Any]], OutputCliContext],
) -> Callable[[dict[str, Any]], Callable[[], AppServices]]:
    """Return only the services factory of :func:`output_cli_context`."""

    def _create(config_data: dict[str, Any]) -> Callable[[], AppServices]:
        return output_cli_context(config_data).factory

    return _create


@pytest.fixture
def inject_config_with_profile_capture(
    clear_config_cache: None,
) -> Callable[[Config, list[str | None]], Callable[[], AppServices]]:
    """Return a factory whose get_config records every profile it is asked for."""
    from junior_exercises.composition import AppServices, build_production

    def _inject(config: Config, captured_profiles: list[str | None]) -> Callable[[], AppServices]:
        def _capturing_get_config(*, profile: str | None = None, **_kwargs: Any) -> Config:
            captured_profiles.append(profile)
            return config

        prod = build_production()
        test_services = AppServices(
            get_config=_capturing_get_config,
            get_default_config_path=prod.get_default_config_path,
            display_config=prod.display_config,
            load_exercise_inputs=prod.load_exercise_inputs,
            write_lines=prod.write_lines,
            init_logging=prod.init_logging,
        )
        return lambda: test_services

    return _inject
