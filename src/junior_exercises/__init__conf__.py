"""Static package metadata surfaced to CLI commands and documentation.

The values mirror ``[project]`` in ``pyproject.toml``; the version line is
kept in sync when the project version is bumped.
"""

from __future__ import annotations

name = "junior_exercises"
title = "Beginner course exercises: values, conversions, and operators on the console"
version = "1.0.0"
homepage = "https://github.com/jefryastacio/junior-exercises"
author = "Jefry Astacio"
author_email = "jefryastacio@example.com"
shell_command = "junior-exercises"

# Identifiers used by lib_layered_config to locate configuration files.
LAYEREDCONF_VENDOR = "jefryastacio"
LAYEREDCONF_APP = "Junior Exercises"
LAYEREDCONF_SLUG = "junior-exercises"


def print_info() -> None:
    """Print the summarised metadata block used by the CLI ``info`` command.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for junior_exercises:
        ...
    """
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))
