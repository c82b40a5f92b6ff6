"""Streaming console writer for exercise output."""

from __future__ import annotations

from collections.abc import Iterable

import click
import lib_log_rich.runtime


def write_lines(lines: Iterable[str]) -> int:
    """Echo each line to stdout as soon as it is produced.

    Pending log records are flushed first so they do not interleave with the
    exercise output. ``lines`` is consumed lazily: if producing a line raises,
    the lines before it have already been written and the error propagates.

    Args:
        lines: Output lines without trailing newlines.

    Returns:
        Number of lines written.

    Example:
        >>> write_lines(["Total inventory: 20", ""])
        Total inventory: 20
        <BLANKLINE>
        2
    """
    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.flush()

    written = 0
    for line in lines:
        click.echo(line)
        written += 1
    return written
