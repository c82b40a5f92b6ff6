"""In-memory output adapter for testing.

Contents:
    * :class:`OutputSpy` - Captures written lines for test assertions.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field


def _empty_line_list() -> list[str]:
    """Create an empty typed list for captured lines."""
    return []


@dataclass
class OutputSpy:
    """Captures exercise output instead of printing it.

    Lines are recorded one at a time while the iterable is consumed, so after
    a failure mid-stream ``lines`` holds exactly what was written before it.
    Each test should create its own spy.

    Attributes:
        lines: Every line written so far, in order.
        writes: Number of ``write_lines`` calls.

    Example:
        >>> spy = OutputSpy()
        >>> spy.write_lines(["a", "b"])
        2
        >>> spy.text
        'a\\nb\\n'
    """

    lines: list[str] = field(default_factory=_empty_line_list)
    writes: int = 0

    @property
    def text(self) -> str:
        """Captured output as it would appear on the console."""
        return "".join(f"{line}\n" for line in self.lines)

    def clear(self) -> None:
        """Reset captured data for next test."""
        self.lines.clear()
        self.writes = 0

    def write_lines(self, lines: Iterable[str]) -> int:
        """Record ``lines`` lazily and return how many were written."""
        self.writes += 1
        written = 0
        for line in lines:
            self.lines.append(line)
            written += 1
        return written


__all__ = ["OutputSpy"]
