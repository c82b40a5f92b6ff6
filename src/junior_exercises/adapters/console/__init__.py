"""Console adapter - writes exercise output to standard output.

Contents:
    * :func:`.writer.write_lines` - Streaming line writer
"""

from __future__ import annotations

from .writer import write_lines

__all__ = ["write_lines"]
