"""Writing characters, strings and integers to text streams."""

from __future__ import annotations

import sys
from typing import TextIO


def _target(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def format_nbr(n: int) -> str:
    """Render an integer in decimal, with a leading minus sign when negative."""
    return format(n, "d")


def put_char(c: str, stream: TextIO | None = None) -> None:
    """Write one character to ``stream`` (standard output by default)."""
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _target(stream).write(c)


def put_str(s: str | None, stream: TextIO | None = None) -> None:
    """Write a string; ``None`` writes nothing."""
    if s:
        _target(stream).write(s)


def put_endl(s: str | None, stream: TextIO | None = None) -> None:
    """Write a string followed by a newline."""
    out = _target(stream)
    put_str(s, out)
    out.write("\n")


def put_nbr(n: int, stream: TextIO | None = None) -> None:
    """Write an integer in decimal."""
    _target(stream).write(format_nbr(n))