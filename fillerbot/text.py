"""String parsing, searching, comparison and splitting helpers.

Functions that take an optional string mirror the usual convention of
this package: where an input is ``None`` the result is ``None`` (or
``False`` for the equality tests) rather than an exception.
"""

from __future__ import annotations

from fillerbot.chars import is_digit, is_space
from fillerbot.output import format_nbr

MAX_LL = 9223372036854775807
_TRIM_CHARS = " \n\t"


def _single_char(c: str) -> str:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return c


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way the classic ``atoi`` does.

    Leading whitespace is skipped, one optional sign is accepted and
    digits are read until the first non-digit. Text without digits gives
    0. A magnitude past the signed 64-bit limit gives -1 for a positive
    number and 0 for a negative one.
    """
    pos = 0
    length = len(text)
    while pos < length and is_space(text[pos]):
        pos += 1
    sign = 1
    if pos < length and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    result = 0
    while pos < length and is_digit(text[pos]):
        result = result * 10 + int(text[pos])
        if result > MAX_LL:
            return -1 if sign == 1 else 0
        pos += 1
    return result * sign


def itoa(n: int) -> str:
    """Render an integer in decimal."""
    return format_nbr(n)


def find_char(s: str, c: str) -> int | None:
    """Return the index of the first ``c`` in ``s``, or None.

    Searching for the NUL character finds the end of the string when the
    string holds none.
    """
    _single_char(c)
    index = s.find(c)
    if index >= 0:
        return index
    return len(s) if c == "\0" else None


def find_last_char(s: str, c: str) -> int | None:
    """Return the index of the last ``c`` in ``s``, or None.

    Searching for the NUL character gives the end of the string.
    """
    _single_char(c)
    if c == "\0":
        return len(s)
    index = s.rfind(c)
    return index if index >= 0 else None


def find(haystack: str, needle: str) -> int | None:
    """Return the index of the first occurrence of ``needle``, or None.

    An empty needle is found at index 0.
    """
    index = haystack.find(needle)
    return index if index >= 0 else None


def find_bounded(haystack: str, needle: str, length: int) -> int | None:
    """Like :func:`find`, but only within the first ``length`` characters."""
    if length < 0:
        raise ValueError("length must not be negative")
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return index if index >= 0 else None


def compare(s1: str, s2: str) -> int:
    """Compare two strings character by character.

    Returns 0 when they are equal, otherwise the difference between the
    codes of the first differing characters (the end of a string counts
    as code 0).
    """
    for a, b in zip(s1, s2):
        if a != b:
            return ord(a) - ord(b)
    if len(s1) == len(s2):
        return 0
    if len(s1) > len(s2):
        return ord(s1[len(s2)])
    return -ord(s2[len(s1)])


def compare_n(s1: str, s2: str, n: int) -> int:
    """Compare at most the first ``n`` characters of two strings."""
    if n < 0:
        raise ValueError("n must not be negative")
    return compare(s1[:n], s2[:n])


def equal(s1: str | None, s2: str | None) -> bool:
    """Return True when both strings are equal; two ``None`` are equal."""
    if s1 is None or s2 is None:
        return s1 is s2
    return compare(s1, s2) == 0


def equal_n(s1: str | None, s2: str | None, n: int) -> bool:
    """Return True when the first ``n`` characters of both strings agree."""
    if s1 is None or s2 is None:
        return s1 is s2
    return compare_n(s1, s2, n) == 0


def split(s: str | None, sep: str) -> list[str] | None:
    """Split ``s`` on the character ``sep``, dropping empty words."""
    _single_char(sep)
    if s is None:
        return None
    return [word for word in s.split(sep) if word]


def trim(s: str | None) -> str | None:
    """Strip spaces, newlines and tabs from both ends of ``s``."""
    if s is None:
        return None
    return s.strip(_TRIM_CHARS)


def substring(s: str | None, start: int, length: int) -> str | None:
    """Return up to ``length`` characters of ``s`` beginning at ``start``."""
    if s is None:
        return None
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(s):
        raise IndexError(f"start {start} lies past the end of a string of length {len(s)}")
    return s[start:start + length]


def join(s1: str | None, s2: str | None) -> str | None:
    """Concatenate two strings; ``None`` if either is missing."""
    if s1 is None or s2 is None:
        return None
    return s1 + s2