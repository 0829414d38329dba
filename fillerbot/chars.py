"""ASCII character classification and case conversion.

Every function accepts either a one-character string or an integer
character code. The case converters return a value of the same kind
they were given.
"""

from __future__ import annotations

_UPPER_FIRST, _UPPER_LAST = ord("A"), ord("Z")
_LOWER_FIRST, _LOWER_LAST = ord("a"), ord("z")
_DIGIT_FIRST, _DIGIT_LAST = ord("0"), ord("9")
_CASE_OFFSET = _LOWER_FIRST - _UPPER_FIRST
_SPACE_CODES = frozenset(map(ord, " \n\t\v\f\r"))


def _code(c: str | int) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, int):
        return c
    raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")


def _same_kind(original: str | int, code: int) -> str | int:
    return chr(code) if isinstance(original, str) else code


def is_alpha(c: str | int) -> bool:
    """Return True for an ASCII letter."""
    code = _code(c)
    return _UPPER_FIRST <= code <= _UPPER_LAST or _LOWER_FIRST <= code <= _LOWER_LAST


def is_digit(c: str | int) -> bool:
    """Return True for an ASCII decimal digit."""
    return _DIGIT_FIRST <= _code(c) <= _DIGIT_LAST


def is_alnum(c: str | int) -> bool:
    """Return True for an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: str | int) -> bool:
    """Return True for a code in the 7-bit ASCII range."""
    return 0 <= _code(c) <= 127


def is_print(c: str | int) -> bool:
    """Return True for a printable ASCII character, space included."""
    return 32 <= _code(c) <= 126


def is_space(c: str | int) -> bool:
    """Return True for space, newline, tab, vertical tab, form feed or carriage return."""
    return _code(c) in _SPACE_CODES


def to_upper(c: str | int) -> str | int:
    """Convert an ASCII lower-case letter to upper case; leave anything else alone."""
    code = _code(c)
    if _LOWER_FIRST <= code <= _LOWER_LAST:
        code -= _CASE_OFFSET
    return _same_kind(c, code)


def to_lower(c: str | int) -> str | int:
    """Convert an ASCII upper-case letter to lower case; leave anything else alone."""
    code = _code(c)
    if _UPPER_FIRST <= code <= _UPPER_LAST:
        code += _CASE_OFFSET
    return _same_kind(c, code)