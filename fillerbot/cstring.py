"""Operations on NUL-terminated byte buffers.

A buffer is a ``bytearray`` whose text runs up to its first NUL byte, or
to its end when it holds none. Sources may also be ``bytes`` or ``str``;
a ``str`` is encoded as Latin-1. Characters passed to callbacks are
integer byte codes, so the helpers in :mod:`fillerbot.chars` fit
directly.

Writes never grow a destination: where the text would not fit, a
``ValueError`` is raised and the buffer is left as it was.
"""

from __future__ import annotations

from typing import Callable, Optional, Union

Source = Union[bytes, bytearray, memoryview, str]
CharFunc = Callable[[int], Optional[int]]
IndexedCharFunc = Callable[[int, int], Optional[int]]


def _content(src: Source) -> bytes:
    """Return the text of ``src`` up to its first NUL."""
    if isinstance(src, str):
        data = src.encode("latin-1")
    elif isinstance(src, (bytes, bytearray, memoryview)):
        data = bytes(src)
    else:
        raise TypeError(f"expected a string or a byte buffer, got {type(src).__name__}")
    end = data.find(0)
    return data if end < 0 else data[:end]


def _writable(dst: bytearray) -> bytearray:
    if not isinstance(dst, bytearray):
        raise TypeError(f"destination must be a bytearray, got {type(dst).__name__}")
    return dst


def _write(dst: bytearray, start: int, chunk: bytes) -> None:
    end = start + len(chunk)
    if end > len(dst):
        raise ValueError(
            f"buffer of {len(dst)} bytes cannot hold {end} bytes of text and terminator"
        )
    dst[start:end] = chunk


def str_len(buf: Source) -> int:
    """Return the number of bytes before the first NUL."""
    return len(_content(buf))


def str_copy(dst: bytearray, src: Source) -> bytearray:
    """Copy the text of ``src`` with its terminator to the start of ``dst``."""
    _write(_writable(dst), 0, _content(src) + b"\0")
    return dst


def str_ncopy(dst: bytearray, src: Source, n: int) -> bytearray:
    """Copy at most ``n`` bytes of ``src`` into ``dst``, padding with NUL up to ``n``.

    When ``src`` is ``n`` bytes or longer no terminator is written.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    data = _content(src)[:n]
    _write(_writable(dst), 0, data.ljust(n, b"\0"))
    return dst


def str_cat(dst: bytearray, src: Source) -> bytearray:
    """Append the text of ``src`` to the text in ``dst``."""
    _write(_writable(dst), str_len(dst), _content(src) + b"\0")
    return dst


def str_ncat(dst: bytearray, src: Source, n: int) -> bytearray:
    """Append at most ``n`` bytes of ``src`` to ``dst`` and terminate the result."""
    if n < 0:
        raise ValueError("n must not be negative")
    _write(_writable(dst), str_len(dst), _content(src)[:n] + b"\0")
    return dst


def str_lcat(dst: bytearray, src: Source, size: int) -> int:
    """Append ``src`` so that the result, terminator included, fits in ``size`` bytes.

    Returns the length the full concatenation would have had. When
    ``size`` does not exceed the current text length nothing is written
    and ``size`` plus the length of ``src`` is returned.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    _writable(dst)
    data = _content(src)
    dst_len = str_len(dst)
    if size <= dst_len:
        return size + len(data)
    n = size - dst_len - 1
    _write(dst, dst_len, data[:n].ljust(n, b"\0") + b"\0")
    return dst_len + len(data)


def str_dup(src: Source) -> bytearray:
    """Return a new terminated buffer holding the text of ``src``."""
    return bytearray(_content(src) + b"\0")


def str_new(size: int) -> bytearray:
    """Return a zero-filled buffer with room for ``size`` bytes and a terminator."""
    if size < 0:
        raise ValueError("size must not be negative")
    return bytearray(size + 1)


def str_clear(buf: Optional[bytearray]) -> None:
    """Overwrite the text of ``buf`` with NUL bytes; ``None`` is ignored."""
    if buf is None:
        return
    _writable(buf)
    buf[: str_len(buf)] = bytes(str_len(buf))


def str_iter(buf: Optional[bytearray], f: Optional[CharFunc]) -> None:
    """Call ``f`` on each character of the text in place.

    A non-``None`` result replaces the character. Nothing happens when
    either argument is ``None``.
    """
    if buf is None or f is None:
        return
    str_iteri(buf, lambda _index, code: f(code))


def str_iteri(buf: Optional[bytearray], f: Optional[IndexedCharFunc]) -> None:
    """Call ``f(index, character)`` on each character of the text in place.

    A non-``None`` result replaces the character. Nothing happens when
    either argument is ``None``.
    """
    if buf is None or f is None:
        return
    _writable(buf)
    for index, code in enumerate(_content(buf)):
        result = f(index, code)
        if result is not None:
            buf[index] = result


def str_map(buf: Optional[Source], f: Optional[Callable[[int], int]]) -> Optional[bytearray]:
    """Return a new terminated buffer of ``f`` applied to each character."""
    if buf is None or f is None:
        return None
    return str_mapi(buf, lambda _index, code: f(code))


def str_mapi(
    buf: Optional[Source], f: Optional[Callable[[int, int], int]]
) -> Optional[bytearray]:
    """Return a new terminated buffer of ``f(index, character)`` for each character."""
    if buf is None or f is None:
        return None
    data = _content(buf)
    result = str_new(len(data))
    result[: len(data)] = bytes(f(index, code) for index, code in enumerate(data))
    return result