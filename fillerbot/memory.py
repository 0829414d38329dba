"""Byte-buffer operations: filling, copying, searching and comparing.

Destinations are ``bytearray`` objects, changed in place. Sources may be
any bytes-like object. Byte values are integers, reduced to their low
eight bits the way an unsigned character would be.

A count that runs past the end of a buffer raises ``ValueError`` rather
than reading or writing out of bounds.
"""

from __future__ import annotations

from typing import Optional, Union

Buffer = Union[bytes, bytearray, memoryview]


def _count(n: int, name: str = "n") -> int:
    if n < 0:
        raise ValueError(f"{name} must not be negative")
    return n


def _byte(c: int) -> int:
    if not isinstance(c, int):
        raise TypeError(f"expected an integer byte value, got {type(c).__name__}")
    return c & 0xFF


def _readable(src: Buffer, n: int) -> bytes:
    if not isinstance(src, (bytes, bytearray, memoryview)):
        raise TypeError(f"expected a byte buffer, got {type(src).__name__}")
    data = bytes(src)
    if len(data) < n:
        raise ValueError(f"buffer of {len(data)} bytes is shorter than {n}")
    return data[:n]


def _writable(dst: bytearray, n: int) -> bytearray:
    if not isinstance(dst, bytearray):
        raise TypeError(f"destination must be a bytearray, got {type(dst).__name__}")
    if len(dst) < n:
        raise ValueError(f"buffer of {len(dst)} bytes cannot take {n} bytes")
    return dst


def mem_set(buf: bytearray, c: int, n: int) -> bytearray:
    """Set the first ``n`` bytes of ``buf`` to ``c`` and return ``buf``."""
    _writable(buf, _count(n))
    buf[:n] = bytes([_byte(c)]) * n
    return buf


def zero(buf: bytearray, n: int) -> None:
    """Set the first ``n`` bytes of ``buf`` to zero."""
    mem_set(buf, 0, n)


def mem_copy(dst: bytearray, src: Buffer, n: int) -> bytearray:
    """Copy ``n`` bytes from the start of ``src`` to the start of ``dst``."""
    data = _readable(src, _count(n))
    _writable(dst, n)[:n] = data
    return dst


def mem_ccopy(dst: bytearray, src: Buffer, c: int, n: int) -> Optional[int]:
    """Copy bytes from ``src`` to ``dst`` up to and including the first ``c``.

    At most ``n`` bytes are copied. Returns the index in ``dst`` just past
    the copied ``c``, or ``None`` when ``c`` was not among the first ``n``
    bytes (all ``n`` of which are then copied).
    """
    _count(n)
    target = _byte(c)
    if not isinstance(src, (bytes, bytearray, memoryview)):
        raise TypeError(f"expected a byte buffer, got {type(src).__name__}")
    data = bytes(src)[:n]
    stop = data.find(bytes([target]))
    if stop >= 0:
        count = stop + 1
        _writable(dst, count)[:count] = data[:count]
        return count
    _writable(dst, n)[:n] = _readable(src, n)
    return None


def mem_move(buf: bytearray, dst: int, src: int, n: int) -> bytearray:
    """Copy ``n`` bytes within ``buf`` from offset ``src`` to offset ``dst``.

    The two regions may overlap; the result is as if the source bytes
    were first copied aside.
    """
    _count(n)
    _count(dst, "dst")
    _count(src, "src")
    _writable(buf, max(dst, src) + n)
    buf[dst:dst + n] = bytes(buf[src:src + n])
    return buf


def mem_chr(buf: Buffer, c: int, n: int) -> Optional[int]:
    """Return the index of the first byte ``c`` among the first ``n``, or ``None``."""
    data = _readable(buf, _count(n))
    index = data.find(bytes([_byte(c)]))
    return index if index >= 0 else None


def mem_cmp(buf1: Buffer, buf2: Buffer, n: int) -> int:
    """Compare the first ``n`` bytes of two buffers.

    Returns 0 when they agree, otherwise the difference between the first
    pair of differing bytes.
    """
    a = _readable(buf1, _count(n))
    b = _readable(buf2, n)
    for x, y in zip(a, b):
        if x != y:
            return x - y
    return 0


def mem_alloc(size: int) -> bytearray:
    """Return a new zero-filled buffer of ``size`` bytes."""
    return bytearray(_count(size, "size"))