"""Byte buffer primitives: fill, copy, move, search, compare and allocate.

Mutating functions work in place on writable buffers such as ``bytearray``
and return that buffer. Counts that reach past the end of a buffer raise
``ValueError`` instead of touching memory that is not there.
"""

from __future__ import annotations

from typing import Optional

__all__ = ["memset", "bzero", "memcpy", "memmove", "memchr", "memcmp", "calloc"]

SIZE_MAX = 2**64 - 1


def _check_count(n: int, *buffers) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"byte count {n} exceeds buffer length {len(buf)}")


def memset(buffer: bytearray, value: int, n: int) -> bytearray:
    """Set the first ``n`` bytes of ``buffer`` to ``value`` (taken modulo 256)."""
    _check_count(n, buffer)
    buffer[:n] = bytes([value & 0xFF]) * n
    return buffer


def bzero(buffer: bytearray, n: int) -> bytearray:
    """Zero the first ``n`` bytes of ``buffer``."""
    return memset(buffer, 0, n)


def memcpy(dest: bytearray, src, n: int) -> bytearray:
    """Copy ``n`` bytes from ``src`` to the start of ``dest``."""
    _check_count(n, dest, src)
    if dest is not src:
        dest[:n] = bytes(src[:n])
    return dest


def memmove(buffer: bytearray, dest_offset: int, src_offset: int, n: int) -> bytearray:
    """Copy ``n`` bytes within ``buffer`` from ``src_offset`` to ``dest_offset``.

    The regions may overlap; the result is as if the source were copied out
    first.
    """
    if dest_offset < 0 or src_offset < 0:
        raise ValueError("offsets must not be negative")
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    if max(dest_offset, src_offset) + n > len(buffer):
        raise ValueError("move reaches past the end of the buffer")
    if dest_offset != src_offset:
        buffer[dest_offset:dest_offset + n] = bytes(buffer[src_offset:src_offset + n])
    return buffer


def memchr(data, value: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to ``value`` (mod 256) in the
    first ``n`` bytes of ``data``, or ``None`` if there is none."""
    _check_count(n, data)
    target = value & 0xFF
    return next(
        (index for index, byte in enumerate(bytes(data[:n])) if byte == target),
        None,
    )


def memcmp(a, b, n: int) -> int:
    """Compare the first ``n`` bytes of ``a`` and ``b`` as unsigned bytes.

    Returns the difference of the first pair that differs, or 0.
    """
    _check_count(n, a, b)
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes.

    Raises ``OverflowError`` when the total would not fit in a 64-bit size.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if count and size and count > SIZE_MAX // size:
        raise OverflowError("requested allocation size overflows")
    return bytearray(count * size)