"""Write characters, strings and numbers to an open file descriptor.

A negative descriptor is treated as "nowhere": the call writes nothing.
Text is encoded as UTF-8, and a string ends at its first NUL character.
"""

from __future__ import annotations

import os
from typing import Optional, Union

from ftkit.strings import itoa, strdup

__all__ = ["put_char", "put_str", "put_endl", "put_nbr"]

CharLike = Union[int, str]


def _write_all(fd: int, data: bytes) -> None:
    if fd < 0:
        return
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def put_char(c: CharLike, fd: int) -> None:
    """Write one character to ``fd``.

    An integer is written as a single byte (taken modulo 256); a string must
    hold exactly one character.
    """
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        data = c.encode("utf-8")
    elif isinstance(c, int):
        data = bytes([c & 0xFF])
    else:
        raise TypeError(f"expected int or str, got {type(c).__name__}")
    _write_all(fd, data)


def put_str(s: Optional[str], fd: int) -> None:
    """Write ``s`` up to its first NUL to ``fd``; ``None`` writes nothing."""
    if s is None:
        return
    _write_all(fd, strdup(s).encode("utf-8"))


def put_endl(s: Optional[str], fd: int) -> None:
    """Write ``s`` followed by a newline; the newline is written even for ``None``."""
    put_str(s, fd)
    put_char("\n", fd)


def put_nbr(n: int, fd: int) -> None:
    """Write the decimal text of a 32-bit signed integer to ``fd``."""
    put_str(itoa(n), fd)