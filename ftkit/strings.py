"""String helpers modelled on classic NUL-terminated string routines.

Text functions take and return ``str``. A ``"\\0"`` character ends a string
the way a terminator would, so anything after it is ignored. The bounded copy
functions ``strlcpy`` and ``strlcat`` work in place on ``bytearray`` buffers.
Searches return an index, or ``None`` when nothing is found.
"""

from __future__ import annotations

from itertools import zip_longest
from typing import Callable, MutableSequence, Optional, Union

__all__ = [
    "strlen",
    "strchr",
    "strrchr",
    "strncmp",
    "strnstr",
    "strlcpy",
    "strlcat",
    "strdup",
    "atoi",
    "substr",
    "strjoin",
    "strtrim",
    "split",
    "itoa",
    "strmapi",
    "striteri",
]

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_WHITESPACE = " \t\n\v\f\r"

CharLike = Union[int, str]


def _cstr(s: str) -> str:
    """Return ``s`` cut at its first NUL character."""
    end = s.find("\0")
    return s if end < 0 else s[:end]


def _cbytes(data) -> bytes:
    """Return ``data`` as bytes cut at its first NUL byte."""
    raw = bytes(data)
    end = raw.find(b"\0")
    return raw if end < 0 else raw[:end]


def _char(c: CharLike) -> str:
    """Normalise a character given as a code or a one-character string."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, int):
        return chr(c & 0xFF)
    raise TypeError(f"expected int or str, got {type(c).__name__}")


def strlen(s: str) -> int:
    """Number of characters before the first NUL."""
    return len(_cstr(s))


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the first ``c`` in ``s``; searching for NUL finds the end."""
    text = _cstr(s)
    ch = _char(c)
    if ch == "\0":
        return len(text)
    index = text.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the last ``c`` in ``s``; searching for NUL finds the end."""
    text = _cstr(s)
    ch = _char(c)
    if ch == "\0":
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns the code difference of the first differing pair, or 0.
    """
    if n < 0:
        raise ValueError(f"count must not be negative, got {n}")
    for a, b in zip_longest(_cstr(s1)[:n], _cstr(s2)[:n], fillvalue="\0"):
        if a != b:
            return ord(a) - ord(b)
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of the first ``needle`` lying wholly within the first ``length``
    characters of ``haystack``, or ``None``. An empty needle matches at 0."""
    text = _cstr(haystack)
    pattern = _cstr(needle)
    if not pattern:
        return 0
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    index = text.find(pattern, 0, min(length, len(text)))
    return None if index < 0 else index


def _check_size(dest: bytearray, size: int) -> None:
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    if size > len(dest):
        raise ValueError(f"size {size} exceeds buffer length {len(dest)}")


def strlcpy(dest: bytearray, src, size: int) -> int:
    """Copy ``src`` into ``dest`` with NUL termination, writing at most
    ``size`` bytes. Returns the length of ``src``."""
    _check_size(dest, size)
    source = _cbytes(src)
    if size:
        count = min(len(source), size - 1)
        dest[:count] = source[:count]
        dest[count] = 0
    return len(source)


def strlcat(dest: bytearray, src, size: int) -> int:
    """Append ``src`` to the string in ``dest`` so the result fits ``size``
    bytes with NUL termination.

    Returns the length of the string it tried to create: the initial length
    of ``dest`` (capped at ``size``) plus the length of ``src``.
    """
    _check_size(dest, size)
    source = _cbytes(src)
    start = len(_cbytes(dest[:size]))
    if start < size:
        count = max(0, min(len(source), size - start - 1))
        dest[start:start + count] = source[:count]
        dest[start + count] = 0
    return start + len(source)


def strdup(s: str) -> str:
    """Copy of ``s`` up to its first NUL."""
    return _cstr(s)


def atoi(s: str) -> int:
    """Parse a leading decimal integer.

    Skips leading whitespace, takes one optional sign and then digits up to
    the first non-digit. Returns 0 when there are no digits. The result
    wraps around like a 32-bit signed integer.
    """
    text = _cstr(s).lstrip(_WHITESPACE)
    sign = 1
    if text[:1] in ("-", "+"):
        sign = -1 if text[0] == "-" else 1
        text = text[1:]
    digits = []
    for ch in text:
        if not "0" <= ch <= "9":
            break
        digits.append(ch)
    value = sign * int("".join(digits) or "0")
    return (value - INT_MIN) % 2**32 + INT_MIN


def substr(s: str, start: int, length: int) -> str:
    """Up to ``length`` characters of ``s`` beginning at ``start``.

    A start beyond the end gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    text = _cstr(s)
    if start > len(text):
        return ""
    return text[start:start + length]


def strjoin(s1: str, s2: str) -> str:
    """Concatenation of ``s1`` and ``s2``."""
    return _cstr(s1) + _cstr(s2)


def strtrim(s: str, charset: str) -> str:
    """``s`` with every leading and trailing character in ``charset`` removed."""
    return _cstr(s).strip(_cstr(charset))


def split(s: str, sep: CharLike) -> list[str]:
    """Words of ``s`` separated by runs of ``sep``; empty words are dropped."""
    text = _cstr(s)
    ch = _char(sep)
    if ch == "\0":
        return [text] if text else []
    return [word for word in text.split(ch) if word]


def itoa(n: int) -> str:
    """Decimal text of a 32-bit signed integer."""
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    return str(n)


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """New string built from ``f(index, char)`` for every character of ``s``."""
    return "".join(f(index, ch) for index, ch in enumerate(_cstr(s)))


def striteri(chars: MutableSequence, f: Callable[[int, object], object]) -> None:
    """Replace each element of ``chars`` in place with ``f(index, element)``.

    A ``None`` result leaves the element unchanged.
    """
    for index, value in enumerate(chars):
        replacement = f(index, value)
        if replacement is not None:
            chars[index] = replacement