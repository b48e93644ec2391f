"""ASCII character classification and case conversion.

Every function takes either an integer character code or a one-character
string. Predicates return ``bool``. The case converters return a value of the
same kind they were given.
"""

from __future__ import annotations

from typing import Union

CharLike = Union[int, str]

__all__ = [
    "is_alpha",
    "is_digit",
    "is_alnum",
    "is_ascii",
    "is_print",
    "to_upper",
    "to_lower",
]

_CASE_OFFSET = ord("a") - ord("A")


def _code(c: CharLike) -> int:
    """Return the integer code of a character given as int or 1-char str."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, int):
        return int(c)
    raise TypeError(f"expected int or str, got {type(c).__name__}")


def _same_kind(original: CharLike, code: int) -> CharLike:
    return chr(code) if isinstance(original, str) else code


def is_alpha(c: CharLike) -> bool:
    """True for ASCII letters A-Z and a-z."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def is_digit(c: CharLike) -> bool:
    """True for the ASCII digits 0-9."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: CharLike) -> bool:
    """True for ASCII letters and digits."""
    return is_digit(c) or is_alpha(c)


def is_ascii(c: CharLike) -> bool:
    """True for codes 0 through 127."""
    return 0 <= _code(c) <= 127


def is_print(c: CharLike) -> bool:
    """True for printable ASCII, space (32) through tilde (126)."""
    return 32 <= _code(c) <= 126


def to_upper(c: CharLike) -> CharLike:
    """Map an ASCII lower-case letter to upper case; anything else is unchanged."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= _CASE_OFFSET
    return _same_kind(c, code)


def to_lower(c: CharLike) -> CharLike:
    """Map an ASCII upper-case letter to lower case; anything else is unchanged."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += _CASE_OFFSET
    return _same_kind(c, code)