"""Character classification and case conversion for ASCII characters.

Every function accepts either a one-character string or an integer code.
"""

from __future__ import annotations

from typing import Union

Char = Union[str, int]

_SPACE_CODES = frozenset(map(ord, " \t\n\r\v\f"))
_SEPARATOR_CODES = frozenset(map(ord, " \n\t"))


def _code(c: Char) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")
    return c


def _same_kind(original: Char, code: int) -> Char:
    return chr(code) if isinstance(original, str) else code


def is_digit(c: Char) -> bool:
    """Return True for the ASCII digits 0-9."""
    return ord("0") <= _code(c) <= ord("9")


def is_alpha(c: Char) -> bool:
    """Return True for ASCII letters."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_alnum(c: Char) -> bool:
    """Return True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: Char) -> bool:
    """Return True for codes 0 through 127."""
    return 0 <= _code(c) <= 127


def is_print(c: Char) -> bool:
    """Return True for printable ASCII characters (space through tilde)."""
    return 32 <= _code(c) <= 126


def to_lower(c: Char) -> Char:
    """Lower-case an ASCII upper-case letter; anything else is returned unchanged."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += 32
    return _same_kind(c, code)


def to_upper(c: Char) -> Char:
    """Upper-case an ASCII lower-case letter; anything else is returned unchanged."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= 32
    return _same_kind(c, code)


def is_space(c: Char) -> bool:
    """Return True for space, tab, newline, carriage return, vertical tab and form feed."""
    return _code(c) in _SPACE_CODES


def is_word_separator(c: Char) -> bool:
    """Return True for the characters that separate words: space, newline and tab."""
    return _code(c) in _SEPARATOR_CODES