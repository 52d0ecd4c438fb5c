"""String helpers: number conversion, splitting, trimming and slicing."""

from __future__ import annotations

from typing import Callable, Iterable, List, MutableSequence, Optional, Sequence

_ATOI_BLANKS = frozenset("\t\n\v\f\r ")


def atoi(text: Optional[str]) -> int:
    """Parse a leading decimal integer.

    Leading whitespace is skipped, then one optional sign and then digits.
    Parsing stops at the first character that is not a digit. Text with no
    digits, or None, gives 0.
    """
    if text is None:
        return 0
    position = 0
    length = len(text)
    while position < length and text[position] in _ATOI_BLANKS:
        position += 1
    sign = 1
    if position < length and text[position] in "+-":
        if text[position] == "-":
            sign = -1
        position += 1
    value = 0
    for ch in text[position:]:
        if not "0" <= ch <= "9":
            break
        value = value * 10 + (ord(ch) - ord("0"))
    return sign * value


def itoa(n: int) -> str:
    """Return the decimal representation of ``n``."""
    return str(n)


def split(text: str, sep: str) -> List[str]:
    """Split ``text`` on the single character ``sep``, dropping empty words."""
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return [word for word in text.split(sep) if word]


def strtrim(text: str, chars: str) -> str:
    """Remove every character found in ``chars`` from both ends of ``text``."""
    if text is None or chars is None:
        raise TypeError("text and chars must both be strings")
    return text.strip(chars) if chars else text


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` beginning at ``start``.

    A start past the end of the text gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(text):
        return ""
    return text[start:start + length]


def map_chars(text: Optional[str], func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` applied to every character."""
    if text is None:
        text = ""
    return "".join(func(index, ch) for index, ch in enumerate(text))


def iter_chars(
    buffer: MutableSequence[str], func: Callable[[int, str], Optional[str]]
) -> None:
    """Call ``func(index, char)`` for every character of ``buffer``.

    When ``func`` returns a character, it replaces the one at that index.
    """
    for index, ch in enumerate(list(buffer)):
        replacement = func(index, ch)
        if replacement is not None:
            buffer[index] = replacement


def process_args(args: Iterable[str]) -> List[str]:
    """Join the arguments with spaces and split the result back into words."""
    return split(" ".join(args), " ")


def count_args(args: Optional[Sequence[str]]) -> int:
    """Return the number of arguments; None counts as none."""
    return 0 if args is None else len(args)