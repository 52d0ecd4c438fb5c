"""String searching, comparison and bounded copying."""

from __future__ import annotations

from typing import Optional, Tuple

_BLANKS = frozenset(" \t\r")
_NUL = "\0"


def _check_char(ch: str) -> None:
    if len(ch) != 1:
        raise ValueError(f"expected a single character, got {ch!r}")


def find_char(text: str, ch: str) -> Optional[int]:
    """Return the index of the first ``ch`` in ``text``, or None.

    Searching for the NUL character finds the end of the text.
    """
    _check_char(ch)
    if ch == _NUL:
        return len(text)
    index = text.find(ch)
    return None if index == -1 else index


def rfind_char(text: str, ch: str) -> Optional[int]:
    """Return the index of the last ``ch`` in ``text``, or None.

    Searching for the NUL character finds the end of the text.
    """
    _check_char(ch)
    if ch == _NUL:
        return len(text)
    index = text.rfind(ch)
    return None if index == -1 else index


def find_bounded(haystack: str, needle: str, limit: int) -> Optional[int]:
    """Find ``needle`` lying wholly within the first ``limit`` characters of ``haystack``.

    An empty needle is found at index 0.
    """
    if limit < 0:
        raise ValueError(f"limit must not be negative, got {limit}")
    if not needle:
        return 0
    index = haystack[:limit].find(needle)
    return None if index == -1 else index


def _char_at(text: str, index: int) -> int:
    return ord(text[index]) if index < len(text) else 0


def compare_n(a: str, b: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns the code difference of the first pair that differs, or 0.
    """
    if n < 0:
        raise ValueError(f"count must not be negative, got {n}")
    for index in range(min(n, max(len(a), len(b)))):
        difference = _char_at(a, index) - _char_at(b, index)
        if difference:
            return difference
    return 0


def compare(a: str, b: str) -> int:
    """Compare two strings; return the code difference of the first pair that differs, or 0."""
    return compare_n(a, b, max(len(a), len(b)))


def same_number(a: str, b: str) -> bool:
    """Return True when the two numerals match once one leading '+' is dropped from each."""
    return a.removeprefix("+") == b.removeprefix("+")


def concat_bounded(dest: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dest`` so the result fits a buffer of ``size`` with its terminator.

    Returns the resulting text and the length the full concatenation would
    have had (capped at ``size`` for the ``dest`` part).
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    dest_len = len(dest)
    src_len = len(src)
    if size == 0:
        return dest, src_len
    result = dest
    if dest_len < size - 1:
        result = dest + src[: size - 1 - dest_len]
    return result, src_len + min(dest_len, size)


def copy_bounded(src: str, size: int) -> Tuple[str, int]:
    """Copy as much of ``src`` as fits a buffer of ``size`` with its terminator.

    Returns the copied text and the full length of ``src``.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    copied = src[: size - 1] if size > 0 else ""
    return copied, len(src)


def skip_blanks(text: Optional[str]) -> int:
    """Return the number of leading spaces, tabs and carriage returns.

    None gives 1.
    """
    if text is None:
        return 1
    count = 0
    for ch in text:
        if ch not in _BLANKS:
            break
        count += 1
    return count