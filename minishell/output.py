"""Writing characters, strings and numbers, and a small printf."""

from __future__ import annotations

import sys
from typing import Any, Iterator, Optional, TextIO

_DIGITS = "0123456789abcdef0123456789ABCDEF"


def _stream(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def to_base(n: int, base: int, upper: bool = False) -> str:
    """Return the digits of the non-negative ``n`` in ``base`` (2 to 16)."""
    if not 2 <= base <= 16:
        raise ValueError(f"base must be between 2 and 16, got {base}")
    if n < 0:
        raise ValueError(f"number must not be negative, got {n}")
    offset = 16 if upper else 0
    digits = []
    while True:
        n, remainder = divmod(n, base)
        digits.append(_DIGITS[remainder + offset])
        if n == 0:
            break
    return "".join(reversed(digits))


def _as_int32(value: int) -> int:
    return ((value + 2**31) % 2**32) - 2**31


def _as_uint32(value: int) -> int:
    return value & 0xFFFFFFFF


def _next(args: Iterator[Any], conversion: str) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{conversion}") from None


def _convert(conversion: str, args: Iterator[Any]) -> str:
    if conversion == "c":
        value = _next(args, conversion)
        if isinstance(value, str):
            if len(value) != 1:
                raise ValueError(f"%c expects a single character, got {value!r}")
            return value
        return chr(value & 0xFF)
    if conversion == "s":
        value = _next(args, conversion)
        return "(null)" if value is None else str(value)
    if conversion == "p":
        value = _next(args, conversion)
        if not value:
            return "(nil)"
        return "0x" + to_base(value, 16)
    if conversion in ("d", "i"):
        value = _as_int32(_next(args, conversion))
        if value < 0:
            return "-" + to_base(-value, 10)
        return to_base(value, 10)
    if conversion == "u":
        return to_base(_as_uint32(_next(args, conversion)), 10)
    if conversion in ("x", "X"):
        return to_base(_as_uint32(_next(args, conversion)), 16, conversion == "X")
    if conversion == "%":
        return "%"
    return ""


def format_string(template: str, *args: Any) -> str:
    """Expand %c %s %p %d %i %u %x %X and %% in ``template``.

    Unknown conversions produce nothing.
    """
    values = iter(args)
    pieces = []
    chars = iter(template)
    for ch in chars:
        if ch == "%":
            conversion = next(chars, "")
            pieces.append(_convert(conversion, values) if conversion else "")
        else:
            pieces.append(ch)
    return "".join(pieces)


def printf(template: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write the formatted text and return the number of characters written."""
    text = format_string(template, *args)
    _stream(stream).write(text)
    return len(text)


def put_char(c: str, stream: Optional[TextIO] = None) -> None:
    """Write a single character."""
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _stream(stream).write(c)


def put_str(text: str, stream: Optional[TextIO] = None) -> None:
    """Write ``text`` as it is."""
    _stream(stream).write(text)


def put_endl(text: str, stream: Optional[TextIO] = None) -> None:
    """Write ``text`` followed by a newline."""
    _stream(stream).write(text + "\n")


def put_number(n: int, stream: Optional[TextIO] = None) -> None:
    """Write the decimal representation of ``n``."""
    _stream(stream).write(str(n))