"""Byte-buffer helpers: search, compare, fill and copy."""

from __future__ import annotations

import sys
from typing import Optional, Union

Buffer = Union[bytearray, memoryview]
Readable = Union[bytes, bytearray, memoryview]


def _check_length(n: int, *buffers: Readable) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"byte count {n} exceeds buffer length {len(buf)}")


def find_byte(data: Readable, value: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to ``value`` in the first ``n`` bytes, or None."""
    if n <= 0:
        return None
    target = value & 0xFF
    index = bytes(data[:n]).find(target)
    return None if index == -1 else index


def compare_bytes(a: Readable, b: Readable, n: int) -> int:
    """Compare the first ``n`` bytes; return the difference of the first pair that differs, else 0."""
    _check_length(n, a, b)
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0


def fill(buffer: Buffer, value: int, n: int) -> Buffer:
    """Set the first ``n`` bytes of ``buffer`` to ``value`` (taken modulo 256)."""
    _check_length(n, buffer)
    buffer[:n] = bytes([value & 0xFF]) * n
    return buffer


def zero(buffer: Buffer, n: int) -> Buffer:
    """Set the first ``n`` bytes of ``buffer`` to zero."""
    return fill(buffer, 0, n)


def zeroed(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count`` elements of ``size`` bytes each."""
    if count < 0 or size < 0:
        raise ValueError("element count and size must not be negative")
    if size and count > sys.maxsize // size:
        raise OverflowError(f"{count} elements of {size} bytes is too large")
    return bytearray(count * size)


def copy_bytes(dest: Buffer, src: Readable, n: int) -> Buffer:
    """Copy the first ``n`` bytes of ``src`` into ``dest``."""
    _check_length(n, dest, src)
    dest[:n] = src[:n]
    return dest


def move_bytes(dest: Buffer, src: Readable, n: int) -> Buffer:
    """Copy ``n`` bytes from ``src`` to ``dest``; correct even when the two overlap."""
    _check_length(n, dest, src)
    dest[:n] = bytes(src[:n])
    return dest