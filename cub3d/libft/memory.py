"""Byte-buffer helpers: fill, copy, move, search, compare and zeroed allocation."""

from __future__ import annotations

from typing import Optional


def _check_span(buffer_len: int, start: int, n: int) -> None:
    if n < 0:
        raise ValueError("byte count must not be negative")
    if start < 0 or start + n > buffer_len:
        raise ValueError("byte range exceeds the buffer")


def memset(buffer: bytearray, value: int, n: int) -> bytearray:
    """Fill the first n bytes of buffer with value (taken modulo 256)."""
    _check_span(len(buffer), 0, n)
    buffer[:n] = bytes([value & 0xFF]) * n
    return buffer


def bzero(buffer: bytearray, n: int) -> None:
    """Zero the first n bytes of buffer."""
    memset(buffer, 0, n)


def memcpy(dest: Optional[bytearray], src: Optional[bytes], n: int) -> Optional[bytearray]:
    """Copy the first n bytes of src to the start of dest and return dest."""
    if dest is None and src is None:
        return None
    if dest is None or src is None:
        raise ValueError("both dest and src are required")
    _check_span(len(src), 0, n)
    _check_span(len(dest), 0, n)
    dest[:n] = src[:n]
    return dest


def memmove(buffer: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Copy n bytes inside buffer from offset src to offset dest; regions may overlap."""
    _check_span(len(buffer), src, n)
    _check_span(len(buffer), dest, n)
    buffer[dest:dest + n] = bytes(buffer[src:src + n])
    return buffer


def memchr(data: bytes, value: int, n: int) -> Optional[int]:
    """Index of the first byte equal to value within the first n bytes, or None."""
    _check_span(len(data), 0, n)
    index = bytes(data[:n]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(a: bytes, b: bytes, n: int) -> int:
    """Compare the first n bytes; return the difference at the first mismatch, else 0."""
    _check_span(len(a), 0, n)
    _check_span(len(b), 0, n)
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of count * size bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)