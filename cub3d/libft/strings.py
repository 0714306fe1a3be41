"""C-style string routines over Python strings: length, bounded copy and
concatenation, searching, comparison and integer parsing."""

from __future__ import annotations

from typing import Optional, Tuple

_INT_BITS = 32
_WHITESPACE = " \t\f\n\v\r"


def _terminated(s: str) -> str:
    """Return the part of s before the first NUL, as a C string would see it."""
    end = s.find("\0")
    return s if end < 0 else s[:end]


def strlen(s: str) -> int:
    """Number of characters before the first NUL (or the whole string)."""
    return len(_terminated(s))


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy at most size - 1 characters of src.

    Returns the copied text and the full length of src, so a caller can
    detect truncation by comparing the two.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    text = _terminated(src)
    if size == 0:
        return "", len(text)
    return text[: size - 1], len(text)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append src to dst so that the result fits in size characters with
    room for a terminator.

    Returns the resulting text and the length the full concatenation would
    have had; when size does not exceed the length of dst, dst is returned
    unchanged together with size + len(src).
    """
    if size < 0:
        raise ValueError("size must not be negative")
    head = _terminated(dst)
    tail = _terminated(src)
    if size <= len(head):
        return head, size + len(tail)
    room = size - len(head) - 1
    return head + tail[:room], len(head) + len(tail)


def strchr(s: str, c: str) -> Optional[int]:
    """Index of the first occurrence of c; searching for NUL finds the end."""
    text = _terminated(s)
    if c == "\0":
        return len(text)
    index = text.find(c)
    return None if index < 0 else index


def strrchr(s: str, c: str) -> Optional[int]:
    """Index of the last occurrence of c; searching for NUL finds the end."""
    text = _terminated(s)
    if c == "\0":
        return len(text)
    index = text.rfind(c)
    return None if index < 0 else index


def _code_at(s: str, i: int) -> int:
    return ord(s[i]) if i < len(s) else 0


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most n characters; return the code difference at the first
    mismatch or terminator, or 0 when the compared parts are equal."""
    for i in range(n):
        a = _code_at(s1, i)
        b = _code_at(s2, i)
        if a != b or a == 0 or b == 0:
            return a - b
    return 0


def strnstr(big: str, little: str, n: int) -> Optional[int]:
    """Index of the first occurrence of little wholly inside the first n
    characters of big; an empty needle is found at index 0."""
    needle = _terminated(little)
    if not needle:
        return 0
    haystack = _terminated(big)[: max(n, 0)]
    index = haystack.find(needle)
    return None if index < 0 else index


def strdup(s: str) -> str:
    """Return a copy of the string up to its terminator."""
    return _terminated(s)


def atoi(s: str) -> int:
    """Parse a leading decimal integer the way the C library does.

    Leading whitespace is skipped, one optional sign is accepted and
    digits are read until the first non-digit. The result wraps to a
    32-bit signed integer.
    """
    text = _terminated(s).lstrip(_WHITESPACE)
    sign = 1
    if text[:1] in ("+", "-"):
        if text[0] == "-":
            sign = -1
        text = text[1:]
    value = 0
    for ch in text:
        if not "0" <= ch <= "9":
            break
        value = value * 10 + (ord(ch) - ord("0"))
    result = (value * sign) & ((1 << _INT_BITS) - 1)
    if result >= 1 << (_INT_BITS - 1):
        result -= 1 << _INT_BITS
    return result