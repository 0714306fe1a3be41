"""String building helpers: substrings, joining, trimming, splitting,
integer formatting and per-character mapping."""

from __future__ import annotations

import operator
from typing import Callable, List, MutableSequence, Optional, Union

from cub3d.libft.strings import strdup


def substr(s: Optional[str], start: int, length: int) -> Optional[str]:
    """Return at most length characters of s beginning at start.

    A start at or past the end gives an empty string, and a length that
    runs past the end is cut short. Returns None when s is None.
    """
    if s is None:
        return None
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    text = strdup(s)
    return text[start:start + length]


def strjoin(s1: Optional[str], s2: Optional[str]) -> Optional[str]:
    """Concatenate two strings; None when both are None."""
    if s1 is None and s2 is None:
        return None
    if s1 is None or s2 is None:
        raise TypeError("both strings are required")
    return strdup(s1) + strdup(s2)


def strtrim(s: Optional[str], chars: str) -> Optional[str]:
    """Strip every character found in chars from both ends of s."""
    if s is None:
        return None
    trim_set = strdup(chars)
    if not trim_set:
        return strdup(s)
    return strdup(s).strip(trim_set)


def split(s: str, delim: str) -> List[str]:
    """Split s on delim, dropping the empty pieces between delimiters."""
    if len(delim) != 1:
        raise ValueError("delimiter must be a single character")
    text = strdup(s)
    if delim == "\0":
        return [text] if text else []
    return [word for word in text.split(delim) if word]


def itoa(n: int) -> str:
    """Decimal text of an integer, with a leading minus sign when negative."""
    return str(operator.index(n))


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Build a new string from f(index, char) applied to each character."""
    return "".join(f(index, ch) for index, ch in enumerate(strdup(s)))


Element = Union[str, int]


def striteri(s: MutableSequence[Element], f: Callable[[int, MutableSequence[Element]], None]) -> None:
    """Call f(index, s) for each element of s up to a NUL terminator.

    The callback receives the sequence itself so that it can change the
    element at the given index in place.
    """
    for index in range(len(s)):
        if s[index] in ("\0", 0):
            return
        f(index, s)