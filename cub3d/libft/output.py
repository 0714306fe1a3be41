"""Writing characters, strings and numbers to text streams, and a small
printf supporting the c, s, d, i, p, u, x, X and % conversions."""

from __future__ import annotations

import sys
from typing import Any, Callable, List, Optional, TextIO, Union

_INT_BITS = 32
_UINT_MASK = (1 << _INT_BITS) - 1


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def _emit(text: str, stream: Optional[TextIO]) -> int:
    _target(stream).write(text)
    return len(text)


def _to_uint32(n: int) -> int:
    return int(n) & _UINT_MASK


def _to_int32(n: int) -> int:
    value = _to_uint32(n)
    if value >= 1 << (_INT_BITS - 1):
        value -= 1 << _INT_BITS
    return value


def _char_text(c: Union[str, int]) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError("a single character is required")
        return c
    return chr(int(c) & 0xFF)


def _string_text(s: Optional[str]) -> str:
    return "(null)" if s is None else str(s)


def _hex_text(n: int, caps: bool) -> str:
    if n < 0:
        raise ValueError("hexadecimal output needs a non-negative number")
    return format(n, "X" if caps else "x")


def _pointer_text(p: Any) -> str:
    if p is None:
        return "(nil)"
    address = p if isinstance(p, int) else id(p)
    if address == 0:
        return "(nil)"
    return "0x" + _hex_text(address, False)


def put_char(c: Union[str, int], stream: Optional[TextIO] = None) -> int:
    """Write one character and return 1."""
    return _emit(_char_text(c), stream)


def put_str(s: Optional[str], stream: Optional[TextIO] = None) -> int:
    """Write a string, or "(null)" for None; return the characters written."""
    return _emit(_string_text(s), stream)


def put_endl(s: str, stream: Optional[TextIO] = None) -> int:
    """Write a string followed by a newline; return the characters written."""
    return _emit(str(s) + "\n", stream)


def put_nbr(n: int, stream: Optional[TextIO] = None) -> int:
    """Write a signed 32-bit integer in decimal; return the characters written."""
    return _emit(str(_to_int32(n)), stream)


def put_unbr(n: int, stream: Optional[TextIO] = None) -> int:
    """Write an unsigned 32-bit integer in decimal; return the characters written."""
    return _emit(str(_to_uint32(n)), stream)


def put_hex(n: int, caps: bool = False, stream: Optional[TextIO] = None) -> int:
    """Write a non-negative integer in hexadecimal, upper case when caps is set."""
    return _emit(_hex_text(int(n), caps), stream)


def put_ptr(p: Any, stream: Optional[TextIO] = None) -> int:
    """Write an address as 0x-prefixed hex, or "(nil)" for None or zero.

    An int is taken as the address itself; any other object is written
    by its identity.
    """
    return _emit(_pointer_text(p), stream)


def _convert(spec: str, take: Callable[[], Any]) -> str:
    if spec == "c":
        return _char_text(take())
    if spec == "s":
        return _string_text(take())
    if spec in ("d", "i"):
        return str(_to_int32(take()))
    if spec == "p":
        return _pointer_text(take())
    if spec == "u":
        return str(_to_uint32(take()))
    if spec == "x":
        return _hex_text(_to_uint32(take()), False)
    if spec == "X":
        return _hex_text(_to_uint32(take()), True)
    if spec == "%":
        return "%"
    return ""


def printf(fmt: str, *args: Any) -> int:
    """Format args into fmt, write the result to standard output and return
    its length. Unknown conversions produce nothing."""
    remaining = iter(args)

    def take() -> Any:
        try:
            return next(remaining)
        except StopIteration:
            raise TypeError("not enough arguments for format string") from None

    pieces: List[str] = []
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        pieces.append(_convert(spec, take))
    return _emit("".join(pieces), None)