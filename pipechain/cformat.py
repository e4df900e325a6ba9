"""A small printf-style formatter with C conversion semantics.

Supported conversions are ``%c``, ``%s``, ``%p``, ``%d``, ``%i``, ``%u``,
``%x``, ``%X`` and ``%%``. Integers wrap to the width of the C type the
conversion expects. An unknown conversion character produces no output,
and neither does a lone ``%`` at the end of the template.
"""

from __future__ import annotations

import operator
import sys
from collections.abc import Iterator
from typing import Any, TextIO

__all__ = ["cformat", "cprintf"]

_NULL_STRING = "(null)"


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value & 0x80000000 else value


def _to_uint32(value: int) -> int:
    return value & 0xFFFFFFFF


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError("%c requires a single character")
        return value
    return chr(operator.index(value) & 0xFF)


def _format_string(value: Any) -> str:
    return _NULL_STRING if value is None else str(value)


def _format_pointer(value: Any) -> str:
    if value is None:
        address = 0
    elif isinstance(value, int):
        address = value
    else:
        address = id(value)
    return f"0x{address & 0xFFFFFFFFFFFFFFFF:x}"


def _format_signed(value: Any) -> str:
    return str(_to_int32(operator.index(value)))


def _format_unsigned(value: Any) -> str:
    return str(_to_uint32(operator.index(value)))


def _format_hex(value: Any) -> str:
    return f"{_to_uint32(operator.index(value)):x}"


def _format_hex_upper(value: Any) -> str:
    return f"{_to_uint32(operator.index(value)):X}"


_CONVERSIONS = {
    "c": _format_char,
    "s": _format_string,
    "p": _format_pointer,
    "d": _format_signed,
    "i": _format_signed,
    "u": _format_unsigned,
    "x": _format_hex,
    "X": _format_hex_upper,
}


def _pieces(template: str, args: tuple[Any, ...]) -> Iterator[str]:
    arguments = iter(args)
    chars = iter(template)
    for char in chars:
        if char != "%":
            yield char
            continue
        spec = next(chars, None)
        if spec is None:
            return
        if spec == "%":
            yield "%"
            continue
        converter = _CONVERSIONS.get(spec)
        if converter is None:
            continue
        try:
            value = next(arguments)
        except StopIteration:
            raise TypeError("not enough arguments for format string") from None
        yield converter(value)


def cformat(template: str, *args: Any) -> str:
    """Return *template* with its conversions replaced by *args*."""
    return "".join(_pieces(template, args))


def cprintf(template: str, *args: Any, stream: TextIO | None = None) -> int:
    """Write the formatted text to *stream* (standard output by default).

    Returns the number of characters written.
    """
    text = cformat(template, *args)
    target = sys.stdout if stream is None else stream
    target.write(text)
    return len(text)