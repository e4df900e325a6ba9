"""Byte-oriented string helpers with C library semantics.

These helpers reproduce the exact edge-case behaviour of the classic
C string routines (comparison results, truncation rules, 32-bit integer
wrap-around) while working on ordinary Python strings.
"""

from __future__ import annotations

from itertools import zip_longest

__all__ = [
    "split",
    "strncmp",
    "strcmp",
    "strnstr",
    "atoi",
    "atoi_base",
    "itoa",
    "strtrim",
    "substr",
    "strlcpy",
    "strlcat",
]

_WHITESPACE = " \t\n\v\f\r"
_DIGITS_LOWER = "0123456789abcdef"
_DIGITS_UPPER = "0123456789ABCDEF"


def _wrap_int32(value: int) -> int:
    """Reduce *value* to a signed 32-bit integer, two's complement style."""
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value & 0x80000000 else value


def _code(char: str) -> int:
    return ord(char) if char else 0


def split(text: str, sep: str) -> list[str]:
    """Split *text* on the single character *sep*, dropping empty pieces."""
    if len(sep) > 1:
        raise ValueError("separator must be a single character")
    if not sep:
        return [text] if text else []
    return [word for word in text.split(sep) if word]


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most *n* characters; the sign tells the ordering.

    A negative *n* compares the strings in full, as an unsigned size
    that wrapped around would.
    """
    if n < 0:
        return strcmp(s1, s2)
    for a, b in zip_longest(s1[:n], s2[:n], fillvalue=""):
        if a != b:
            return _code(a) - _code(b)
    return 0


def strcmp(s1: str, s2: str) -> int:
    """Compare two strings; return the difference at the first mismatch."""
    for a, b in zip_longest(s1, s2, fillvalue=""):
        if a != b:
            return _code(a) - _code(b)
    return 0


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Find *needle* wholly inside the first *length* characters of *haystack*.

    Returns the index of the first match, or None. An empty needle
    matches at index 0. A negative *length* searches the whole string.
    """
    if not needle:
        return 0
    window = haystack if length < 0 else haystack[:length]
    index = window.find(needle)
    return None if index < 0 else index


def atoi(text: str) -> int:
    """Parse a leading decimal integer, skipping leading whitespace.

    Parsing stops at the first non-digit; the result wraps to 32 bits.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    number = 0
    for char in rest:
        if not "0" <= char <= "9":
            break
        number = number * 10 + (ord(char) - ord("0"))
    return _wrap_int32(sign * number)


def atoi_base(text: str, base: int) -> int:
    """Parse a leading integer in *base* (1 to 16), digits in either case.

    No whitespace is skipped; the result wraps to 32 bits.
    """
    if not 1 <= base <= 16:
        raise ValueError(f"base must be between 1 and 16, got {base}")
    allowed = set(_DIGITS_LOWER[:base]) | set(_DIGITS_UPPER[:base])
    rest = text
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    number = 0
    for char in rest:
        if char not in allowed:
            break
        number = number * base + _DIGITS_LOWER.index(char.lower())
    return _wrap_int32(number * sign)


def itoa(n: int) -> str:
    """Render an integer in decimal."""
    return str(n)


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in *charset* from both ends of *text*."""
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most *length* characters of *text* beginning at *start*."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start:start + length]


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy *src* into a buffer of *size* characters including the terminator.

    Returns the copied text and the full length of *src*, so truncation
    happened when the second value is not less than *size*.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    return src[: max(size - 1, 0)], len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append *src* to *dst* in a buffer of *size* characters.

    Returns the resulting text and the length the combined string
    would have needed; *dst* is left unchanged when it already fills
    the buffer.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    used = min(len(dst), size)
    if used >= size:
        return dst, used + len(src)
    room = max(size - used - 1, 0)
    return dst + src[:room], used + len(src)