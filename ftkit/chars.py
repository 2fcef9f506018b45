"""Character classes and searches over C-style strings and byte buffers.

Text arguments are treated the way C treats strings: they end at the first
NUL character, if there is one.
"""

from __future__ import annotations

from itertools import zip_longest
from typing import Union

CharLike = Union[str, int]
BytesLike = Union[bytes, bytearray, memoryview]


def _code(c: CharLike) -> int:
    """Return the character code of a one-character string or an int."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return int(c)


def _char(c: CharLike) -> str:
    """Return *c* as a one-character string, narrowing ints to a C char."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(int(c) & 0xFF)


def _cstr(text: str) -> str:
    """Return *text* up to, not including, its first NUL."""
    return text.split("\0", 1)[0]


def _as_bytes(value: str | BytesLike) -> bytes:
    """Return *value* as bytes, encoding text as UTF-8 and stopping at NUL."""
    data = value.encode("utf-8") if isinstance(value, str) else bytes(value)
    return data.split(b"\0", 1)[0]


def is_alpha(c: CharLike) -> bool:
    """Tell whether *c* is an ASCII letter."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_digit(c: CharLike) -> bool:
    """Tell whether *c* is an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: CharLike) -> bool:
    """Tell whether *c* is an ASCII letter or digit."""
    return is_digit(c) or is_alpha(c)


def is_ascii(c: CharLike) -> bool:
    """Tell whether *c* lies in the 7-bit ASCII range 0 to 127."""
    return 0 <= _code(c) <= 127


def is_print(c: CharLike) -> bool:
    """Tell whether *c* is a printable ASCII character, space included."""
    return 32 <= _code(c) < 127


def contains_char(text: str, c: CharLike) -> bool:
    """Tell whether the string holds the character *c*.

    The terminating NUL is never found.
    """
    ch = _char(c)
    return ch != "\0" and ch in _cstr(text)


def contains_substring(text: str, find: str) -> bool:
    """Tell whether *find* occurs in *text*; an empty *find* never does."""
    needle = _cstr(find)
    return bool(needle) and needle in _cstr(text)


def strchr(text: str, c: CharLike) -> int | None:
    """Return the index of the first *c* in the string, or None.

    Searching for NUL finds the terminator, at the string's length.
    """
    ch = _char(c)
    body = _cstr(text)
    if ch == "\0":
        return len(body)
    index = body.find(ch)
    return None if index < 0 else index


def strcmp(a: str | BytesLike, b: str | BytesLike) -> int:
    """Compare two strings byte by byte as unsigned chars.

    The result is the difference of the first differing bytes, the end of
    a string counting as 0, or 0 when the strings are equal.
    """
    for x, y in zip_longest(_as_bytes(a), _as_bytes(b), fillvalue=0):
        if x != y:
            return x - y
    return 0


def memchr(data: BytesLike, c: int) -> int | None:
    """Return the index of the first byte equal to *c* (taken mod 256), or None."""
    index = bytes(data).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(a: BytesLike, b: BytesLike, n: int) -> int:
    """Compare the first *n* bytes of two buffers as unsigned chars."""
    if n < 0:
        raise ValueError("length must not be negative")
    if n > len(a) or n > len(b):
        raise ValueError(f"cannot compare {n} bytes: a buffer is shorter")
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0


def memccpy(src: BytesLike, c: int, n: int) -> tuple[bytes, bool]:
    """Copy at most *n* bytes of *src*, stopping after the first byte *c*.

    Returns the copied bytes and whether *c* was met within them.
    """
    if n < 0:
        raise ValueError("length must not be negative")
    data = bytes(src)
    if n > len(data):
        raise ValueError(f"cannot copy {n} bytes from a buffer of {len(data)}")
    index = data.find(c & 0xFF, 0, n)
    if index < 0:
        return data[:n], False
    return data[: index + 1], True