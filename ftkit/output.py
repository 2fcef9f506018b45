"""Writing characters, strings and numbers straight to file descriptors."""

from __future__ import annotations

import os
from typing import Union

STDOUT = 1

CharLike = Union[str, int]


def _write_all(fd: int, data: bytes) -> int:
    """Write every byte of *data* to *fd* and return how many were written."""
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]
    return len(data)


def putchar_fd(c: CharLike, fd: int) -> int:
    """Write one character to *fd*.

    An int is written as a single byte (taken mod 256); a one-character
    string is written in UTF-8.  Returns the number of bytes written.
    """
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        data = c.encode("utf-8")
    else:
        data = bytes([int(c) & 0xFF])
    return _write_all(fd, data)


def putchar(c: CharLike) -> int:
    """Write one character to standard output."""
    return putchar_fd(c, STDOUT)


def putstr_fd(s: str | None, fd: int) -> int:
    """Write *s* to *fd* in UTF-8; None writes nothing."""
    if s is None:
        return 0
    return _write_all(fd, s.encode("utf-8"))


def putstr(s: str | None) -> int:
    """Write *s* to standard output."""
    return putstr_fd(s, STDOUT)


def putendl_fd(s: str | None, fd: int) -> int:
    """Write *s* and a newline to *fd*; None writes nothing at all."""
    if s is None:
        return 0
    return _write_all(fd, (s + "\n").encode("utf-8"))


def putendl(s: str | None) -> int:
    """Write *s* and a newline to standard output."""
    return putendl_fd(s, STDOUT)


def putnbr_fd(n: int, fd: int) -> int:
    """Write the decimal form of the integer *n* to *fd*."""
    return _write_all(fd, str(int(n)).encode("ascii"))


def putnbr(n: int) -> int:
    """Write the decimal form of *n* to standard output."""
    return putnbr_fd(n, STDOUT)