"""printf-style formatting into bytes and onto standard output."""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterator

from ftkit.integers import (
    format_binary,
    format_hex,
    format_int,
    format_long,
    format_octal,
    format_pointer,
    format_unsigned,
)
from ftkit.spec import Flag, FormatError, FormatSpec, Modifier, pad, parse_spec
from ftkit.text import (
    DEFAULT_MB_CUR_MAX,
    format_char,
    format_str,
    format_wchar,
    format_wstr,
)

_Handler = Callable[[FormatSpec, Iterator[object]], bytes]


def _take(spec: FormatSpec, args: Iterator[object]) -> object:
    try:
        return next(args)
    except StopIteration:
        raise FormatError(f"no argument left for %{spec.conversion}") from None


def _int(spec: FormatSpec, args: Iterator[object]) -> bytes:
    return format_int(spec, _take(spec, args)).encode("ascii")


def _long(spec: FormatSpec, args: Iterator[object]) -> bytes:
    return format_long(spec, _take(spec, args)).encode("ascii")


def _unsigned(spec: FormatSpec, args: Iterator[object]) -> bytes:
    return format_unsigned(spec, _take(spec, args)).encode("ascii")


def _octal(spec: FormatSpec, args: Iterator[object]) -> bytes:
    return format_octal(spec, _take(spec, args)).encode("ascii")


def _hex_lower(spec: FormatSpec, args: Iterator[object]) -> bytes:
    return format_hex(spec, _take(spec, args), False).encode("ascii")


def _hex_upper(spec: FormatSpec, args: Iterator[object]) -> bytes:
    return format_hex(spec, _take(spec, args), True).encode("ascii")


def _binary(spec: FormatSpec, args: Iterator[object]) -> bytes:
    return format_binary(spec, _take(spec, args)).encode("ascii")


def _pointer(spec: FormatSpec, args: Iterator[object]) -> bytes:
    return format_pointer(spec, _take(spec, args)).encode("ascii")


def _str(spec: FormatSpec, args: Iterator[object]) -> bytes:
    return format_str(spec, _take(spec, args))


def _wstr(spec: FormatSpec, args: Iterator[object]) -> bytes:
    return format_wstr(spec, _take(spec, args), DEFAULT_MB_CUR_MAX)


def _char(spec: FormatSpec, args: Iterator[object]) -> bytes:
    return format_char(spec, _take(spec, args))


def _wchar(spec: FormatSpec, args: Iterator[object]) -> bytes:
    return format_wchar(spec, _take(spec, args), DEFAULT_MB_CUR_MAX)


def _percent(spec: FormatSpec, args: Iterator[object]) -> bytes:
    size = spec.width - 1
    less = spec.has(Flag.LESS)
    fill = "0" if spec.has(Flag.ZERO) and not less else " "
    if less:
        return ("%" + pad(size, " ")).encode("ascii")
    return (pad(size, fill) + "%").encode("ascii")


def _select(spec: FormatSpec) -> _Handler | None:
    """Choose the handler for a conversion, or None if it is unknown."""
    conv = spec.conversion
    if not conv:
        return None
    long_ = spec.has(Modifier.L)
    long_long = spec.has(Modifier.LL)
    if (conv == "u" and not long_ and not long_long) or (
        conv in "di" and spec.has(Modifier.Z)
    ):
        return _unsigned
    if conv == "x":
        return _hex_lower
    if conv == "X":
        return _hex_upper
    if conv in "oO":
        return _octal
    if conv == "D" or (
        conv in "di" and (long_ or long_long or spec.has(Modifier.J))
    ):
        return _long
    if conv == "s" and not long_:
        return _str
    if conv in "di":
        return _int
    if conv in "Ss":
        return _wstr
    if conv == "c" and not long_:
        return _char
    if conv in "Uu":
        return _unsigned
    if conv in "Cc":
        return _wchar
    return {"p": _pointer, "b": _binary, "B": _binary, "%": _percent}.get(conv)


def _render(fmt: str, args: tuple[object, ...]) -> Iterator[bytes]:
    """Yield the output of *fmt* piece by piece.

    Text before an unknown or unfinished conversion is dropped, and output
    resumes at the conversion character.
    """
    fmt = fmt.split("\0", 1)[0]
    pending = iter(args)
    pos = 0
    while pos < len(fmt):
        pct = fmt.find("%", pos)
        if pct < 0:
            yield fmt[pos:].encode("utf-8")
            return
        text = fmt[pos:pct].encode("utf-8")
        spec = parse_spec(fmt, pct + 1)
        handler = _select(spec)
        if handler is None:
            pos = spec.end
            continue
        if handler is _wchar:
            chunk = handler(spec, pending)
            if text:
                yield text
        else:
            if text:
                yield text
            chunk = handler(spec, pending)
        if chunk:
            yield chunk
        pos = spec.end + 1


def sformat(fmt: str, *args: object) -> bytes:
    """Return the bytes that formatting *args* under *fmt* produces."""
    return b"".join(_render(fmt, args))


def printf(fmt: str, *args: object) -> int:
    """Write the formatted output to standard output and return its length.

    Output produced before a conversion fails is still written; the
    failure is raised as :class:`FormatError`.
    """
    sys.stdout.flush()
    out = sys.stdout.buffer
    written = 0
    try:
        for chunk in _render(fmt, args):
            out.write(chunk)
            written += len(chunk)
    finally:
        out.flush()
    return written