"""Character and string conversions: c, C, s and S.

Each function returns the bytes its conversion writes, padding included.
Wide characters are encoded the way the formatter's locale allows, given
as ``mb_cur_max``, the longest multibyte sequence a character may take.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Union

from ftkit.spec import Flag, FormatError, FormatSpec, pad

DEFAULT_MB_CUR_MAX = 4

_MAX_CODE = 0x10FFFF
_SURROGATE_LOW = 0xD800
_SURROGATE_HIGH = 0xDFFF
_MB_BIT_LIMITS = {1: 8, 2: 11, 3: 16, 4: 21}

CharLike = Union[str, int]
BytesLike = Union[bytes, bytearray, memoryview]


def _check_mb(mb_cur_max: int) -> None:
    if mb_cur_max < 1:
        raise ValueError(f"mb_cur_max must be at least 1, not {mb_cur_max}")


def _code_of(value: object) -> int:
    """Return the character code of a one-character string or an int."""
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"expected a single character, got {value!r}")
        return ord(value)
    if isinstance(value, int):
        return value
    raise TypeError(f"expected a character or an int, not {type(value).__name__}")


def _bad_code_point(code: int) -> bool:
    """Tell whether *code* lies outside Unicode or among the surrogates."""
    return code > _MAX_CODE or _SURROGATE_LOW <= code <= _SURROGATE_HIGH


def _raw_bytes(code: int) -> bytes:
    """Encode *code* by its bit length; codes of eight bits stay one byte."""
    bits = code.bit_length()
    if code == 0:
        return b""
    if bits <= 8:
        return bytes([code])
    if bits <= 11:
        return bytes([(code >> 6) | 0xC0, (code & 0x3F) | 0x80])
    if bits <= 16:
        return bytes(
            [(code >> 12) | 0xE0, ((code >> 6) & 0x3F) | 0x80, (code & 0x3F) | 0x80]
        )
    if bits <= 21:
        return bytes(
            [
                (code >> 18) | 0xF0,
                ((code >> 12) & 0x3F) | 0x80,
                ((code >> 6) & 0x3F) | 0x80,
                (code & 0x3F) | 0x80,
            ]
        )
    return b""


def _encode(code: int, mb_cur_max: int) -> tuple[bytes, bool]:
    """Return the bytes for *code* and whether the locale can write it."""
    if code < 0:
        raise FormatError(f"negative wide character {code}")
    ok = not _bad_code_point(code)
    limit = _MB_BIT_LIMITS.get(mb_cur_max)
    if limit is not None and code.bit_length() > limit:
        ok = False
    return _raw_bytes(code), ok


def _field(spec: FormatSpec, body: bytes) -> bytes:
    """Pad *body* with spaces to the width, on the left unless ``-`` is set."""
    fill = pad(spec.width - len(body), " ").encode("ascii")
    return body + fill if spec.has(Flag.LESS) else fill + body


def encode_wchar(code: int, mb_cur_max: int = DEFAULT_MB_CUR_MAX) -> bytes:
    """Return the multibyte form of the wide character *code*.

    Codes of up to eight bits are written as one byte; longer ones take the
    two- to four-byte forms.  A code outside Unicode, a surrogate, or one
    too long for *mb_cur_max* raises :class:`FormatError`.
    """
    _check_mb(mb_cur_max)
    data, ok = _encode(code, mb_cur_max)
    if not ok:
        raise FormatError(f"wide character {code:#x} cannot be written")
    return data


def wchar_len(code: int) -> int:
    """Return how many bytes the UTF-8 form of *code* takes."""
    if 0 <= code <= 0x7F:
        return 1
    if 0x80 <= code <= 0x7FF:
        return 2
    if 0x800 <= code <= 0xD7FF or 0xE000 <= code <= 0xFFFF:
        return 3
    if 0x10000 <= code <= _MAX_CODE:
        return 4
    raise FormatError(f"{code} is not a Unicode scalar value")


def format_char(spec: FormatSpec, value: CharLike) -> bytes:
    """Write ``%c``: the low byte of *value*, padded to the width."""
    return _field(spec, bytes([_code_of(value) & 0xFF]))


def format_wchar(
    spec: FormatSpec, value: CharLike, mb_cur_max: int = DEFAULT_MB_CUR_MAX
) -> bytes:
    """Write ``%C`` or ``%lc``: one wide character, padded to the width."""
    return _field(spec, encode_wchar(_code_of(value), mb_cur_max))


def format_str(spec: FormatSpec, value: str | BytesLike | None) -> bytes:
    """Write ``%s``; None is written as ``(null)``.

    Text is taken up to its first NUL and written in UTF-8; a precision
    keeps at most that many bytes.
    """
    if value is None:
        body = b"(null)"
    elif isinstance(value, str):
        body = value.split("\0", 1)[0].encode("utf-8")
    elif isinstance(value, (bytes, bytearray, memoryview)):
        body = bytes(value).split(b"\0", 1)[0]
    else:
        raise TypeError(f"%s needs a string, not {type(value).__name__}")
    if spec.dot and spec.precision >= 0:
        body = body[: spec.precision]
    return _field(spec, body)


def _wide_codes(value: str | Iterable[CharLike]) -> list[int]:
    """Return the codes of a wide string, up to its first NUL."""
    codes: list[int] = []
    for item in value:
        code = _code_of(item)
        if code == 0:
            break
        if code < 0:
            raise FormatError(f"negative wide character {code}")
        codes.append(code)
    return codes


def _precision_bytes(codes: list[int], precision: int) -> int:
    """Count the bytes of the whole characters that fit in *precision*."""
    total = 0
    for code in codes:
        if precision == 0:
            break
        if code <= 0x7F:
            need = 1
        elif code <= 0x7FF:
            need = 2
        elif code <= 0xFFFF:
            need = 3
        elif code <= _MAX_CODE:
            need = 4
        else:
            break
        if need > 1 and precision < need:
            break
        precision -= need
        total += need
    return total


def format_wstr(
    spec: FormatSpec,
    value: str | Iterable[CharLike] | None,
    mb_cur_max: int = DEFAULT_MB_CUR_MAX,
) -> bytes:
    """Write ``%S`` or ``%ls``: a wide string, taken up to its first NUL.

    An empty string writes nothing, not even padding.  A string holding a
    character that cannot be written raises :class:`FormatError`, unless a
    precision is given that the characters before the first bad code point
    cover; the string is then cut to that precision.
    """
    _check_mb(mb_cur_max)
    codes = _wide_codes("(null)" if value is None else value)
    if not codes:
        return b""
    pieces = [_encode(code, mb_cur_max) for code in codes]
    body = b"".join(data for data, _ in pieces)
    estimate = sum(min(code.bit_length(), mb_cur_max) for code in codes)

    if not all(ok for _, ok in pieces):
        first_bad = next(
            (index for index, code in enumerate(codes) if _bad_code_point(code)),
            estimate,
        )
        if not spec.dot or min(first_bad, estimate) < spec.precision:
            raise FormatError("wide string holds a character that cannot be written")

    if spec.dot and spec.precision < estimate:
        count = _precision_bytes(codes, spec.precision)
    else:
        count = estimate
    return _field(spec, body[:count])