"""Integer conversions: d, i, D, u, U, o, O, x, X, b, B and p.

Each function lays out one value under a parsed specification and returns
the text that the conversion produces, padding included.
"""

from __future__ import annotations

from ftkit.convert import itoa, itoa_base
from ftkit.spec import Flag, FormatSpec, Modifier, pad

_DECIMAL = "0123456789"
_OCTAL = "01234567"
_BINARY = "01"
_HEX_LOWER = "0123456789abcdef"
_HEX_UPPER = "0123456789ABCDEF"
_UINT32_MAX = 0xFFFFFFFF


def _as_int(value: object, conversion: str) -> int:
    """Return *value* if it is an integer, else raise TypeError."""
    if isinstance(value, int):
        return value
    raise TypeError(
        f"%{conversion} needs an integer, not {type(value).__name__}"
    )


def _unsigned(value: int, bits: int) -> int:
    """Reduce *value* to an unsigned integer of *bits* bits."""
    return value & ((1 << bits) - 1)


def _signed(value: int, bits: int) -> int:
    """Reduce *value* to a two's-complement integer of *bits* bits."""
    value = _unsigned(value, bits)
    return value - (1 << bits) if value >> (bits - 1) else value


def _magnitude_text(value: int, bits: int) -> str:
    """Decimal text of |value|; the most negative value keeps its sign."""
    if value == -(1 << (bits - 1)):
        return str(value)
    return str(abs(value))


def _signed_field(
    spec: FormatSpec,
    value: int,
    shown: int,
    bits: int,
    zero_fill_respects_less: bool,
) -> str:
    """Lay out a signed decimal.

    *value* drives the width and precision arithmetic, *shown* is what is
    written; they differ only when a short length modifier narrows it.
    """
    less = spec.has(Flag.LESS)
    zero = spec.has(Flag.ZERO)
    more = spec.has(Flag.MORE)

    blank_zero = spec.dot and value == 0
    zeros = spec.precision - len(_magnitude_text(value, bits))
    if blank_zero:
        zeros += 1
    zeros = max(zeros, 0)

    plus = 1 if more and value >= 0 else 0
    size = spec.width - (zeros + len(str(value)) + plus)
    if blank_zero:
        size += 1
    space = spec.has(Flag.SPACE) and value >= 0 and not more
    if space:
        size -= 1

    parts: list[str] = []
    if size > 0 and (not zero or spec.precision > 0) and not less:
        parts.append(pad(size, " "))
        size = 0
    if space:
        parts.append(" ")

    if more and shown >= 0:
        parts.append("+")
    digits = shown
    if shown < 0 and shown != -(1 << (bits - 1)):
        parts.append("-")
        digits = -shown
    if (
        size > 0
        and zero
        and spec.precision == 0
        and (not less or not zero_fill_respects_less)
    ):
        parts.append(pad(size, "0"))
        size = 0
    parts.append(pad(zeros, "0"))
    if not (spec.dot and digits == 0):
        parts.append(str(digits))
    if size > 0 and less:
        parts.append(pad(size, " "))
    return "".join(parts)


def _plain_field(spec: FormatSpec, text: str, value: int, zero_fill: bool) -> str:
    """Lay out an unsigned number that carries no prefix.

    *zero_fill* tells whether leftover width may be filled with zeros.
    """
    less = spec.has(Flag.LESS)
    blank_zero = spec.dot and value == 0
    zeros = spec.precision - len(text)
    if blank_zero:
        zeros += 1
    zeros = max(zeros, 0)
    size = spec.width - (zeros + len(text))
    if blank_zero:
        size += 1

    parts: list[str] = []
    if (
        size > 0
        and (not spec.has(Flag.ZERO) or spec.precision > 0)
        and not less
    ):
        parts.append(pad(size, " "))
        size = 0
    if size > 0 and zero_fill:
        parts.append(pad(size, "0"))
        size = 0
    parts.append(pad(zeros, "0"))
    if not blank_zero:
        parts.append(text)
    if size > 0 and less:
        parts.append(pad(size, " "))
    return "".join(parts)


def _hex_tail(
    spec: FormatSpec,
    text: str,
    value: int,
    zeros: int,
    size: int,
    upper: bool,
    prefix_always: bool,
) -> str:
    """Write a hexadecimal field once its padding has been worked out."""
    less = spec.has(Flag.LESS)
    zero = spec.has(Flag.ZERO)
    parts: list[str] = []
    if size > 0 and (not zero or spec.dot) and not less:
        parts.append(pad(size, " "))
        size = 0
    if (spec.has(Flag.POUND) and value != 0) or prefix_always:
        parts.append("0X" if upper else "0x")
    if size > 0 and zero and not spec.dot and not less:
        parts.append(pad(size, "0"))
        size = 0
    parts.append(pad(zeros, "0"))
    if not (spec.dot and value == 0):
        parts.append(text)
    if size > 0 and less:
        parts.append(pad(size, " "))
    return "".join(parts)


def format_int(spec: FormatSpec, value: int) -> str:
    """Write a plain ``%d``/``%i`` value, taken as a 32-bit int.

    With ``h`` or ``hh`` the written number is narrowed to a short or a
    signed char, while the padding is still worked out from the int.
    """
    number = _signed(_as_int(value, spec.conversion), 32)
    if spec.has(Modifier.H):
        shown = _signed(number, 16)
    elif spec.has(Modifier.HH):
        shown = _signed(number, 8)
    else:
        shown = number
    return _signed_field(spec, number, shown, 32, zero_fill_respects_less=True)


def format_long(spec: FormatSpec, value: int) -> str:
    """Write ``%D`` or ``%ld``/``%lld``/``%jd``, taken as a 64-bit long.

    Unlike :func:`format_int`, the zero flag fills the width even when the
    field is left-justified.
    """
    number = _signed(_as_int(value, spec.conversion), 64)
    return _signed_field(spec, number, number, 64, zero_fill_respects_less=False)


def format_unsigned(spec: FormatSpec, value: int) -> str:
    """Write ``%u``, ``%U``, or ``%d``/``%i`` under the ``z`` modifier.

    A ``z`` value above the 32-bit range under a conversion other than
    ``u`` is written as a signed 64-bit number.
    """
    conv = spec.conversion
    value = _as_int(value, conv)
    if conv == "U" or spec.has(Modifier.L) or spec.has(Modifier.LL):
        number = _unsigned(value, 64)
        text = itoa_base(number, _DECIMAL)
    elif spec.has(Modifier.Z):
        number = _unsigned(value, 64)
        text = itoa_base(number, _DECIMAL)
        if number > _UINT32_MAX and conv != "u":
            text = itoa(_signed(number, 64))
    elif spec.has(Modifier.J):
        number = _unsigned(value, 64)
        text = itoa_base(number, _DECIMAL)
    elif spec.has(Modifier.HH) and conv == "u":
        number = _unsigned(value, 8)
        text = itoa_base(number, _DECIMAL)
    else:
        number = _unsigned(value, 32)
        text = itoa_base(number, _DECIMAL)
    zero_fill = spec.has(Flag.ZERO) and spec.precision == 0
    return _plain_field(spec, text, number, zero_fill)


def format_octal(spec: FormatSpec, value: int) -> str:
    """Write ``%o`` or ``%O``; ``#`` puts a leading zero before the digits."""
    conv = spec.conversion
    value = _as_int(value, conv)
    if conv == "O" or spec.has(Modifier.L) or spec.has(Modifier.LL):
        bits = 64
    elif spec.has(Modifier.Z) or spec.has(Modifier.J):
        bits = 64
    elif spec.has(Modifier.H):
        bits = 16
    elif spec.has(Modifier.HH):
        bits = 8
    else:
        bits = 32
    number = _unsigned(value, bits)
    text = itoa_base(number, _OCTAL)

    pound = spec.has(Flag.POUND)
    zero = spec.has(Flag.ZERO)
    less = spec.has(Flag.LESS)
    prefixed = pound and (number != 0 or spec.dot)

    zeros = spec.precision - len(text) - (1 if prefixed else 0)
    if spec.dot and number == 0:
        zeros += 1
    zeros = max(zeros, 0)
    extra = 1 if prefixed and zeros == 0 else 0
    size = spec.width - (zeros + len(text) + (1 if spec.has(Flag.MORE) else 0) + extra)
    if spec.dot and number == 0 and not pound:
        size += 1

    parts: list[str] = []
    if (
        size > 0
        and (not zero or spec.dot or (pound and not zero and number == 0))
        and not less
    ):
        parts.append(pad(size, " "))
        size = 0
    if prefixed:
        parts.append("0")
    if (
        size > 0
        and zero
        and not less
        and ((not spec.dot and not pound) or number == 0)
    ):
        parts.append(pad(size, "0"))
        size = 0
    parts.append(pad(zeros, "0"))
    if not (spec.dot and number == 0):
        parts.append(text)
    if size > 0 and less:
        parts.append(pad(size, " "))
    return "".join(parts)


def format_hex(spec: FormatSpec, value: int, upper: bool) -> str:
    """Write ``%x`` or, with *upper*, ``%X``; ``#`` adds a ``0x`` prefix."""
    value = _as_int(value, spec.conversion)
    wide = spec.has(Modifier.L) or spec.has(Modifier.Z)
    long_long = spec.has(Modifier.LL) or spec.has(Modifier.J)
    narrow = spec.has(Modifier.HH)
    if wide:
        bits = 64
    elif upper:
        bits = 64 if long_long else 8 if narrow else 32
    else:
        bits = 8 if narrow else 64 if long_long else 32
    number = _unsigned(value, bits)
    text = itoa_base(number, _HEX_UPPER if upper else _HEX_LOWER)

    pound = spec.has(Flag.POUND)
    zeros = spec.precision - len(text)
    if spec.dot and number == 0:
        zeros += 1
    zeros = max(zeros, 0)
    size = spec.width
    if pound and (number != 0 or (spec.dot and spec.precision != 0)):
        size -= 2
    size -= zeros + len(text) + (1 if spec.has(Flag.MORE) else 0)
    if spec.dot and number == 0 and not pound:
        size += 1
    if spec.dot and spec.precision == 0 and number == 0 and size > 0 and pound:
        size += 1
    return _hex_tail(spec, text, number, zeros, size, upper, prefix_always=False)


def format_binary(spec: FormatSpec, value: int) -> str:
    """Write ``%b`` or ``%B`` in base two."""
    conv = spec.conversion
    value = _as_int(value, conv)
    if conv == "B" or spec.has(Modifier.Z) or spec.has(Modifier.J):
        bits = 64
    elif spec.has(Modifier.H):
        bits = 16
    elif spec.has(Modifier.HH):
        bits = 8
    else:
        bits = 32
    number = _unsigned(value, bits)
    text = itoa_base(number, _BINARY)
    zero_fill = (
        spec.has(Flag.ZERO)
        and not spec.has(Flag.LESS)
        and ((not spec.dot and not spec.has(Flag.POUND)) or number == 0)
    )
    return _plain_field(spec, text, number, zero_fill)


def format_pointer(spec: FormatSpec, value: int | None) -> str:
    """Write ``%p``: the address in lower-case hex after ``0x``; None is 0."""
    number = 0 if value is None else _unsigned(_as_int(value, spec.conversion), 64)
    text = itoa_base(number, _HEX_LOWER)
    size = spec.width - len(text) - 2
    return _hex_tail(spec, text, number, 0, size, upper=False, prefix_always=True)