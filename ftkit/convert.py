"""Conversions between integers and their textual forms."""

from __future__ import annotations

_WORD_MAX = 9223372036854775807
_WORD_MIN = -9223372036854775808
_UWORD_MOD = 1 << 64
_INT32_MAX = 2147483647
_DIGITS = "0123456789abcdef"


def _to_int32(value: int) -> int:
    """Reduce *value* to a signed 32-bit integer, wrapping around."""
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value > _INT32_MAX else value


def _skip_sign(text: str, pos: int) -> tuple[int, int]:
    """Return the sign found at *pos* and the position after it."""
    if pos < len(text) and text[pos] in "+-":
        return (-1 if text[pos] == "-" else 1), pos + 1
    return 1, pos


def _leading_digits(text: str, pos: int) -> str:
    """Return the run of ASCII digits starting at *pos*."""
    end = pos
    while end < len(text) and "0" <= text[end] <= "9":
        end += 1
    return text[pos:end]


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way C's atoi does.

    Leading whitespace (space and characters 8 to 13) is skipped, one sign
    is accepted, and digits are read until the first non-digit.  A positive
    value reaching the 64-bit limit, or one with more than 19 digits, gives
    -1; a negative value beyond the limit gives 0.  Otherwise the result is
    wrapped to a signed 32-bit integer.
    """
    pos = 0
    while pos < len(text) and (text[pos] == " " or 8 <= ord(text[pos]) <= 13):
        pos += 1
    sign, pos = _skip_sign(text, pos)
    result = 0
    for count, digit in enumerate(_leading_digits(text, pos), start=1):
        result = result * 10 + int(digit)
        if sign == 1 and (result >= _WORD_MAX or count > 19):
            return -1
        if sign == -1 and (result > _WORD_MAX or count > 19):
            return 0
    return _to_int32(sign * result)


def is_int(text: str) -> bool:
    """Tell whether the leading integer in *text* fits in a signed 32-bit int."""
    pos = 0
    while pos < len(text) and (text[pos] == " " or 9 <= ord(text[pos]) <= 13):
        pos += 1
    sign, pos = _skip_sign(text, pos)
    digits = _leading_digits(text, pos)
    magnitude = int(digits) if digits else 0
    limit = _INT32_MAX + 1 if sign < 0 else _INT32_MAX
    return magnitude <= limit


def itoa(n: int) -> str:
    """Return the decimal text of a signed 64-bit integer."""
    if not _WORD_MIN <= n <= _WORD_MAX:
        raise OverflowError(f"{n} does not fit in a signed 64-bit integer")
    return str(n)


def itoa_base(value: int, digits: str) -> str:
    """Write an unsigned 64-bit *value* using *digits* as the digit alphabet."""
    if len(digits) < 2:
        raise ValueError("a digit alphabet needs at least two symbols")
    if not 0 <= value < _UWORD_MOD:
        raise OverflowError(f"{value} does not fit in an unsigned 64-bit integer")
    if value == 0:
        return digits[0]
    base = len(digits)
    out: list[str] = []
    while value:
        value, rem = divmod(value, base)
        out.append(digits[rem])
    return "".join(reversed(out))


def litoa_base(value: int, base: int) -> str:
    """Write *value*, taken as an unsigned 64-bit integer, in *base* 2 to 16.

    Lower-case letters are used for digits above 9.  Base 10 goes through
    :func:`itoa`, so values from 2**63 upward come out negative there.
    """
    if not 2 <= base <= 16:
        raise ValueError(f"base must be between 2 and 16, not {base}")
    value %= _UWORD_MOD
    if base == 10:
        return itoa(value - _UWORD_MOD if value > _WORD_MAX else value)
    return itoa_base(value, _DIGITS[:base])