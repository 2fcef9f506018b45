"""Conversion specifications: flags, length modifiers, width and precision.

A specification is what follows a ``%`` in a format string, up to and not
including its conversion character.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Union

from ftkit.convert import atoi


class FormatError(ValueError):
    """Raised when a value cannot be written under its conversion."""


class Flag(Enum):
    """The flag characters a specification may carry."""

    POUND = "#"
    ZERO = "0"
    MORE = "+"
    LESS = "-"
    SPACE = " "


class Modifier(Enum):
    """The length modifiers a specification may carry."""

    HH = "hh"
    H = "h"
    LL = "ll"
    L = "l"
    J = "j"
    Z = "z"


_FLAG_CHARS = "-+#0 "
_MODIFIER_CHARS = "hljz"
_OPTION_CHARS = "-0# +hljz."


def _is_digit(c: str) -> bool:
    return "0" <= c <= "9"


@dataclass(frozen=True)
class FormatSpec:
    """One parsed conversion specification.

    ``end`` is the index of the conversion character in the format string,
    or the string's length when the format ends inside the specification;
    ``conversion`` is that character, or an empty string in the latter case.
    """

    flags: frozenset[Flag] = field(default_factory=frozenset)
    modifiers: frozenset[Modifier] = field(default_factory=frozenset)
    dot: bool = False
    precision: int = 0
    width: int = 0
    conversion: str = ""
    end: int = 0

    def has(self, flag: Union[Flag, Modifier]) -> bool:
        """Tell whether the specification carries *flag* or length modifier."""
        if isinstance(flag, Modifier):
            return flag in self.modifiers
        return flag in self.flags


def parse_spec(fmt: str, pos: int) -> FormatSpec:
    """Parse the specification that starts at *pos*, just after a ``%``.

    Flags, width, a dot with its precision and length modifiers may come in
    any order and repeat.  Digits read after a dot set the precision, other
    digits set the width; a leading ``0`` is the zero flag.
    """
    if not 0 <= pos <= len(fmt):
        raise ValueError(f"position {pos} lies outside the format string")
    flags: set[Flag] = set()
    modifiers: set[Modifier] = set()
    dot = False
    precision = 0
    width = 0
    i = pos
    length = len(fmt)

    while i < length and (fmt[i] in _OPTION_CHARS or _is_digit(fmt[i])):
        c = fmt[i]
        if c in _FLAG_CHARS:
            flags.add(Flag(c))
            i += 1
        elif c == "." or _is_digit(c):
            if c == ".":
                dot = True
                i += 1
            start = i
            while i < length and _is_digit(fmt[i]):
                i += 1
            number = atoi(fmt[start:i])
            if dot:
                precision = number
            else:
                width = number
        else:
            if c in "hl" and i + 1 < length and fmt[i + 1] == c:
                modifiers.add(Modifier(c * 2))
                i += 2
            else:
                modifiers.add(Modifier(c))
                i += 1

    conversion = fmt[i] if i < length else ""
    return FormatSpec(
        flags=frozenset(flags),
        modifiers=frozenset(modifiers),
        dot=dot,
        precision=precision,
        width=width,
        conversion=conversion,
        end=i,
    )


def pad(count: int, fill: str) -> str:
    """Return *count* copies of the single character *fill*, or nothing."""
    if len(fill) != 1:
        raise ValueError(f"fill must be a single character, got {fill!r}")
    return fill * count if count > 0 else ""