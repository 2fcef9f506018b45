"""Small integer arithmetic helpers."""

from __future__ import annotations

import math


def factorial(n: int) -> int:
    """Return n! for 0 <= n <= 12, the range that fits in a 32-bit int."""
    if not 0 <= n <= 12:
        raise ValueError(f"factorial is defined here for 0..12, not {n}")
    return math.prod(range(1, n + 1))


def power(nb: int, exponent: int) -> int:
    """Raise *nb* to a non-negative integer *exponent*.

    Any exponent of 0 gives 1; a negative exponent gives 0.
    """
    if exponent == 0:
        return 1
    if exponent < 0 or nb == 0:
        return 0
    result = 1
    for _ in range(exponent):
        result *= nb
    return result


def exact_sqrt(n: int) -> int:
    """Return the integer square root of *n* if *n* is a perfect square, else 0."""
    if n <= 0:
        return 0
    root = math.isqrt(n)
    return root if root * root == n else 0


def is_neg(n: int) -> bool:
    """Tell whether *n* is below zero."""
    return n < 0


def is_positive(n: int) -> bool:
    """Tell whether *n* is zero or above."""
    return n >= 0