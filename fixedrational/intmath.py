"""Fixed-width (64-bit) integer helpers used by :class:`Rational`."""
from __future__ import annotations

from typing import Tuple

import numpy as np

_INT64 = np.iinfo(np.int64)

INT64_MIN = int(_INT64.min)
INT64_MAX = int(_INT64.max)

_MODULUS = 1 << 64


def fits(value: int) -> bool:
    """Return ``True`` when *value* is representable as a signed 64-bit integer."""
    return INT64_MIN <= value <= INT64_MAX


def wrap(value: int) -> int:
    """Reduce *value* into the int64 range with two's complement wraparound."""
    value &= _MODULUS - 1
    if value > INT64_MAX:
        value -= _MODULUS
    return value


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by the Euclidean algorithm.

    ``gcd(a, 0) == a`` and ``gcd(0, b) == b``; callers pass magnitudes.
    """
    while b != 0:
        a, b = b, a % b
    return a


def lcm(a: int, b: int) -> int:
    """Least common multiple, ``0`` when either argument is ``0``."""
    if a == 0 or b == 0:
        return 0
    return wrap((a // gcd(a, b)) * b)


def lcm_with_overflow(a: int, b: int) -> Tuple[int, bool]:
    if a == 0 or b == 0:
        return 0, False
    return multiply_with_overflow(a // gcd(a, b), b)


def truncated_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def truncated_rem(a: int, b: int) -> int:
    """Remainder of :func:`truncated_div`; takes the sign of the dividend."""
    r = abs(a) % abs(b)
    return -r if a < 0 else r


def wrapping_add(a: int, b: int) -> int:
    return wrap(a + b)


def wrapping_sub(a: int, b: int) -> int:
    return wrap(a - b)


def wrapping_mul(a: int, b: int) -> int:
    return wrap(a * b)


def wrapping_rem(a: int, b: int) -> int:
    return wrap(truncated_rem(a, b))


def _checked(exact: int) -> Tuple[int, bool]:
    return wrap(exact), not fits(exact)


def add_with_overflow(a: int, b: int) -> Tuple[int, bool]:
    return _checked(a + b)


def subtract_with_overflow(a: int, b: int) -> Tuple[int, bool]:
    return _checked(a - b)


def multiply_with_overflow(a: int, b: int) -> Tuple[int, bool]:
    return _checked(a * b)


def remainder_with_overflow(a: int, b: int) -> Tuple[int, bool]:
    # INT64_MIN % -1 traps on most hardware even though the remainder is 0.
    if a == INT64_MIN and b == -1:
        return 0, True
    return _checked(truncated_rem(a, b))


__all__ = [
    "INT64_MIN",
    "INT64_MAX",
    "fits",
    "wrap",
    "gcd",
    "lcm",
    "lcm_with_overflow",
    "truncated_div",
    "truncated_rem",
    "wrapping_add",
    "wrapping_sub",
    "wrapping_mul",
    "wrapping_rem",
    "add_with_overflow",
    "subtract_with_overflow",
    "multiply_with_overflow",
    "remainder_with_overflow",
]
