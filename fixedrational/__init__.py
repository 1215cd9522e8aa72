"""Exact rational numbers with 64-bit components."""

from .rational import (
    DEFAULT_EPS,
    INFINITY,
    NAN,
    NEG_INFINITY,
    OverflowResult,
    Rational,
    rationalize,
)
from .approximation import best_rational_approximation
from .intmath import INT64_MAX, INT64_MIN, gcd, lcm

__all__ = [
    "Rational",
    "OverflowResult",
    "rationalize",
    "best_rational_approximation",
    "DEFAULT_EPS",
    "NAN",
    "INFINITY",
    "NEG_INFINITY",
    "INT64_MIN",
    "INT64_MAX",
    "gcd",
    "lcm",
]
