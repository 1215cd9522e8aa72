"""Exact rational numbers with 64-bit components and NumPy interoperability."""
from __future__ import annotations

import math
import numbers
import operator
from fractions import Fraction
from typing import Any, NamedTuple, Tuple, Union

import numpy as np

from .intmath import (
    INT64_MAX,
    add_with_overflow,
    fits,
    gcd,
    lcm,
    lcm_with_overflow,
    multiply_with_overflow,
    remainder_with_overflow,
    subtract_with_overflow,
    truncated_div,
    wrapping_add,
    wrapping_mul,
    wrapping_rem,
    wrapping_sub,
)

NumberLike = Union["Rational", Fraction, numbers.Real]

DEFAULT_EPS = 1.0e-15


def _ensure_int(value: Any, *, name: str) -> int:
    """Convert *value* to ``int`` when it is an integer inside the int64 range."""
    if not isinstance(value, numbers.Integral):
        raise TypeError(f"{name} must be an integer, got {type(value)!r}")
    value = int(value)
    if not fits(value):
        raise OverflowError(f"{name} {value} does not fit in a signed 64-bit integer")
    return value


class OverflowResult(NamedTuple):
    """Result of an overflow-checked operation."""

    value: "Rational"
    overflow: bool


class Rational:
    """Rational number kept in reduced form with a non-negative denominator.

    A zero denominator encodes the extended values: ``n/0`` with ``n != 0``
    is a signed infinity and ``0/0`` is not-a-number.
    """

    __slots__ = ("_numerator", "_denominator")
    __array_priority__ = 1000.0  # Prefer Rational semantics in NumPy expressions.

    def __init__(self, numerator: Any = 0, denominator: Any = 1) -> None:
        num = _ensure_int(numerator, name="numerator")
        den = _ensure_int(denominator, name="denominator")
        self._numerator, self._denominator, _ = self._normalize(num, den)

    # ------------------------------------------------------------------
    # Constructors
    @classmethod
    def from_integer(cls, value: Any) -> "Rational":
        """Return ``value/1``."""
        return cls(value, 1)

    @classmethod
    def from_float(cls, value: float, eps: float = DEFAULT_EPS) -> "Rational":
        """Return the best rational approximation of *value* within *eps*."""
        from .approximation import best_rational_approximation

        if isinstance(value, bool):  # bool is a subclass of int; treat explicitly.
            return cls(int(value), 1)
        return best_rational_approximation(value, eps)

    @classmethod
    def from_fraction(cls, value: Fraction) -> "Rational":
        """Create a :class:`Rational` from :class:`fractions.Fraction`."""
        return cls(value.numerator, value.denominator)

    @classmethod
    def rationalize(cls, value: NumberLike) -> "Rational":
        """Coerce a numeric-like value into :class:`Rational`."""
        if isinstance(value, Rational):
            return value
        if isinstance(value, Fraction):
            return cls.from_fraction(value)
        if isinstance(value, numbers.Integral):
            return cls(int(value), 1)
        if isinstance(value, np.generic):
            return cls.rationalize(value.item())
        if isinstance(value, numbers.Real):
            return cls.from_float(float(value))
        raise TypeError(f"Cannot convert {type(value)!r} to Rational")

    # ------------------------------------------------------------------
    # Properties and helpers
    @property
    def numerator(self) -> int:
        return self._numerator

    @property
    def denominator(self) -> int:
        return self._denominator

    @property
    def is_finite(self) -> bool:
        return self._denominator != 0

    @property
    def is_infinite(self) -> bool:
        return self._numerator != 0 and self._denominator == 0

    @property
    def is_nan(self) -> bool:
        return self._numerator == 0 and self._denominator == 0

    def inverse(self) -> "Rational":
        """Return the multiplicative inverse.

        Zero inverts to infinity, infinity to zero and NaN to itself. The
        inverse of ``INT64_MIN`` saturates to ``-1/INT64_MAX``.
        """
        return Rational(self._denominator, self._numerator)

    def as_fraction(self) -> Fraction:
        """Return a :class:`Fraction` with the same value."""
        if not self.is_finite:
            raise ValueError(f"cannot convert {self} to Fraction")
        return Fraction(self._numerator, self._denominator)

    # ------------------------------------------------------------------
    # Numeric protocol
    def to_float(self) -> float:
        if self.is_finite:
            return self._numerator / self._denominator
        if self.is_infinite:
            return float("inf") if self._numerator > 0 else float("-inf")
        return float("nan")

    def to_int(self) -> int:
        """Truncate toward zero. Raises :class:`ZeroDivisionError` unless finite."""
        if self._denominator == 0:
            raise ZeroDivisionError(f"cannot truncate {self} to an integer")
        return truncated_div(self._numerator, self._denominator)

    def __float__(self) -> float:
        return self.to_float()

    def __int__(self) -> int:
        return self.to_int()

    def __bool__(self) -> bool:
        return self._numerator != 0

    # ------------------------------------------------------------------
    # Representation
    def __repr__(self) -> str:
        return f"Rational({self._numerator}, {self._denominator})"

    def __str__(self) -> str:
        return f"{self._numerator}/{self._denominator}"

    def __format__(self, format_spec: str) -> str:
        if format_spec in ("", "r", "R"):
            return str(self)
        try:
            return format(float(self), format_spec)
        except (ValueError, TypeError):
            return format(str(self), format_spec)

    # ------------------------------------------------------------------
    # Internal helpers
    @staticmethod
    def _normalize(num: int, den: int) -> Tuple[int, int, bool]:
        """Return the canonical pair and whether a component had to saturate.

        Negating ``INT64_MIN`` leaves a magnitude of ``2**63``, which has no
        int64 form; that component is clamped to ``INT64_MAX`` and the pair
        reduced again.
        """
        if den < 0:
            num, den = -num, -den
        if num == 0 and den == 0:
            return 0, 0, False
        divisor = gcd(abs(num), den)
        num //= divisor
        den //= divisor
        if fits(num) and fits(den):
            return num, den, False
        num = min(num, INT64_MAX)
        den = min(den, INT64_MAX)
        divisor = gcd(abs(num), den)
        return num // divisor, den // divisor, True

    @classmethod
    def _checked(cls, num: int, den: int) -> OverflowResult:
        value = cls.__new__(cls)
        value._numerator, value._denominator, saturated = cls._normalize(num, den)
        return OverflowResult(value, saturated)

    @staticmethod
    def _overflow_result(num: int, den: int, overflow: bool) -> OverflowResult:
        value, saturated = Rational._checked(num, den)
        return OverflowResult(value, overflow or saturated)

    def _coerce_scalar(self, value: Any) -> "Rational":
        if isinstance(value, Rational):
            return value
        try:
            return Rational.rationalize(value)
        except TypeError:
            raise TypeError(f"Cannot interpret {type(value)!r} as Rational") from None

    @staticmethod
    def _vectorize_iterable(iterable, func):
        return np.array([func(item) for item in iterable], dtype=object)

    def _binary_operation(self, other: Any, op):
        if isinstance(other, np.ndarray):
            vectorised = np.vectorize(
                lambda x: op(self, self._coerce_scalar(x)),
                otypes=[object],
            )
            return vectorised(other)
        if isinstance(other, (list, tuple)):
            return self._vectorize_iterable(
                other,
                lambda x: op(self, self._coerce_scalar(x)),
            )
        return op(self, self._coerce_scalar(other))

    def _reflected_operation(self, other: Any, op):
        if isinstance(other, np.ndarray):
            vectorised = np.vectorize(
                lambda x: op(self._coerce_scalar(x), self),
                otypes=[object],
            )
            return vectorised(other)
        if isinstance(other, (list, tuple)):
            return self._vectorize_iterable(
                other,
                lambda x: op(self._coerce_scalar(x), self),
            )
        return op(self._coerce_scalar(other), self)

    # ------------------------------------------------------------------
    # Arithmetic kernels. Integer steps wrap like the host int64 type.
    @staticmethod
    def _scaled(value: "Rational", common: int) -> int:
        if common == 0:
            return 0
        return wrapping_mul(value._numerator, truncated_div(common, value._denominator))

    @staticmethod
    def _scaled_with_overflow(value: "Rational", common: int) -> Tuple[int, bool]:
        if common == 0:
            return 0, False
        return multiply_with_overflow(
            value._numerator, truncated_div(common, value._denominator)
        )

    @staticmethod
    def _cross_divisors(a: "Rational", b: "Rational") -> Tuple[int, int]:
        # A zero divisor only arises from NaN operands, whose numerators are 0.
        g1 = gcd(abs(a._numerator), b._denominator) or 1
        g2 = gcd(a._denominator, abs(b._numerator)) or 1
        return g1, g2

    @staticmethod
    def _add(a: "Rational", b: "Rational") -> "Rational":
        if a.is_infinite or b.is_infinite:
            return Rational(wrapping_add(a._numerator, b._numerator), 0)
        common = lcm(a._denominator, b._denominator)
        return Rational(
            wrapping_add(Rational._scaled(a, common), Rational._scaled(b, common)),
            common,
        )

    @staticmethod
    def _sub(a: "Rational", b: "Rational") -> "Rational":
        if a.is_infinite or b.is_infinite:
            return Rational(wrapping_sub(a._numerator, b._numerator), 0)
        common = lcm(a._denominator, b._denominator)
        return Rational(
            wrapping_sub(Rational._scaled(a, common), Rational._scaled(b, common)),
            common,
        )

    @staticmethod
    def _mul(a: "Rational", b: "Rational") -> "Rational":
        if a.is_infinite or b.is_infinite:
            return Rational(wrapping_mul(a._numerator, b._numerator), 0)
        g1, g2 = Rational._cross_divisors(a, b)
        return Rational(
            wrapping_mul(a._numerator // g1, b._numerator // g2),
            wrapping_mul(a._denominator // g2, b._denominator // g1),
        )

    @staticmethod
    def _truediv(a: "Rational", b: "Rational") -> "Rational":
        return Rational._mul(a, b.inverse())

    @staticmethod
    def _mod(a: "Rational", b: "Rational") -> "Rational":
        if a.is_infinite or b.is_infinite:
            if b._numerator == 0:
                return NAN
            return Rational(wrapping_rem(a._numerator, b._numerator), 0)
        common = lcm(a._denominator, b._denominator)
        divisor = Rational._scaled(b, common)
        if divisor == 0:
            return NAN
        return Rational(wrapping_rem(Rational._scaled(a, common), divisor), common)

    # ------------------------------------------------------------------
    # Arithmetic operators
    def __add__(self, other: Any) -> Any:
        return self._binary_operation(other, Rational._add)

    def __radd__(self, other: Any) -> Any:
        return self._reflected_operation(other, Rational._add)

    def __sub__(self, other: Any) -> Any:
        return self._binary_operation(other, Rational._sub)

    def __rsub__(self, other: Any) -> Any:
        return self._reflected_operation(other, Rational._sub)

    def __mul__(self, other: Any) -> Any:
        return self._binary_operation(other, Rational._mul)

    def __rmul__(self, other: Any) -> Any:
        return self._reflected_operation(other, Rational._mul)

    def __truediv__(self, other: Any) -> Any:
        return self._binary_operation(other, Rational._truediv)

    def __rtruediv__(self, other: Any) -> Any:
        return self._reflected_operation(other, Rational._truediv)

    def __mod__(self, other: Any) -> Any:
        return self._binary_operation(other, Rational._mod)

    def __rmod__(self, other: Any) -> Any:
        return self._reflected_operation(other, Rational._mod)

    # ------------------------------------------------------------------
    # Overflow-checked arithmetic
    def add_with_overflow(self, other: Any) -> OverflowResult:
        """Add *other*, also reporting whether any int64 step overflowed."""
        b = self._coerce_scalar(other)
        if self.is_infinite or b.is_infinite:
            num, overflow = add_with_overflow(self._numerator, b._numerator)
            return self._overflow_result(num, 0, overflow)
        common, o1 = lcm_with_overflow(self._denominator, b._denominator)
        left, o2 = self._scaled_with_overflow(self, common)
        right, o3 = self._scaled_with_overflow(b, common)
        num, o4 = add_with_overflow(left, right)
        return self._overflow_result(num, common, o1 or o2 or o3 or o4)

    def subtract_with_overflow(self, other: Any) -> OverflowResult:
        b = self._coerce_scalar(other)
        if self.is_infinite or b.is_infinite:
            num, overflow = subtract_with_overflow(self._numerator, b._numerator)
            return self._overflow_result(num, 0, overflow)
        common, o1 = lcm_with_overflow(self._denominator, b._denominator)
        left, o2 = self._scaled_with_overflow(self, common)
        right, o3 = self._scaled_with_overflow(b, common)
        num, o4 = subtract_with_overflow(left, right)
        return self._overflow_result(num, common, o1 or o2 or o3 or o4)

    def multiply_with_overflow(self, other: Any) -> OverflowResult:
        b = self._coerce_scalar(other)
        if self.is_infinite or b.is_infinite:
            num, overflow = multiply_with_overflow(self._numerator, b._numerator)
            return self._overflow_result(num, 0, overflow)
        g1, g2 = self._cross_divisors(self, b)
        num, o1 = multiply_with_overflow(self._numerator // g1, b._numerator // g2)
        den, o2 = multiply_with_overflow(self._denominator // g2, b._denominator // g1)
        return self._overflow_result(num, den, o1 or o2)

    def divide_with_overflow(self, other: Any) -> OverflowResult:
        b = self._coerce_scalar(other)
        inverted, o1 = self._checked(b._denominator, b._numerator)
        value, o2 = self.multiply_with_overflow(inverted)
        return OverflowResult(value, o1 or o2)

    def remainder_with_overflow(self, other: Any) -> OverflowResult:
        b = self._coerce_scalar(other)
        if self.is_infinite or b.is_infinite:
            if b._numerator == 0:
                return OverflowResult(NAN, False)
            num, overflow = remainder_with_overflow(self._numerator, b._numerator)
            return self._overflow_result(num, 0, overflow)
        common, o1 = lcm_with_overflow(self._denominator, b._denominator)
        left, o2 = self._scaled_with_overflow(self, common)
        right, o3 = self._scaled_with_overflow(b, common)
        if right == 0:
            return OverflowResult(NAN, o1 or o2 or o3)
        num, o4 = remainder_with_overflow(left, right)
        return self._overflow_result(num, common, o1 or o2 or o3 or o4)

    # ------------------------------------------------------------------
    # Comparisons
    def _compare(self, other: Any, op) -> bool:
        other_rat = self._coerce_scalar(other)
        return op(
            self._numerator * other_rat._denominator,
            other_rat._numerator * self._denominator,
        )

    def __eq__(self, other: Any) -> bool:
        try:
            return self._compare(other, operator.eq)
        except (TypeError, OverflowError):
            return False

    def __lt__(self, other: Any) -> bool:
        return self._compare(other, operator.lt)

    def __le__(self, other: Any) -> bool:
        return self._compare(other, operator.le)

    def __gt__(self, other: Any) -> bool:
        return self._compare(other, operator.gt)

    def __ge__(self, other: Any) -> bool:
        return self._compare(other, operator.ge)

    def __hash__(self) -> int:
        if self.is_finite:
            return hash(Fraction(self._numerator, self._denominator))
        if self.is_infinite:
            # Every infinity compares equal to every other.
            return hash(math.inf)
        return hash((self._numerator, self._denominator))

    # ------------------------------------------------------------------
    # NumPy interoperability
    _UFUNC_DISPATCH = {
        np.add: operator.add,
        np.subtract: operator.sub,
        np.multiply: operator.mul,
        np.divide: operator.truediv,
        np.true_divide: operator.truediv,
        np.remainder: operator.mod,
        np.mod: operator.mod,
    }

    def __array_ufunc__(self, ufunc, method, *inputs, **kwargs):
        if method != "__call__":
            return NotImplemented
        if kwargs.get("out") is not None:
            raise NotImplementedError("`out` argument is not supported for Rational ufuncs")
        op = self._UFUNC_DISPATCH.get(ufunc)
        if op is None:
            return NotImplemented

        coerced = []
        has_array = False
        for value in inputs:
            if isinstance(value, Rational):
                coerced.append(value)
            elif isinstance(value, np.ndarray):
                vectorised = np.vectorize(self._coerce_scalar, otypes=[object])
                coerced.append(vectorised(value))
                has_array = True
            else:
                coerced.append(self._coerce_scalar(value))
        if has_array:
            vectorised = np.vectorize(op, otypes=[object])
            return vectorised(*coerced)
        return op(*coerced)


NAN = Rational(0, 0)
INFINITY = Rational(1, 0)
NEG_INFINITY = Rational(-1, 0)


def rationalize(value: NumberLike) -> Rational:
    """Public helper to convert *value* into :class:`Rational`."""

    return Rational.rationalize(value)


__all__ = [
    "Rational",
    "OverflowResult",
    "rationalize",
    "DEFAULT_EPS",
    "NAN",
    "INFINITY",
    "NEG_INFINITY",
]
