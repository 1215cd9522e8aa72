"""Best rational approximation of floats by continued fractions."""
from __future__ import annotations

import logging
import math

from .intmath import fits
from .rational import DEFAULT_EPS, Rational

logger = logging.getLogger(__name__)


def best_rational_approximation(number: float, eps: float = DEFAULT_EPS) -> Rational:
    """Return the :class:`Rational` with smallest denominator within *eps* of *number*.

    The convergents of the continued fraction expansion of ``|number|`` are
    generated until one lies within *eps*. Both components must fit a signed
    64-bit integer; when *eps* cannot be met inside that range the last
    representable convergent is returned. Infinite and NaN inputs map to
    ``Rational(1, 0)``.
    """
    if eps < 0:
        raise ValueError("eps must be non-negative")
    number = float(number)
    if not math.isfinite(number):
        return Rational(1, 0)

    target = abs(number)
    x = target
    p0, p1 = 0, 1
    q0, q1 = 1, 0

    while True:
        a = math.floor(x)
        p = a * p1 + p0
        q = a * q1 + q0
        if not (fits(p) and fits(q)):
            logger.debug("convergent %d/%d leaves int64 range, keeping %d/%d", p, q, p1, q1)
            break

        p0, p1 = p1, p
        q0, q1 = q1, q

        remainder = x - a
        if remainder == 0.0:
            logger.debug("expansion of %r terminated exactly at %d/%d", number, p1, q1)
            break
        x = 1.0 / remainder
        if not math.isfinite(x):
            break

        if abs(p1 / q1 - target) <= eps:
            break

    return Rational(-p1 if number < 0 else p1, q1)


__all__ = ["best_rational_approximation", "DEFAULT_EPS"]
