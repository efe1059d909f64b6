"""Fractions held as a pair of floats, reduced when they are built."""

from __future__ import annotations

import math
import sys
from numbers import Real

_EPSILON = sys.float_info.epsilon


def _coerce(value: object) -> Rational | None:
    if isinstance(value, Rational):
        return value
    if isinstance(value, Real):
        return Rational(value)
    return None


class Rational:
    """A numerator over a positive denominator, both stored as floats.

    Both parts are divided by the greatest common divisor of their integer
    parts, so fractional inputs are only reduced when that divisor exceeds one.
    Equality is approximate: both parts must agree to within machine epsilon.
    """

    __slots__ = ("_numerator", "_denominator")

    def __init__(self, numerator: float, denominator: float = 1) -> None:
        num = float(numerator)
        den = float(denominator)
        if den < 0:
            num, den = -num, -den
        if den != 1:
            factor = math.gcd(int(abs(num)), int(den))
            if factor == 0:
                raise ZeroDivisionError(
                    f"cannot reduce {numerator!r}/{denominator!r}"
                )
            num /= factor
            den /= factor
        self._numerator = num
        self._denominator = den

    @classmethod
    def ratio(cls, top: Rational | float, bottom: Rational | float) -> Rational:
        """Return the fraction ``top / bottom`` built from two fractions."""
        a = _coerce(top)
        b = _coerce(bottom)
        if a is None or b is None:
            raise TypeError("ratio() takes rationals or real numbers")
        return cls(a._numerator * b._denominator, a._denominator * b._numerator)

    @property
    def numerator(self) -> float:
        return self._numerator

    @property
    def denominator(self) -> float:
        return self._denominator

    def is_integer(self) -> bool:
        """True when the denominator is one and the numerator is whole."""
        return (
            self._denominator == 1
            and abs(self._numerator - int(self._numerator)) < _EPSILON
        )

    def value(self) -> float:
        """The fraction as a float."""
        return self._numerator / self._denominator

    def __float__(self) -> float:
        return self.value()

    def __add__(self, other: object) -> Rational:
        o = _coerce(other)
        if o is None:
            return NotImplemented
        return Rational(
            self._numerator * o._denominator + o._numerator * self._denominator,
            self._denominator * o._denominator,
        )

    def __radd__(self, other: object) -> Rational:
        o = _coerce(other)
        if o is None:
            return NotImplemented
        return o + self

    def __sub__(self, other: object) -> Rational:
        o = _coerce(other)
        if o is None:
            return NotImplemented
        return Rational(
            self._numerator * o._denominator - o._numerator * self._denominator,
            self._denominator * o._denominator,
        )

    def __rsub__(self, other: object) -> Rational:
        o = _coerce(other)
        if o is None:
            return NotImplemented
        return o - self

    def __mul__(self, other: object) -> Rational:
        o = _coerce(other)
        if o is None:
            return NotImplemented
        return Rational(
            self._numerator * o._numerator, self._denominator * o._denominator
        )

    def __rmul__(self, other: object) -> Rational:
        o = _coerce(other)
        if o is None:
            return NotImplemented
        return o * self

    def __truediv__(self, other: object) -> Rational:
        o = _coerce(other)
        if o is None:
            return NotImplemented
        return Rational(
            self._numerator * o._denominator, self._denominator * o._numerator
        )

    def __rtruediv__(self, other: object) -> Rational:
        o = _coerce(other)
        if o is None:
            return NotImplemented
        return o / self

    def __eq__(self, other: object) -> bool:
        o = _coerce(other)
        if o is None:
            return NotImplemented
        return (
            abs(self._numerator - o._numerator) < _EPSILON
            and abs(self._denominator - o._denominator) < _EPSILON
        )

    __hash__ = None  # equality is approximate

    def __repr__(self) -> str:
        return f"Rational({self._numerator!r}, {self._denominator!r})"