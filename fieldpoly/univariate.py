"""Dense univariate polynomials over the BN254 base field."""

from __future__ import annotations

from collections.abc import Iterable
from functools import reduce
from itertools import zip_longest

from fieldpoly.field import Fq


class PolynomialError(ValueError):
    """Raised when a polynomial cannot be built from the given data."""


def _to_field(value) -> Fq:
    return value if isinstance(value, Fq) else Fq(value)


class Polynomial:
    """A polynomial held as coefficients, lowest power first."""

    __slots__ = ("_coefficients",)

    def __init__(self, coefficients: Iterable):
        values = tuple(_to_field(c) for c in coefficients)
        if not values:
            raise PolynomialError("a polynomial needs at least one coefficient")
        self._coefficients = values

    def coefficients(self) -> list[Fq]:
        return list(self._coefficients)

    def degree(self) -> int:
        """Return the length minus one, less one for each zero coefficient
        counted from the constant term upward before the first non-zero one."""
        top = len(self._coefficients) - 1
        degree = top
        for coefficient in self._coefficients[:top]:
            if not coefficient.is_zero():
                break
            degree -= 1
        return degree

    def scalar_mul(self, scalar) -> Polynomial:
        scalar = _to_field(scalar)
        return Polynomial(c * scalar for c in self._coefficients)

    def evaluate(self, x) -> Fq:
        x = _to_field(x)
        result = Fq(0)
        for coefficient in reversed(self._coefficients):
            result = result * x + coefficient
        return result

    @classmethod
    def _basis(cls, xs: list[Fq], x: Fq) -> tuple[Polynomial, Fq]:
        others = [xi for xi in xs if xi != x]
        if not others:
            raise PolynomialError("interpolation needs at least two distinct points")
        numerator = reduce(
            lambda acc, xi: acc * Polynomial([-xi, Fq(1)]), others, Polynomial([Fq(1)])
        )
        denominator = reduce(lambda acc, xi: acc * (x - xi), others[1:], x - others[0])
        return numerator, denominator

    @classmethod
    def interpolate(cls, points: Iterable) -> Polynomial:
        """Build the Lagrange polynomial through the given ``(x, y)`` points."""
        pairs = [(_to_field(x), _to_field(y)) for x, y in points]
        xs = [x for x, _ in pairs]
        result = cls([Fq(0)])
        for x, y in pairs:
            numerator, denominator = cls._basis(xs, x)
            result = result + numerator.scalar_mul(y / denominator)
        return result

    def __add__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        return Polynomial(
            a + b
            for a, b in zip_longest(self._coefficients, other._coefficients, fillvalue=Fq(0))
        )

    def __mul__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        product = [Fq(0)] * (len(self._coefficients) + len(other._coefficients) - 1)
        for i, a in enumerate(self._coefficients):
            for j, b in enumerate(other._coefficients):
                product[i + j] = product[i + j] + a * b
        return Polynomial(product)

    def __eq__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self._coefficients == other._coefficients

    def __hash__(self) -> int:
        return hash(self._coefficients)

    def __repr__(self) -> str:
        return f"Polynomial({[int(c) for c in self._coefficients]})"