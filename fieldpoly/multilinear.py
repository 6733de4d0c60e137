"""Sparse multilinear polynomials over the BN254 base field.

Each term is a pair ``(combination, coefficient)``, where the bits of
``combination`` say which variables take part in the monomial.
"""

from __future__ import annotations

from collections.abc import Iterable

from fieldpoly.field import MODULUS, Fq

_DIGIT_BITS = 64
_DIGIT_MASK = (1 << _DIGIT_BITS) - 1


def _to_field(value) -> Fq:
    return value if isinstance(value, Fq) else Fq(value)


def _term(item) -> tuple[int, Fq]:
    combination, coefficient = item
    if not isinstance(combination, int) or combination < 0:
        raise ValueError("a variable combination must be a non-negative integer")
    return combination, _to_field(coefficient)


class MultiLinearPolynomial:
    """A multilinear polynomial kept as sorted, non-zero terms."""

    __slots__ = ("variables", "_coefficients")

    def __init__(self, variables: int, coefficients: Iterable):
        if not isinstance(variables, int) or variables < 0:
            raise ValueError("the number of variables must be a non-negative integer")
        terms = [_term(item) for item in coefficients]
        if len(terms) > pow(2, variables, MODULUS):
            raise ValueError("there must not be more coefficients than variable combinations")
        self.variables = variables
        self._coefficients = terms
        self.ensure_sorted()
        self.ensure_no_zero_coefficients()

    def coefficients(self) -> list[tuple[int, Fq]]:
        return list(self._coefficients)

    def combinations(self) -> list[int]:
        """Return ``2**variables - 1`` (reduced in the field) as 64-bit digits,
        least significant first; zero gives no digits."""
        remaining = pow(2, self.variables, MODULUS) - 1
        digits = []
        while remaining:
            digits.append(remaining & _DIGIT_MASK)
            remaining >>= _DIGIT_BITS
        return digits

    def degree(self) -> Fq:
        """Return the number of variables in the highest-ordered term."""
        if not self._coefficients:
            raise ValueError("a polynomial without terms has no degree")
        highest = self._coefficients[-1][0]
        return Fq(sum(Fq(highest).bits_le()))

    def scalar_mul(self, scalar) -> MultiLinearPolynomial:
        scalar = _to_field(scalar)
        return MultiLinearPolynomial(
            self.variables, ((c, v * scalar) for c, v in self._coefficients)
        )

    def ensure_sorted(self) -> bool:
        """Order the terms by combination, keeping the order of equal ones.

        Always reports ``False``: the terms are in order once this returns.
        """
        self._coefficients = sorted(self._coefficients, key=lambda term: term[0])
        return False

    def ensure_no_zero_coefficients(self) -> bool:
        """Drop terms with a zero coefficient; report whether any were dropped."""
        kept = [(c, v) for c, v in self._coefficients if not v.is_zero()]
        if len(kept) != len(self._coefficients):
            self._coefficients = kept
            return True
        return False

    def evaluate(self, values: Iterable) -> Fq:
        """Fix every variable in turn, in place, and return the constant left."""
        values = [_to_field(v) for v in values]
        if Fq(self.variables) != Fq(len(values)):
            raise ValueError("Invalid number of variables")
        for index, value in enumerate(values):
            self.partial_evaluate(index, value)
        if not self._coefficients:
            raise ValueError("no term is left after evaluation")
        return self._coefficients[0][1]

    def partial_evaluate(self, index: int, value) -> None:
        """Fix the variable at ``index`` (counted from the most significant bit
        of a ``variables``-wide combination) to ``value``, in place."""
        if not isinstance(index, int) or index < 0:
            raise ValueError("the variable index must be a non-negative integer")
        value = _to_field(value)
        width = self.variables
        updated = list(self._coefficients)

        for combination, coefficient in self._coefficients:
            bits = format(combination, f"0{width}b")
            if index >= len(bits) or bits[index] != "1":
                continue
            shift = width - 1 - index
            if shift < 0:
                raise ValueError("the variable index lies outside the variable count")
            target = combination & ~(1 << shift)
            scaled = coefficient * value

            if any(c == target for c, _ in updated):
                updated = [
                    (c, scaled + v) if c == target
                    else (c, Fq(0)) if c == combination
                    else (c, v)
                    for c, v in updated
                ]
            else:
                updated.append((target, scaled))
                updated = [(c, v) for c, v in updated if c != combination]

        rebuilt = MultiLinearPolynomial(self.variables, updated)
        self._coefficients = rebuilt._coefficients

    @classmethod
    def interpolate(cls, points: Iterable, variables: int) -> MultiLinearPolynomial:
        """Build the polynomial taking ``points[i]`` on the combination ``i``;
        there must be exactly ``2**variables`` points."""
        values = [_to_field(p) for p in points]
        if not values or len(values) != 1 << variables:
            raise ValueError("the number of points must be two to the number of variables")

        result = cls(variables, [])
        for index, value in enumerate(values):
            basis = cls(variables, [(0, Fq(1))])
            for position, bit in enumerate(format(index, f"0{variables}b")):
                term = 1 << position
                if bit == "1":
                    factor = cls(variables, [(0, Fq(0)), (term, Fq(1))])
                else:
                    factor = cls(variables, [(0, Fq(1)), (term, Fq(-1))])
                basis = basis * factor
            result = result + basis.scalar_mul(value)
        return result

    def _ordered(self, other: MultiLinearPolynomial):
        if len(self._coefficients) > len(other._coefficients):
            return self, other
        return other, self

    def __add__(self, other):
        if not isinstance(other, MultiLinearPolynomial):
            return NotImplemented
        if self.variables != other.variables:
            raise ValueError("The two polynomials must have the same number of variables")
        larger, smaller = self._ordered(other)
        remaining = list(smaller._coefficients)
        summed = []
        for combination, coefficient in larger._coefficients:
            match = next(
                (pos for pos, (c, _) in enumerate(remaining) if c == combination), None
            )
            if match is None:
                summed.append((combination, coefficient))
            else:
                summed.append((combination, coefficient + remaining[match][1]))
                remaining[match] = (combination, Fq(0))
        summed.extend((c, v) for c, v in remaining if not v.is_zero())
        return MultiLinearPolynomial(self.variables, summed)

    def __mul__(self, other):
        if not isinstance(other, MultiLinearPolynomial):
            return NotImplemented
        if self.variables != other.variables:
            raise ValueError("The two polynomials must have the same number of variables")
        larger, smaller = self._ordered(other)
        product = [
            (ca + cb, va * vb)
            for ca, va in larger._coefficients
            for cb, vb in smaller._coefficients
        ]
        return MultiLinearPolynomial(max(self.variables, other.variables), product)

    def __eq__(self, other):
        if not isinstance(other, MultiLinearPolynomial):
            return NotImplemented
        return (
            self.variables == other.variables
            and self._coefficients == other._coefficients
        )

    __hash__ = None

    def __repr__(self) -> str:
        terms = [(c, int(v)) for c, v in self._coefficients]
        return f"MultiLinearPolynomial({self.variables}, {terms})"


def multilinear_polya() -> MultiLinearPolynomial:
    """f(a, b, c) = 2abc + 2ab + 3bc + 4"""
    return MultiLinearPolynomial(3, [(0, Fq(4)), (3, Fq(3)), (6, Fq(2)), (7, Fq(2))])


def multilinear_polyb() -> MultiLinearPolynomial:
    """f(a, b, c, d, e, f) = 2bcdf + 2abcf + 3bcd + 4abc + 9"""
    return MultiLinearPolynomial(
        6,
        [(0, Fq(9)), (28, Fq(3)), (29, Fq(2)), (56, Fq(4)), (57, Fq(2))],
    )