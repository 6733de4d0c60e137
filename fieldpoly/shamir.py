"""Secret sharing over the BN254 base field using random polynomial points."""

from __future__ import annotations

import secrets
from collections.abc import Iterable

from fieldpoly.field import Fq
from fieldpoly.univariate import Polynomial

_U8_MAX = 255


def _to_field(value) -> Fq:
    return value if isinstance(value, Fq) else Fq(value)


class ShamirSecret:
    """Splits a secret into points on a random polynomial and checks them."""

    def __init__(self, total_shares: int, threshold: int):
        if total_shares < 0:
            raise ValueError("total_shares must not be negative")
        if not 0 <= threshold <= _U8_MAX:
            raise ValueError(f"threshold must be between 0 and {_U8_MAX}")
        self.total_shares = total_shares
        self.threshold = threshold

    def generate_shares(self, secret_key) -> list[tuple[Fq, Fq]]:
        """Return ``total_shares`` points on a polynomial whose first two
        coefficients add up to the secret, split one third to two thirds."""
        if self.threshold < 1:
            raise ValueError("threshold must be at least 1 to generate shares")
        secret_key = _to_field(secret_key)
        third = secret_key / Fq(3)
        coefficients = [third, secret_key - third]
        coefficients.extend(Fq(secrets.randbits(64)) for _ in range(self.threshold - 1))
        poly = Polynomial(coefficients)

        shares = []
        for _ in range(self.total_shares):
            x = Fq(secrets.randbits(64))
            shares.append((x, poly.evaluate(x)))
        return shares

    def verify_secret(self, shares: Iterable, secret) -> bool:
        """Interpolate the shares and compare the sum of the first two
        coefficients with the secret; too few shares never verify."""
        points = [(_to_field(x), _to_field(y)) for x, y in shares]
        if len(points) < self.threshold:
            return False
        coefficients = Polynomial.interpolate(points).coefficients()
        return coefficients[0] + coefficients[1] == _to_field(secret)