"""Arithmetic in the BN254 base prime field."""

from __future__ import annotations

MODULUS = 21888242871839275222246405745257275088696311157297823662689037894645226208583
"""Order of the BN254 base field."""

BITS = 256
"""Width of the little-endian bit representation of a field element."""


class Fq:
    """An element of the BN254 base field, stored reduced modulo ``MODULUS``."""

    __slots__ = ("_value",)

    def __init__(self, value):
        if isinstance(value, Fq):
            value = value._value
        elif not isinstance(value, int):
            raise TypeError(f"cannot build a field element from {type(value).__name__}")
        self._value = value % MODULUS

    @staticmethod
    def _coerce(other):
        if isinstance(other, Fq):
            return other
        if isinstance(other, int):
            return Fq(other)
        return None

    def inverse(self) -> Fq:
        """Return the multiplicative inverse; zero has none."""
        if self._value == 0:
            raise ZeroDivisionError("zero has no inverse in the field")
        return Fq(pow(self._value, MODULUS - 2, MODULUS))

    def is_zero(self) -> bool:
        return self._value == 0

    def bits_le(self) -> list[bool]:
        """Return the canonical value as ``BITS`` booleans, least significant first."""
        return [bool((self._value >> i) & 1) for i in range(BITS)]

    def __add__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return Fq(self._value + other._value)

    __radd__ = __add__

    def __sub__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return Fq(self._value - other._value)

    def __rsub__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return Fq(other._value - self._value)

    def __mul__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return Fq(self._value * other._value)

    __rmul__ = __mul__

    def __truediv__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self * other.inverse()

    def __rtruediv__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other * self.inverse()

    def __pow__(self, exponent):
        if not isinstance(exponent, int):
            return NotImplemented
        if exponent < 0:
            return self.inverse() ** (-exponent)
        return Fq(pow(self._value, exponent, MODULUS))

    def __neg__(self) -> Fq:
        return Fq(-self._value)

    def __eq__(self, other):
        if not isinstance(other, Fq):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash((Fq, self._value))

    def __bool__(self) -> bool:
        return self._value != 0

    def __int__(self) -> int:
        return self._value

    def __repr__(self) -> str:
        return f"Fq({self._value})"