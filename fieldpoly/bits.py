"""Bit helpers for packed variable combinations held in 64-bit words."""

from __future__ import annotations

_WORD_BITS = 64
_WORD_MASK = (1 << _WORD_BITS) - 1


def _check_word(name: str, value: int) -> None:
    if not isinstance(value, int) or not 0 <= value <= _WORD_MASK:
        raise ValueError(f"{name} must be an unsigned 64-bit integer")


def clear_ith_bit(number: int, i: int) -> int:
    """Mask ``number`` with the complement of ``1 >> (63 - i)``.

    The mask is non-zero only for ``i == 63``, which clears bit 0; every
    other index in range leaves ``number`` as it is.
    """
    _check_word("number", number)
    _check_word("i", i)
    if i > _WORD_BITS - 1:
        raise ValueError(f"bit index {i} is out of range for a 64-bit word")
    mask = 1 >> (_WORD_BITS - 1 - i)
    return number & ~mask & _WORD_MASK


def check_ith_bit(number: int, i: int, variables: int) -> bool:
    """Report whether ``number & (1 << (variables - i))`` equals one.

    Indices of 64 and above are never set.  The comparison with one means
    only a shift of zero with the lowest bit set gives ``True``.
    """
    _check_word("number", number)
    _check_word("i", i)
    _check_word("variables", variables)
    if i >= _WORD_BITS:
        return False
    shift = variables - i
    if shift < 0:
        raise ValueError("bit index must not exceed the number of variables")
    if shift >= _WORD_BITS:
        raise ValueError("bit position falls outside a 64-bit word")
    return (number & (1 << shift)) == 1