# fieldpoly

This package does polynomial arithmetic over the BN254 base field. It also
includes a small Shamir-style secret sharing scheme built on that arithmetic.
It needs only the standard library.

## Install

    pip install .

For the test suite:

    pip install ".[test]"
    pytest

## Field elements

`fieldpoly.field.Fq` is an element of the BN254 base field. The field prime is
`fieldpoly.field.MODULUS`.

- Integers are reduced modulo the prime, and negative values wrap around.
- Elements support `+`, `-`, `*`, `/`, `**` and unary `-`, and they mix freely with plain integers.
- Dividing by zero or inverting zero raises `ZeroDivisionError`.

Example:

    from fieldpoly.field import Fq

    a = Fq(5)
    b = Fq(-1)              # the field prime minus one
    print(a * a.inverse())  # Fq(1)
    print(a.is_zero())      # False
    print(int(b + 1))       # 0

`bits_le()` returns the canonical value as 256 booleans, least significant
bit first.

## Univariate polynomials

`fieldpoly.univariate.Polynomial` stores coefficients lowest power first, so
`[5, 3]` means `3x + 5`. The coefficients may be `Fq` values or integers.
Building a polynomial from no coefficients raises `PolynomialError`, which is
a subclass of `ValueError`.

    from fieldpoly.field import Fq
    from fieldpoly.univariate import Polynomial

    p = Polynomial([Fq(5), Fq(3)])
    q = Polynomial([Fq(4), Fq(2)])
    print((p + q).coefficients())             # [Fq(9), Fq(5)]
    print((p * q).coefficients())             # [Fq(20), Fq(22), Fq(6)]
    print(p.evaluate(Fq(2)))                  # Fq(11)
    print(p.scalar_mul(Fq(2)).coefficients()) # [Fq(10), Fq(6)]

    poly = Polynomial.interpolate([
        (Fq(1), Fq(17)), (Fq(2), Fq(44)), (Fq(4), Fq(182)), (Fq(5), Fq(305)),
    ])
    # coefficients: 10, -1, 7, 1

`interpolate` builds the Lagrange polynomial through the given `(x, y)`
points. It needs at least two distinct x values.

`degree()` starts from the length minus one. It then subtracts one for each
zero coefficient it finds, counting upward from the constant term, until it
reaches the first non-zero coefficient.

## Multilinear polynomials

`fieldpoly.multilinear.MultiLinearPolynomial` holds a number of variables and
a list of `(combination, coefficient)` terms. The combination is a bit mask
that says which variables take part in the term. The terms are kept sorted by
combination, and terms with a zero coefficient are dropped. A polynomial may
not have more terms than `2 ** variables`.

    from fieldpoly.field import Fq
    from fieldpoly.multilinear import (
        MultiLinearPolynomial, multilinear_polya, multilinear_polyb,
    )

    f = multilinear_polya()        # 2abc + 2ab + 3bc + 4
    print(f.degree())              # Fq(3)
    g = f.scalar_mul(Fq(2))
    h = f + g                      # both operands need the same variable count
    f.partial_evaluate(0, Fq(2))   # fixes one variable, in place

    # f(a, b) = 2a + 3b - 5ab + 6 from its four values
    p = MultiLinearPolynomial.interpolate([6, 9, 8, 6], 2)
    print(len(p.coefficients()))   # 4

The methods behave as follows:

- `degree()` counts the set bits in the combination of the highest-ordered term.
- `combinations()` returns `2 ** variables - 1` as a list of 64-bit digits, least significant digit first.
- `partial_evaluate(index, value)` counts `index` from the most significant bit of a `variables`-wide combination.
- `evaluate(values)` fixes every variable in turn, in place, and returns the constant that is left.
- `interpolate(points, variables)` needs exactly `2 ** variables` points.
- Adding or multiplying polynomials with different variable counts raises `ValueError`.

`multilinear_polya()` and `multilinear_polyb()` return two ready-made sample
polynomials.

The module `fieldpoly.bits` provides two helpers for combination masks held
in 64-bit words: `clear_ith_bit(number, i)` and
`check_ith_bit(number, i, variables)`. Their docstrings describe exactly
which masks they apply.

## Secret sharing

    from fieldpoly.field import Fq
    from fieldpoly.shamir import ShamirSecret

    scheme = ShamirSecret(total_shares=5, threshold=3)
    shares = scheme.generate_shares(Fq(42))
    assert len(shares) == 5
    assert scheme.verify_secret(shares, Fq(42))

`generate_shares` works in these steps:

1. It splits the secret across the constant and linear coefficients of a polynomial, one third and two thirds.
2. It adds `threshold - 1` random 64-bit coefficients.
3. It evaluates the polynomial at `total_shares` random 64-bit x values.

The random values come from the `secrets` module. `generate_shares` needs a
threshold of at least 1. The threshold must be between 0 and 255.

`verify_secret` interpolates the shares and checks that the first two
coefficients add up to the given secret. It returns `False` when there are
fewer shares than the threshold.

## Limits

This package is a library only. It has no command-line tool.

The sharing scheme has no separate step that recovers a secret from shares.
It can only check a candidate secret with `verify_secret`.