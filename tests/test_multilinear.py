import pytest

from fieldpoly.field import Fq
from fieldpoly.multilinear import (
    MultiLinearPolynomial,
    multilinear_polya,
    multilinear_polyb,
)


def test_should_initialize_multilinear_polynomial():
    poly_a = multilinear_polya()
    assert poly_a.degree() == Fq(3)
    assert len(poly_a.coefficients()) == 4

    poly_b = multilinear_polyb()
    assert poly_b.degree() == Fq(4)
    assert len(poly_b.coefficients()) == 5


def test_should_perform_scalar_mul():
    poly_a = multilinear_polya()
    scalar = Fq(2)
    scaled = poly_a.scalar_mul(scalar)

    for (_, original), (_, result) in zip(poly_a.coefficients(), scaled.coefficients()):
        assert result == original * scalar
    assert scaled.coefficients()[2][0] == 6


def test_scalar_mul_by_zero_leaves_no_terms():
    assert multilinear_polya().scalar_mul(0).coefficients() == []


def test_should_evaluate_polynomial_partially():
    poly = MultiLinearPolynomial(
        6,
        [(0, Fq(9)), (28, Fq(3)), (29, Fq(2)), (56, Fq(4)), (57, Fq(2))],
    )
    poly.partial_evaluate(2, Fq(2))

    assert poly.coefficients()[4][1] == Fq(4)
    assert poly.coefficients()[2][0] == 21


def test_partial_evaluate_past_width_changes_nothing():
    poly = multilinear_polyb()
    before = poly.coefficients()
    poly.partial_evaluate(10, Fq(7))
    assert poly.coefficients() == before


def test_evaluate_at_zero_gives_constant_term():
    assert multilinear_polya().evaluate([0, 0, 0]) == Fq(4)


def test_evaluate_at_ones_sums_coefficients():
    # 2 + 2 + 3 + 4
    assert multilinear_polya().evaluate([1, 1, 1]) == Fq(11)


def test_evaluate_rejects_wrong_number_of_values():
    with pytest.raises(ValueError):
        multilinear_polya().evaluate([1, 2])


def test_should_interpolate_polynomial():
    # f(a, b) = 2a + 3b - 5ab + 6
    polynomial = MultiLinearPolynomial.interpolate([6, 9, 8, 6], 2)
    assert len(polynomial.coefficients()) == 4
    assert polynomial.coefficients()[3][1] == Fq(-5)

    # f(a, b, c) = 3ab + 12abc - 4bc - c + 15
    polynomial = MultiLinearPolynomial.interpolate([15, 14, 15, 10, 15, 14, 18, 25], 3)
    assert len(polynomial.coefficients()) == 5
    assert polynomial.coefficients()[4][1] == Fq(12)
    assert polynomial.coefficients()[3][1] == Fq(-4)


@pytest.mark.parametrize("points,variables", [([1, 2, 3], 2), ([], 0), ([1, 2], 2)])
def test_interpolate_rejects_wrong_point_count(points, variables):
    with pytest.raises(ValueError):
        MultiLinearPolynomial.interpolate(points, variables)


def test_should_add_multilinear_polynomials():
    poly_a = MultiLinearPolynomial(4, [(0, Fq(5)), (8, Fq(2)), (4, Fq(3))])
    poly_b = MultiLinearPolynomial(4, [(0, Fq(5)), (2, Fq(2)), (1, Fq(3))])

    poly_sum = poly_a + poly_b
    assert len(poly_sum.coefficients()) == 5
    assert poly_sum.coefficients()[0] == (0, Fq(10))


def test_addition_is_commutative():
    poly_a = MultiLinearPolynomial(4, [(0, Fq(5)), (8, Fq(2)), (4, Fq(3))])
    poly_b = MultiLinearPolynomial(4, [(0, Fq(5)), (2, Fq(2)), (1, Fq(3))])
    assert (poly_a + poly_b).coefficients() == (poly_b + poly_a).coefficients()


def test_adding_negation_cancels():
    poly = multilinear_polyb()
    assert (poly + poly.scalar_mul(-1)).coefficients() == []


def test_add_rejects_different_variable_counts():
    with pytest.raises(ValueError):
        multilinear_polya() + multilinear_polyb()


def test_should_do_multiply():
    polya = MultiLinearPolynomial(2, [(0, Fq(1)), (2, -Fq(1))])
    polyb = MultiLinearPolynomial(2, [(0, Fq(0)), (1, Fq(1))])
    product = polya * polyb
    assert len(product.coefficients()) == 2
    assert product.coefficients()[0][0] == 1
    assert product.coefficients()[1][1] == Fq(-1)

    polyc = MultiLinearPolynomial(2, [(0, Fq(1)), (1, -Fq(1))])
    product = polyc * polya
    assert len(product.coefficients()) == 4
    assert product.coefficients()[0][0] == 0
    assert product.coefficients()[2][1] == Fq(-1)


def test_multiply_rejects_different_variable_counts():
    with pytest.raises(ValueError):
        multilinear_polya() * multilinear_polyb()


def test_constructor_sorts_and_drops_zero_terms():
    poly = MultiLinearPolynomial(2, [(3, 1), (0, 0), (1, 2)])
    assert poly.coefficients() == [(1, Fq(2)), (3, Fq(1))]
    assert poly.ensure_no_zero_coefficients() is False
    assert poly.ensure_sorted() is False


def test_constructor_rejects_too_many_terms():
    with pytest.raises(ValueError):
        MultiLinearPolynomial(1, [(0, 1), (1, 1), (2, 1)])


def test_constructor_rejects_negative_combination():
    with pytest.raises(ValueError):
        MultiLinearPolynomial(2, [(-1, 1)])


@pytest.mark.parametrize("variables,expected", [(3, [7]), (0, [])])
def test_combinations(variables, expected):
    assert MultiLinearPolynomial(variables, []).combinations() == expected


def test_combinations_for_full_word():
    assert MultiLinearPolynomial(64, []).combinations() == [(1 << 64) - 1]


def test_degree_of_empty_polynomial_raises():
    with pytest.raises(ValueError):
        MultiLinearPolynomial(2, []).degree()