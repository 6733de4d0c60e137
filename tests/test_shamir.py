import pytest

from fieldpoly.field import Fq
from fieldpoly.shamir import ShamirSecret


def test_shamir_secret():
    shamir = ShamirSecret(5, 3)
    secret_key = Fq(42)
    shares = shamir.generate_shares(secret_key)

    assert len(shares) == 5
    assert shamir.verify_secret(list(shares), secret_key)


def test_wrong_secret_does_not_verify():
    shamir = ShamirSecret(5, 3)
    shares = shamir.generate_shares(Fq(42))
    assert shamir.verify_secret(shares, Fq(43)) is False


def test_too_few_shares_do_not_verify():
    shamir = ShamirSecret(5, 3)
    shares = shamir.generate_shares(Fq(42))
    assert shamir.verify_secret(shares[:2], Fq(42)) is False


def test_shares_have_distinct_x_values():
    shamir = ShamirSecret(6, 2)
    shares = shamir.generate_shares(Fq(7))
    assert len({x for x, _ in shares}) == 6


def test_zero_threshold_cannot_generate():
    with pytest.raises(ValueError):
        ShamirSecret(5, 0).generate_shares(Fq(1))


def test_threshold_out_of_range_rejected():
    with pytest.raises(ValueError):
        ShamirSecret(5, 256)
    with pytest.raises(ValueError):
        ShamirSecret(-1, 3)