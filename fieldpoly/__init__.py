"""Polynomials over the BN254 base field and Shamir-style secret sharing."""

__version__ = "0.1.0"
__all__ = ["bits", "field", "multilinear", "shamir", "univariate"]