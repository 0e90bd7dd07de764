"""Polynomial arithmetic in the power basis.

Polynomials are immutable values holding a one-dimensional coefficient
tensor in ascending order (``coeffs[i]`` multiplies ``x**i``).
"""

from ._exceptions import InvalidArgumentError, PolynomialError
from ._polynomial import (
    Polynomial,
    polynomial,
    polynomial_add,
    polynomial_coefficients,
    polynomial_degree,
    polynomial_equal,
    polynomial_evaluate,
    polynomial_is_zero,
    polynomial_multiply,
    polynomial_negate,
    polynomial_scale,
    polynomial_subtract,
    polynomial_zero,
)

__all__ = [
    "InvalidArgumentError",
    "Polynomial",
    "PolynomialError",
    "polynomial",
    "polynomial_add",
    "polynomial_coefficients",
    "polynomial_degree",
    "polynomial_equal",
    "polynomial_evaluate",
    "polynomial_is_zero",
    "polynomial_multiply",
    "polynomial_negate",
    "polynomial_scale",
    "polynomial_subtract",
    "polynomial_zero",
]
