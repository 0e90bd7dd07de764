"""Hypothesis strategies for polynomial testing."""

from ._coefficient_lists import coefficient_lists
from ._polynomials import nonzero_polynomials, polynomials

__all__ = [
    "coefficient_lists",
    "nonzero_polynomials",
    "polynomials",
]
