"""Exception hierarchy for polynomial operations."""

from torchpoly.polynomial._invalid_argument_error import InvalidArgumentError
from torchpoly.polynomial._polynomial_error import PolynomialError

__all__ = [
    "InvalidArgumentError",
    "PolynomialError",
]
