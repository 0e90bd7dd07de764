from ._polynomial import Polynomial, polynomial
from ._polynomial_add import polynomial_add
from ._polynomial_coefficients import polynomial_coefficients
from ._polynomial_degree import polynomial_degree
from ._polynomial_equal import polynomial_equal
from ._polynomial_evaluate import polynomial_evaluate
from ._polynomial_multiply import polynomial_multiply
from ._polynomial_negate import polynomial_negate
from ._polynomial_scale import polynomial_scale
from ._polynomial_subtract import polynomial_subtract
from ._polynomial_zero import polynomial_is_zero, polynomial_zero

__all__ = [
    "Polynomial",
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
