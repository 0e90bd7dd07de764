from ._polynomial import Polynomial
from ._polynomial_add import polynomial_add
from ._polynomial_negate import polynomial_negate


def polynomial_subtract(p: Polynomial, q: Polynomial) -> Polynomial:
    """Subtract two polynomials.

    Computes p + (-q), zero-padding the shorter operand on the
    high-degree side.

    Parameters
    ----------
    p, q : Polynomial
        Polynomials to subtract.

    Returns
    -------
    Polynomial
        Difference p - q with max(len(p), len(q)) coefficients.
    """
    return polynomial_add(p, polynomial_negate(q))
