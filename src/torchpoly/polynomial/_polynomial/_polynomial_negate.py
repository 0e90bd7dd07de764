import torch

from ._polynomial import Polynomial


def polynomial_negate(p: Polynomial) -> Polynomial:
    """Negate polynomial.

    Computes element-wise negation of coefficients.

    Parameters
    ----------
    p : Polynomial
        Polynomial to negate.

    Returns
    -------
    Polynomial
        Negated polynomial -p, same degree as p. Agrees with
        ``polynomial_scale(p, -1)`` coefficient for coefficient.
    """
    return Polynomial(coeffs=torch.neg(p.coeffs))
