from ._polynomial import Polynomial


def polynomial_degree(p: Polynomial) -> int:
    """Return degree of polynomial.

    Parameters
    ----------
    p : Polynomial
        Input polynomial.

    Returns
    -------
    int
        Number of coefficients minus 1.

    Notes
    -----
    This is the formal degree (len(coeffs) - 1), not the actual degree,
    which would require checking for trailing zeros. By convention the
    zero polynomial [0] has degree 0 rather than -inf.
    """
    return p.coeffs.shape[-1] - 1
