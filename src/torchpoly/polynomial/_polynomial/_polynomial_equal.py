import torch

from ._polynomial import Polynomial


def polynomial_equal(
    p: Polynomial,
    q: Polynomial,
    tol: float = 0.0,
) -> bool:
    """Check structural equality of two polynomials.

    Two polynomials are equal when they have the same degree and every
    pair of coefficients differs by at most tol. No zero-padding is
    applied, so [1, 0] and [1] are different polynomials.

    Parameters
    ----------
    p, q : Polynomial
        Polynomials to compare.
    tol : float
        Absolute tolerance for coefficient comparison. The default of 0
        demands exact equality, which is the right check for integer
        coefficients.

    Returns
    -------
    bool
        True if p and q are equal.
    """
    p_coeffs = p.coeffs
    q_coeffs = q.coeffs

    if p_coeffs.shape[-1] != q_coeffs.shape[-1]:
        return False

    common_dtype = torch.promote_types(p_coeffs.dtype, q_coeffs.dtype)
    p_coeffs = p_coeffs.to(common_dtype)
    q_coeffs = q_coeffs.to(common_dtype)

    if tol == 0:
        return torch.equal(p_coeffs, q_coeffs)

    diff = (p_coeffs - q_coeffs).abs()
    return bool((diff <= tol).all())
