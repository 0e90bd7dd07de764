import warnings

import torch
from torch import Tensor

from ._polynomial import Polynomial
from ._polynomial_zero import polynomial_is_zero, polynomial_zero


def _warn_on_overflow(result: Tensor, *operands: Tensor) -> None:
    """Warn when finite floating point operands produced inf or nan."""
    if not result.is_floating_point():
        return
    if torch.isfinite(result).all():
        return
    if all(torch.isfinite(operand).all() for operand in operands):
        warnings.warn(
            f"Polynomial product overflowed {result.dtype}. Consider using "
            f"torch.float64 or integer coefficients.",
            RuntimeWarning,
            stacklevel=3,
        )


def _multiply_direct(p_coeffs: Tensor, q_coeffs: Tensor) -> Tensor:
    """Discrete convolution r[k] = sum_{i+j=k} p[i] * q[j]."""
    n_p = p_coeffs.shape[-1]
    n_q = q_coeffs.shape[-1]

    result = torch.zeros(
        n_p + n_q - 1, dtype=p_coeffs.dtype, device=p_coeffs.device
    )

    # Row i of the outer product lands on result[i : i + n_q]
    for i in range(n_p):
        result[i : i + n_q] += p_coeffs[i] * q_coeffs

    return result


def polynomial_multiply(p: Polynomial, q: Polynomial) -> Polynomial:
    """Multiply two polynomials.

    Computes convolution of coefficients. Result degree is deg(p) + deg(q)
    unless either operand is the zero polynomial.

    Parameters
    ----------
    p, q : Polynomial
        Polynomials to multiply.

    Returns
    -------
    Polynomial
        Product p * q.

    Notes
    -----
    Multiplying by the canonical zero polynomial [0] returns [0] (degree 0)
    instead of a zero vector of length len(p) + len(q) - 1. This is a
    convention: the zero polynomial absorbs the product.

    Integer coefficients multiply exactly, so the product is commutative
    and associative bit for bit. For floating point coefficients these
    laws hold only up to rounding.

    Examples
    --------
    >>> p = polynomial([1, 5])  # 1 + 5x
    >>> q = polynomial([5, 4])  # 5 + 4x
    >>> polynomial_multiply(p, q).coeffs
    tensor([ 5, 29, 20])
    """
    p_coeffs = p.coeffs
    q_coeffs = q.coeffs

    # Promote to common dtype
    common_dtype = torch.promote_types(p_coeffs.dtype, q_coeffs.dtype)

    if polynomial_is_zero(p) or polynomial_is_zero(q):
        return polynomial_zero(dtype=common_dtype, device=p_coeffs.device)

    p_coeffs = p_coeffs.to(common_dtype)
    q_coeffs = q_coeffs.to(common_dtype)

    result = _multiply_direct(p_coeffs, q_coeffs)

    _warn_on_overflow(result, p_coeffs, q_coeffs)

    return Polynomial(coeffs=result)
