import torch

from ._polynomial import Polynomial


def _pad_to(coeffs: torch.Tensor, n: int) -> torch.Tensor:
    # Zeros go on the high-degree end, so x^i stays aligned with x^i
    return torch.nn.functional.pad(coeffs, [0, n - coeffs.shape[-1]])


def polynomial_add(p: Polynomial, q: Polynomial) -> Polynomial:
    """Add two polynomials.

    Computes element-wise sum of coefficients with zero-padding for
    polynomials of different degrees.

    Parameters
    ----------
    p, q : Polynomial
        Polynomials to add.

    Returns
    -------
    Polynomial
        Sum p + q with max(len(p), len(q)) coefficients.
    """
    p_coeffs = p.coeffs
    q_coeffs = q.coeffs

    n_out = max(p_coeffs.shape[-1], q_coeffs.shape[-1])

    # Promote to common dtype
    common_dtype = torch.promote_types(p_coeffs.dtype, q_coeffs.dtype)
    p_coeffs = _pad_to(p_coeffs.to(common_dtype), n_out)
    q_coeffs = _pad_to(q_coeffs.to(common_dtype), n_out)

    return Polynomial(coeffs=p_coeffs + q_coeffs)
