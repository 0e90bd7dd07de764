from typing import Optional, Union

import torch

from ._polynomial import Polynomial


def polynomial_zero(
    dtype: torch.dtype = torch.int64,
    device: Optional[Union[torch.device, str]] = None,
) -> Polynomial:
    """Return the canonical zero polynomial [0].

    Parameters
    ----------
    dtype : torch.dtype
        Coefficient dtype.
    device : torch.device or str, optional
        Coefficient device.

    Returns
    -------
    Polynomial
        Polynomial with the single coefficient 0, degree 0.
    """
    return Polynomial(coeffs=torch.zeros(1, dtype=dtype, device=device))


def polynomial_is_zero(p: Polynomial) -> bool:
    """Check whether p is the canonical zero polynomial.

    Only the single-coefficient form [0] counts. Longer all-zero vectors
    such as [0, 0] keep their formal degree and are not canonical zeros.
    """
    coeffs = p.coeffs
    return coeffs.shape[-1] == 1 and bool(coeffs[0] == 0)
