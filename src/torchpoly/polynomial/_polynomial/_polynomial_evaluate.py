from typing import Union

import torch
from torch import Tensor

from ._polynomial import Polynomial


def polynomial_evaluate(p: Polynomial, x: Union[Tensor, float]) -> Tensor:
    """Evaluate polynomial at points using Horner's method.

    Parameters
    ----------
    p : Polynomial
        Polynomial with coefficients shape (N,).
    x : Tensor or float
        Evaluation points, any shape.

    Returns
    -------
    Tensor
        Values p(x), same shape as x, in the promoted dtype of the
        coefficients and x.

    Examples
    --------
    >>> p = polynomial([1.0, 2.0, 3.0])  # 1 + 2x + 3x^2
    >>> polynomial_evaluate(p, torch.tensor([0.0, 1.0, 2.0]))
    tensor([ 1.,  6., 17.], dtype=torch.float64)
    """
    coeffs = p.coeffs
    if not isinstance(x, Tensor):
        # Python floats are doubles
        x = torch.as_tensor(
            x, dtype=torch.float64 if isinstance(x, float) else None
        )
    x = x.to(coeffs.device)

    common_dtype = torch.promote_types(coeffs.dtype, x.dtype)
    coeffs = coeffs.to(common_dtype)
    x = x.to(common_dtype)

    result = torch.zeros_like(x)
    for k in range(coeffs.shape[-1] - 1, -1, -1):
        result = result * x + coeffs[k]

    return result
