from typing import Union

import torch
from torch import Tensor

from torchpoly.polynomial._invalid_argument_error import InvalidArgumentError

from ._polynomial import Polynomial
from ._polynomial_multiply import _warn_on_overflow
from ._polynomial_zero import polynomial_is_zero, polynomial_zero


def polynomial_scale(
    p: Polynomial, c: Union[int, float, Tensor]
) -> Polynomial:
    """Multiply polynomial by a scalar.

    Equivalent to multiplying by the one-term polynomial [c].

    Parameters
    ----------
    p : Polynomial
        Polynomial to scale.
    c : int, float or Tensor
        Scalar factor. A tensor must hold exactly one element.

    Returns
    -------
    Polynomial
        Scaled polynomial c * p, same degree as p. Scaling by zero, or
        scaling the zero polynomial, returns the zero polynomial [0].

    Raises
    ------
    InvalidArgumentError
        If c is not a single real number.
    """
    coeffs = p.coeffs

    if isinstance(c, Tensor):
        if c.numel() != 1:
            raise InvalidArgumentError(
                f"Scale factor must be a single number, "
                f"got shape {tuple(c.shape)}"
            )
        if c.dtype == torch.bool or c.is_complex():
            raise InvalidArgumentError(
                f"Scale factor must be a real number, got {c.dtype}"
            )
        c = c.reshape(()).to(coeffs.device)
    elif isinstance(c, bool) or not isinstance(c, (int, float)):
        raise InvalidArgumentError(
            f"Scale factor must be a real number, got {type(c).__name__}"
        )
    else:
        # Same dtype polynomial([c]) would get: Python floats are doubles
        c = torch.as_tensor(
            c,
            dtype=torch.float64 if isinstance(c, float) else None,
            device=coeffs.device,
        )

    # Promote as polynomial_multiply(p, polynomial([c])) does
    result_dtype = torch.promote_types(coeffs.dtype, c.dtype)

    if polynomial_is_zero(p) or bool(c == 0):
        return polynomial_zero(dtype=result_dtype, device=coeffs.device)

    result = coeffs.to(result_dtype) * c.to(result_dtype)

    _warn_on_overflow(result, coeffs, c)

    return Polynomial(coeffs=result)
