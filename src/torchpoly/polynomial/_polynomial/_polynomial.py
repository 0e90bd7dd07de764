from typing import Optional, Sequence, Union

import torch
from tensordict.tensorclass import tensorclass
from torch import Tensor

from torchpoly.polynomial._invalid_argument_error import InvalidArgumentError

Scalar = Union[int, float, Tensor]


@tensorclass
class Polynomial:
    """Polynomial in power basis with ascending coefficients.

    Represents p(x) = coeffs[0] + coeffs[1]*x + coeffs[2]*x^2 + ...

    Instances are values: every operation allocates a new coefficient
    tensor and never writes into its operands.

    Attributes
    ----------
    coeffs : Tensor
        Coefficients in ascending order, shape (N,) where N = degree + 1.
        coeffs[i] is the coefficient of x^i.

    Examples
    --------
    1 + 5x:
        polynomial([1, 5])

    Named methods and their operators:
        p.add(q)         # p + q
        p.multiply(q)    # p * q
        p.multiply(3)    # p * 3
        p.negate()       # -p
        p.degree()       # 1
        p.coefficients() # tensor([1, 5])
    """

    coeffs: Tensor

    def add(self, other: "Polynomial") -> "Polynomial":
        from ._polynomial_add import polynomial_add

        return polynomial_add(self, other)

    def multiply(self, other: Union["Polynomial", Scalar]) -> "Polynomial":
        from ._polynomial_multiply import polynomial_multiply
        from ._polynomial_scale import polynomial_scale

        if isinstance(other, Polynomial):
            return polynomial_multiply(self, other)
        return polynomial_scale(self, other)

    def negate(self) -> "Polynomial":
        from ._polynomial_negate import polynomial_negate

        return polynomial_negate(self)

    def degree(self) -> int:
        from ._polynomial_degree import polynomial_degree

        return polynomial_degree(self)

    def coefficients(self) -> Tensor:
        from ._polynomial_coefficients import polynomial_coefficients

        return polynomial_coefficients(self)

    def __add__(self, other: "Polynomial") -> "Polynomial":
        from ._polynomial_add import polynomial_add

        return polynomial_add(self, other)

    def __radd__(self, other: "Polynomial") -> "Polynomial":
        from ._polynomial_add import polynomial_add

        return polynomial_add(other, self)

    def __sub__(self, other: "Polynomial") -> "Polynomial":
        from ._polynomial_subtract import polynomial_subtract

        return polynomial_subtract(self, other)

    def __rsub__(self, other: "Polynomial") -> "Polynomial":
        from ._polynomial_subtract import polynomial_subtract

        return polynomial_subtract(other, self)

    def __mul__(self, other: Union["Polynomial", Scalar]) -> "Polynomial":
        return self.multiply(other)

    def __rmul__(self, other: Union["Polynomial", Scalar]) -> "Polynomial":
        from ._polynomial_multiply import polynomial_multiply
        from ._polynomial_scale import polynomial_scale

        if isinstance(other, Polynomial):
            return polynomial_multiply(other, self)
        return polynomial_scale(self, other)

    def __neg__(self) -> "Polynomial":
        from ._polynomial_negate import polynomial_negate

        return polynomial_negate(self)

    def __call__(self, x: Union[Tensor, float]) -> Tensor:
        from ._polynomial_evaluate import polynomial_evaluate

        return polynomial_evaluate(self, x)


def polynomial(
    coeffs: Union[Tensor, Sequence[Union[int, float]]],
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[Union[torch.device, str]] = None,
) -> Polynomial:
    """Create polynomial from a coefficient sequence.

    Parameters
    ----------
    coeffs : Tensor or sequence of numbers
        Coefficients in ascending order, shape (N,). Must have at least
        one coefficient. Integer sequences become ``torch.int64`` (exact
        arithmetic), real sequences become ``torch.float64``.
    dtype : torch.dtype, optional
        Convert the coefficients to this dtype.
    device : torch.device or str, optional
        Place the coefficients on this device.

    Returns
    -------
    Polynomial
        Polynomial instance owning a private copy of the coefficients.

    Raises
    ------
    InvalidArgumentError
        If coeffs is empty, non-numeric, not one-dimensional, boolean or
        complex.

    Examples
    --------
    >>> p = polynomial([1, 2, 3])  # 1 + 2x + 3x^2
    >>> p.coeffs
    tensor([1, 2, 3])
    """
    if isinstance(coeffs, Tensor):
        tensor = coeffs
    else:
        try:
            tensor = torch.as_tensor(coeffs, dtype=dtype)
            if dtype is None and tensor.is_floating_point():
                # Python floats are doubles; don't round through float32
                tensor = torch.as_tensor(coeffs, dtype=torch.float64)
        except (TypeError, ValueError, RuntimeError) as error:
            raise InvalidArgumentError(
                f"Polynomial coefficients must be numeric: {error}"
            ) from error

    if tensor.dim() != 1:
        raise InvalidArgumentError(
            f"Polynomial coefficients must be one-dimensional, "
            f"got shape {tuple(tensor.shape)}"
        )

    if tensor.shape[-1] == 0:
        raise InvalidArgumentError(
            "Polynomial must have at least one coefficient"
        )

    if tensor.dtype == torch.bool or dtype == torch.bool:
        raise InvalidArgumentError(
            "Polynomial coefficients must be numeric, got torch.bool"
        )

    if tensor.is_complex() or (dtype is not None and dtype.is_complex):
        raise InvalidArgumentError(
            "Complex polynomial coefficients are not supported"
        )

    tensor = tensor.to(dtype=dtype, device=device).clone()

    return Polynomial(coeffs=tensor)
