from torch import Tensor

from ._polynomial import Polynomial


def polynomial_coefficients(p: Polynomial) -> Tensor:
    """Return a copy of the coefficients in ascending order.

    The copy keeps callers from writing into the polynomial's own storage.
    """
    return p.coeffs.clone()
