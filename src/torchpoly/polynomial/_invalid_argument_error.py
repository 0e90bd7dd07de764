from torchpoly.polynomial._polynomial_error import PolynomialError


class InvalidArgumentError(PolynomialError):
    """Structurally invalid input.

    Raised when constructing a polynomial from an empty, non-numeric,
    multi-dimensional, boolean or complex coefficient sequence, and when
    scaling by a factor that is not a single number.
    """

    pass
