class PolynomialError(Exception):
    """Base class for errors raised by polynomial operations."""

    pass
