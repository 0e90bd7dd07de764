"""Testing helpers for torchpoly.

The strategies are built on hypothesis, which is not a runtime
dependency of torchpoly. Install ``torchpoly[test]`` to use them.

Example usage:

    import hypothesis

    from torchpoly.testing.strategies import polynomials

    @hypothesis.given(polynomials(), polynomials())
    def test_add_commutes(a, b):
        assert polynomial_equal(a + b, b + a)
"""

from . import strategies

__all__ = [
    "strategies",
]
