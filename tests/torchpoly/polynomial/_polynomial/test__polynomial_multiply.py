import warnings

import hypothesis
import numpy as np
import pytest
import torch

from torchpoly.polynomial import (
    polynomial,
    polynomial_is_zero,
    polynomial_multiply,
)
from torchpoly.testing.strategies import nonzero_polynomials, polynomials


class TestPolynomialMultiply:
    """Tests for polynomial_multiply."""

    def test_multiply_linear(self):
        """Multiply two linear polynomials."""
        # (1 + 2x) * (3 + 4x) = 3 + 10x + 8x^2
        p = polynomial([1, 2])
        q = polynomial([3, 4])
        result = polynomial_multiply(p, q)
        assert torch.equal(result.coeffs, torch.tensor([3, 10, 8]))

    def test_multiply_quadratic(self):
        """Multiply linear by quadratic."""
        # (1 + x) * (1 + 2x + x^2) = 1 + 3x + 3x^2 + x^3
        p = polynomial([1, 1])
        q = polynomial([1, 2, 1])
        result = polynomial_multiply(p, q)
        assert torch.equal(result.coeffs, torch.tensor([1, 3, 3, 1]))

    def test_multiply_constants(self):
        """Constant times constant is a constant."""
        result = polynomial_multiply(polynomial([2]), polynomial([8]))
        assert torch.equal(result.coeffs, torch.tensor([16]))
        assert result.degree() == 0

    def test_multiply_by_zero(self):
        """p * [0] collapses to [0]."""
        p = polynomial([1, 2, 3])
        result = polynomial_multiply(p, polynomial([0]))
        assert torch.equal(result.coeffs, torch.tensor([0]))
        assert result.degree() == 0

    def test_zero_times_polynomial(self):
        """[0] * p collapses to [0]."""
        p = polynomial([1, 2, 3])
        result = polynomial_multiply(polynomial([0]), p)
        assert torch.equal(result.coeffs, torch.tensor([0]))
        assert result.degree() == 0

    def test_multiply_by_zero_vector(self):
        """[0, 0] is not the canonical zero and keeps the degree law."""
        p = polynomial([1, 2])
        result = polynomial_multiply(p, polynomial([0, 0]))
        assert torch.equal(result.coeffs, torch.tensor([0, 0, 0]))
        assert result.degree() == 2

    def test_multiply_by_zero_keeps_dtype(self):
        """The collapsed zero uses the promoted dtype."""
        p = polynomial([1.0, 2.0])
        result = polynomial_multiply(p, polynomial([0]))
        assert result.coeffs.dtype == torch.float64

    def test_multiply_promotes_dtype(self):
        """Integer times real gives real."""
        result = polynomial_multiply(polynomial([1, 2]), polynomial([0.5]))
        assert result.coeffs.dtype == torch.float64
        torch.testing.assert_close(
            result.coeffs, torch.tensor([0.5, 1.0], dtype=torch.float64)
        )

    def test_multiply_does_not_mutate(self):
        """Operands are left untouched."""
        p = polynomial([1, 2])
        q = polynomial([3, 4, 5])
        polynomial_multiply(p, q)
        assert torch.equal(p.coeffs, torch.tensor([1, 2]))
        assert torch.equal(q.coeffs, torch.tensor([3, 4, 5]))

    def test_overflow_warns(self):
        """Finite float32 operands overflowing to inf raise a warning."""
        p = polynomial(torch.tensor([1e30, 1.0], dtype=torch.float32))
        q = polynomial(torch.tensor([1e30], dtype=torch.float32))
        with pytest.warns(RuntimeWarning, match="overflow"):
            polynomial_multiply(p, q)

    def test_infinite_operand_does_not_warn(self):
        """Non-finite input is propagated silently."""
        p = polynomial([float("inf"), 1.0])
        q = polynomial([2.0])
        with warnings.catch_warnings():
            warnings.simplefilter("error", RuntimeWarning)
            result = polynomial_multiply(p, q)
        assert torch.isinf(result.coeffs[0])

    def test_requires_grad(self):
        """Gradients flow through the convolution."""
        p_coeffs = torch.tensor(
            [1.0, 2.0], dtype=torch.float64, requires_grad=True
        )
        q = polynomial([3.0, 4.0])
        p = polynomial(p_coeffs)
        polynomial_multiply(p, q).coeffs.sum().backward()
        torch.testing.assert_close(
            p_coeffs.grad, torch.tensor([7.0, 7.0], dtype=torch.float64)
        )

    @hypothesis.given(polynomials(), polynomials())
    def test_matches_numpy_convolve(self, p, q):
        """Compare against numpy.convolve."""
        hypothesis.assume(not polynomial_is_zero(p))
        hypothesis.assume(not polynomial_is_zero(q))
        result = polynomial_multiply(p, q)
        expected = np.convolve(p.coeffs.numpy(), q.coeffs.numpy())
        np.testing.assert_array_equal(result.coeffs.numpy(), expected)

    @hypothesis.given(nonzero_polynomials(), nonzero_polynomials())
    def test_degree_law(self, p, q):
        """deg(p * q) = deg(p) + deg(q) for non-zero operands."""
        result = polynomial_multiply(p, q)
        assert result.degree() == p.degree() + q.degree()
