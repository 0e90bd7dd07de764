"""Benchmark polynomial multiplication.

Times direct convolution across polynomial degrees for exact (int64) and
real (float64) coefficients, to check the O(n * m) cost.
"""

import time

import torch

from torchpoly.polynomial import polynomial, polynomial_multiply


def benchmark_multiply(
    degree: int,
    n_iterations: int = 100,
    dtype: torch.dtype = torch.float64,
) -> float:
    """Benchmark multiplication at given degree.

    Parameters
    ----------
    degree : int
        Degree of polynomials to multiply.
    n_iterations : int
        Number of iterations for timing.
    dtype : torch.dtype
        Coefficient dtype.

    Returns
    -------
    float
        Average time per multiplication in milliseconds.
    """
    a = polynomial(torch.randint(1, 10, (degree + 1,)), dtype=dtype)
    b = polynomial(torch.randint(1, 10, (degree + 1,)), dtype=dtype)

    # Warmup
    for _ in range(10):
        _ = polynomial_multiply(a, b)

    start = time.perf_counter()
    for _ in range(n_iterations):
        _ = polynomial_multiply(a, b)

    elapsed = time.perf_counter() - start
    return elapsed / n_iterations * 1000  # ms


def main():
    """Run multiplication benchmarks across degrees."""
    degrees = [8, 16, 32, 64, 128, 256, 512]

    print("Polynomial Multiplication Benchmark")
    print("=" * 40)
    print(f"{'Degree':>8} {'int64 (ms)':>14} {'float64 (ms)':>14}")
    print("-" * 40)

    for degree in degrees:
        ms_int = benchmark_multiply(degree, dtype=torch.int64)
        ms_float = benchmark_multiply(degree, dtype=torch.float64)
        print(f"{degree:>8} {ms_int:>14.4f} {ms_float:>14.4f}")

    print()
    print("Notes:")
    print("- Direct convolution, one row of the outer product per step")
    print("- int64 results are exact; float64 results are rounded")


if __name__ == "__main__":
    main()
