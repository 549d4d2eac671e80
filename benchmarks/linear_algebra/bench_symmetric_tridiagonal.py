"""Benchmarks for symmetric tridiagonal decomposition.

Times the in-place reduction, the unpacking of Q, and the batched wrapper,
and compares the reduction against scipy.linalg.hessenberg (LAPACK) on the
same symmetric input.
"""

from __future__ import annotations

import time
from typing import Any, Callable

import numpy as np
import scipy.linalg
import torch

from torchtridiagonal.linear_algebra.decomposition import (
    symmetric_tridiagonal,
    symmetric_tridiagonal_decomposition_,
    symmetric_tridiagonal_unpack,
)


def benchmark(
    func: Callable,
    *args: Any,
    setup: Callable[[], tuple] | None = None,
    warmup: int = 3,
    iterations: int = 10,
) -> dict[str, float]:
    """Run a simple benchmark on a function.

    Parameters
    ----------
    func : callable
        Function to benchmark.
    *args : Any
        Positional arguments to pass to func.
    setup : callable, optional
        Called before every run; its return value replaces ``args``. Used
        for functions that overwrite their inputs. Not timed.
    warmup : int, optional
        Number of warmup iterations. Default is 3.
    iterations : int, optional
        Number of timed iterations. Default is 10.

    Returns
    -------
    dict
        Dictionary with timing statistics:
        - 'mean': Mean time in seconds
        - 'std': Standard deviation in seconds
        - 'min': Minimum time in seconds
        - 'max': Maximum time in seconds
    """
    for _ in range(warmup):
        func(*(setup() if setup is not None else args))

    times = []
    for _ in range(iterations):
        call_args = setup() if setup is not None else args
        start = time.perf_counter()
        func(*call_args)
        times.append(time.perf_counter() - start)

    return {
        "mean": np.mean(times),
        "std": np.std(times),
        "min": np.min(times),
        "max": np.max(times),
    }


def format_time(seconds: float) -> str:
    """Format time in appropriate units."""
    if seconds < 1e-3:
        return f"{seconds * 1e6:.3f}us"
    elif seconds < 1:
        return f"{seconds * 1e3:.3f}ms"
    else:
        return f"{seconds:.3f}s"


def print_comparison(name: str, times: dict[str, dict[str, float]]) -> None:
    """Print benchmark comparison results for multiple methods."""
    print(f"\n{name}")
    print("-" * len(name))

    fastest_name = min(times.keys(), key=lambda k: times[k]["mean"])
    fastest_time = times[fastest_name]["mean"]

    for method_name, t in times.items():
        slowdown = t["mean"] / fastest_time
        if slowdown > 1.01:
            suffix = f" ({slowdown:.2f}x slower)"
        else:
            suffix = " (fastest)"
        print(
            f"  {method_name}: {format_time(t['mean'])} +/- {format_time(t['std'])}{suffix}"
        )


def random_symmetric(n: int, seed: int = 0) -> torch.Tensor:
    """Random symmetric float64 matrix of size n."""
    torch.manual_seed(seed)
    b = torch.randn(n, n, dtype=torch.float64)
    return (b + b.T) / 2


class BenchSymmetricTridiagonal:
    """Benchmarks for symmetric tridiagonal decomposition."""

    def __init__(self, warmup: int = 3, iterations: int = 10):
        self.warmup = warmup
        self.iterations = iterations

    def bench_reduction(self, n: int = 128) -> None:
        """Compare the in-place reduction with LAPACK via scipy."""
        a = random_symmetric(n)
        tau = torch.empty(n - 1, dtype=torch.float64)
        a_np = a.numpy()

        times = {
            "torchtridiagonal": benchmark(
                symmetric_tridiagonal_decomposition_,
                setup=lambda: (a.clone(), tau),
                warmup=self.warmup,
                iterations=self.iterations,
            ),
            "scipy.linalg.hessenberg": benchmark(
                scipy.linalg.hessenberg,
                a_np,
                warmup=self.warmup,
                iterations=self.iterations,
            ),
        }

        print_comparison(f"Reduction (n={n})", times)

    def bench_unpack(self, n: int = 128) -> None:
        """Time Q reconstruction from the packed form."""
        a = random_symmetric(n)
        tau = torch.empty(n - 1, dtype=torch.float64)
        symmetric_tridiagonal_decomposition_(a, tau)

        times = {
            "unpack": benchmark(
                symmetric_tridiagonal_unpack,
                a,
                tau,
                warmup=self.warmup,
                iterations=self.iterations,
            ),
            "householder_product": benchmark(
                torch.linalg.householder_product,
                a[1:, :-1],
                tau,
                warmup=self.warmup,
                iterations=self.iterations,
            ),
        }

        print_comparison(f"Unpack Q (n={n})", times)

    def bench_batched(self, batch_size: int = 16, n: int = 32) -> None:
        """Time the batched wrapper with and without Q."""
        torch.manual_seed(1)
        b = torch.randn(batch_size, n, n, dtype=torch.float64)
        a = (b + b.mT) / 2

        times = {
            "compute_q=True": benchmark(
                symmetric_tridiagonal,
                a,
                warmup=self.warmup,
                iterations=self.iterations,
            ),
            "compute_q=False": benchmark(
                lambda x: symmetric_tridiagonal(x, compute_q=False),
                a,
                warmup=self.warmup,
                iterations=self.iterations,
            ),
        }

        print_comparison(f"Batched (batch={batch_size}, n={n})", times)

    def run_all(self) -> None:
        print("=" * 60)
        print("SYMMETRIC TRIDIAGONAL BENCHMARKS")
        print("=" * 60)

        self.bench_reduction()
        self.bench_unpack()
        self.bench_batched()

    def run_scaling(self) -> None:
        """Run scaling benchmarks (reduction is O(n^3))."""
        print("=" * 60)
        print("SCALING BENCHMARKS")
        print("=" * 60)

        for n in [16, 32, 64, 128, 256]:
            self.bench_reduction(n=n)


if __name__ == "__main__":
    bench = BenchSymmetricTridiagonal(warmup=3, iterations=10)
    bench.run_all()
    print("\n")
    bench.run_scaling()
