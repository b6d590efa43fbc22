"""Benchmark binomial variate generation.

Compares the direct-simulation path (expected value below 25) with the
rejection path across trial counts to show where each regime pays off.
"""

import time

import torch

from torchvariates.probability import Binomial, GeneratorRandomSource


def benchmark_binomial(n: int, p: float, n_samples: int = 10_000) -> float:
    """Benchmark sampling at given parameters.

    Parameters
    ----------
    n : int
        Number of trials.
    p : float
        Probability of success.
    n_samples : int
        Number of variates drawn for timing.

    Returns
    -------
    float
        Average time per variate in microseconds.
    """
    binomial = Binomial(n, p)
    source = GeneratorRandomSource(torch.Generator().manual_seed(0))

    # Warmup
    for _ in range(100):
        _ = binomial.sample(source)

    start = time.perf_counter()
    for _ in range(n_samples):
        _ = binomial.sample(source)

    elapsed = time.perf_counter() - start
    return elapsed / n_samples * 1e6  # us


def main():
    """Run binomial sampling benchmarks across parameters."""
    cases = [
        (20, 0.5),
        (49, 0.5),
        (50, 0.5),
        (240, 0.1),
        (250, 0.1),
        (1_000, 0.5),
        (100_000, 0.5),
        (10_000_000, 0.3),
    ]

    print("Binomial Sampling Benchmark")
    print("=" * 60)
    print(f"{'n':>12} {'p':>6} {'n*p':>12} {'Path':>10} {'us/sample':>12}")
    print("-" * 60)

    for n, p in cases:
        expected = n * min(p, 1.0 - p)
        path = "direct" if expected < 25.0 else "rejection"
        us = benchmark_binomial(n, p, n_samples=1_000)
        print(f"{n:>12} {p:>6.2f} {expected:>12.1f} {path:>10} {us:>12.2f}")

    print("=" * 60)


if __name__ == "__main__":
    main()
