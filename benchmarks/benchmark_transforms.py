#!/usr/bin/env python
"""
Benchmark script for the distributor transforms.

Times every scalar transform over the same batch of hashed inputs and reports
the observed extremes of the Ziggurat samplers over a Weyl sequence of states.
"""

import time

import numpy as np

from distributor import (
    linear_normal,
    linear_normal_f,
    normal,
    normal_f,
    normal_f_long,
    probit,
    probit_d,
    probit_f,
    probit_high_precision,
    probit_i,
    probit_l,
)

GOLDEN_GAMMA = 0x9E3779B97F4A7C15
MASK64 = 0xFFFFFFFFFFFFFFFF


def benchmark_transform(func, inputs, n_runs=3):
    """Return mean and std of the wall time for one pass over ``inputs``."""
    times = []
    for _ in range(n_runs):
        start = time.perf_counter()
        for value in inputs:
            func(value)
        times.append(time.perf_counter() - start)
    return np.mean(times), np.std(times)


def scan_extremes(func, n_samples, bits=64):
    """Min and max of ``func`` over a Weyl sequence of states."""
    lo, hi = np.inf, -np.inf
    state = 0
    mask = MASK64 if bits == 64 else 0xFFFFFFFF
    for _ in range(n_samples):
        state = (state + GOLDEN_GAMMA) & MASK64
        value = float(func(state & mask))
        lo = min(lo, value)
        hi = max(hi, value)
    return lo, hi


def main():
    n_samples = 100_000
    rng = np.random.default_rng(42)
    longs = rng.integers(0, 2**64, size=n_samples, dtype=np.uint64).tolist()
    ints = [value & 0xFFFFFFFF for value in longs]
    fractions = rng.random(n_samples).tolist()

    cases = [
        ("probit", probit, fractions),
        ("probit_high_precision", probit_high_precision, fractions),
        ("probit_d", probit_d, fractions),
        ("probit_f", probit_f, fractions),
        ("probit_l", probit_l, longs),
        ("probit_i", probit_i, ints),
        ("linear_normal", linear_normal, longs),
        ("linear_normal_f", linear_normal_f, ints),
        ("normal", normal, longs),
        ("normal_f", normal_f, ints),
        ("normal_f_long", normal_f_long, longs),
    ]

    print("=" * 70)
    print(f"DISTRIBUTOR TRANSFORM BENCHMARK (n_samples={n_samples:,})")
    print("=" * 70)
    for name, func, inputs in cases:
        mean_t, std_t = benchmark_transform(func, inputs)
        rate = n_samples / mean_t
        print(f"  {name:<24} {mean_t:.4f}s +/- {std_t:.4f}s  ({rate:,.0f} calls/s)")

    print("\n" + "-" * 70)
    print("Ziggurat extremes over a Weyl sequence (n_samples=1,000,000)")
    print("-" * 70)
    for name, func, bits in [
        ("normal", normal, 64),
        ("normal_f", normal_f, 32),
        ("normal_f_long", normal_f_long, 64),
    ]:
        lo, hi = scan_extremes(func, 1_000_000, bits=bits)
        print(f"  {name:<24} min {lo: .6f}  max {hi: .6f}")


if __name__ == "__main__":
    main()
