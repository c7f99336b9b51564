"""Pytest configuration for the distributor test suite."""

import numpy as np
import pytest


def pytest_addoption(parser):
    """Add custom command line options."""
    parser.addoption(
        "--run-statistical",
        action="store_true",
        default=False,
        help="Run large-sample goodness-of-fit tests (skipped by default)",
    )


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "statistical: mark test as a large-sample goodness-of-fit test (skipped unless --run-statistical is passed)",
    )
    config.addinivalue_line(
        "markers",
        "slow: mark test as slow (large sample sizes, may take several seconds)",
    )
    config.addinivalue_line(
        "markers",
        "rng_validation: mark test as a distribution validation test",
    )


def pytest_collection_modifyitems(config, items):
    """Skip statistical tests unless the corresponding flag is passed."""
    if config.getoption("--run-statistical"):
        return
    skip_statistical = pytest.mark.skip(reason="need --run-statistical option to run")
    for item in items:
        if "statistical" in item.keywords:
            item.add_marker(skip_statistical)


def splitmix64(counter: np.ndarray) -> np.ndarray:
    """SplitMix64 finalizer over a uint64 array; wraps modulo 2**64."""
    z = counter * np.uint64(0x9E3779B97F4A7C15)
    z = (z ^ (z >> np.uint64(30))) * np.uint64(0xBF58476D1CE4E5B9)
    z = (z ^ (z >> np.uint64(27))) * np.uint64(0x94D049BB133111EB)
    return z ^ (z >> np.uint64(31))


@pytest.fixture(scope="session")
def hashed_states():
    """Return a function producing ``n`` well-mixed states of ``bits`` width."""

    def _hashed_states(n: int, bits: int = 64, seed: int = 0) -> list[int]:
        counter = np.arange(seed + 1, seed + n + 1, dtype=np.uint64)
        states = splitmix64(counter)
        if bits == 32:
            states = states >> np.uint64(32)
        return states.tolist()

    return _hashed_states
