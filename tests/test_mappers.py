"""Tests for the pattern-preserving integer mappers."""

import math

import numpy as np
import pytest
from scipy import special

from distributor.config import get_linear_config
from distributor.mappers import linear_normal, linear_normal_f, probit_i, probit_l
from distributor.probit import probit_high_precision
from distributor.rational import probit_d, probit_f
from distributor.tables import LINEAR_TABLE, LINEAR_TABLE_F

LONG_MIN, LONG_MAX = -(2**63), 2**63 - 1
INT_MIN, INT_MAX = -(2**31), 2**31 - 1


@pytest.fixture
def sorted_longs():
    rng = np.random.default_rng(208)
    values = rng.integers(LONG_MIN, LONG_MAX, size=4000, dtype=np.int64, endpoint=True)
    return sorted(set(values.tolist()) | {LONG_MIN, -1, 0, LONG_MAX})


@pytest.fixture
def sorted_ints():
    rng = np.random.default_rng(208)
    values = rng.integers(INT_MIN, INT_MAX, size=4000, dtype=np.int64, endpoint=True)
    return sorted(set(values.tolist()) | {INT_MIN, -1, 0, INT_MAX})


def _non_decreasing(values) -> bool:
    return all(a <= b for a, b in zip(values, values[1:]))


class TestProbitL:
    """Test the long-input rational probit."""

    def test_extremes(self):
        assert probit_l(LONG_MIN) == probit_d(0.0)
        assert probit_l(LONG_MAX) == probit_d(1.0)

    def test_resolution_next_to_extreme(self):
        # tail probability is fixed-point with step 2**-53
        first = probit_l(LONG_MIN + (1 << 11))
        assert first == pytest.approx(special.ndtri(2.0**-53), abs=5e-3)
        assert probit_l(LONG_MIN + (1 << 11) - 1) == probit_l(LONG_MIN)
        assert probit_l(LONG_MAX - (1 << 11)) == -first

    def test_monotonic(self, sorted_longs):
        assert _non_decreasing([probit_l(l) for l in sorted_longs])

    def test_complement_symmetry(self, sorted_longs):
        for l in sorted_longs[::20]:
            assert probit_l(~l) == -probit_l(l)

    def test_center(self):
        assert probit_l(-1) < 0.0 < probit_l(0)
        assert probit_l(0) == pytest.approx(0.0, abs=1e-15)

    def test_nearby_inputs_can_tie(self):
        # both share the same top 52 bits of distance from the extreme
        assert probit_l(0) == probit_l(1)
        assert probit_l(0) < probit_l(1 << 11)

    def test_wraps_to_64_bits(self):
        assert probit_l(2**63) == probit_l(LONG_MIN)
        assert probit_l(2**64 - 1) == probit_l(-1)

    def test_follows_quantiles(self, sorted_longs):
        for l in sorted_longs[100:-100:50]:
            p = (l + 2**63) / 2**64
            assert probit_l(l) == pytest.approx(special.ndtri(p), abs=5e-4)


class TestProbitI:
    """Test the int-input rational probit."""

    def test_returns_float32(self):
        assert isinstance(probit_i(12345), np.float32)

    def test_extremes(self):
        assert probit_i(INT_MIN) == probit_f(0.0)
        assert probit_i(INT_MAX) == probit_f(1.0)

    def test_monotonic(self, sorted_ints):
        assert _non_decreasing([probit_i(i) for i in sorted_ints])

    def test_complement_symmetry(self, sorted_ints):
        for i in sorted_ints[::20]:
            assert probit_i(~i) == -probit_i(i)

    def test_close_to_long_variant(self, sorted_ints):
        for i in sorted_ints[100:-100:40]:
            assert float(probit_i(i)) == pytest.approx(probit_l(i << 32), abs=1e-4)


class TestLinearNormal:
    """Test the table-and-interpolation mapper for longs."""

    def test_signed_zeros(self):
        zero = linear_normal(0)
        negative_zero = linear_normal(-1)
        assert zero == 0.0 and math.copysign(1.0, zero) == 1.0
        assert negative_zero == 0.0 and math.copysign(1.0, negative_zero) == -1.0

    def test_extremes(self):
        assert linear_normal(LONG_MAX) == pytest.approx(8.375, abs=1e-12)
        assert linear_normal(LONG_MIN) == pytest.approx(-8.375, abs=1e-12)

    def test_index_bits_from_config(self):
        config = get_linear_config()
        shift = 63 - config["index_bits"]
        for k in (1, 17, 512, config["size"] - 1):
            assert linear_normal(k << shift) == LINEAR_TABLE[k]
        assert linear_normal(LONG_MAX) == pytest.approx(config["trail_end"], abs=1e-12)

    def test_table_points(self):
        for index in (1, 100, 1023):
            assert linear_normal(index << 53) == LINEAR_TABLE[index]
        assert linear_normal(1 << 53) == probit_high_precision(0.5 + 2.0**-11)

    def test_monotonic(self, sorted_longs):
        assert _non_decreasing([linear_normal(n) for n in sorted_longs])

    def test_complement_symmetry(self, sorted_longs):
        for n in sorted_longs[::20]:
            assert linear_normal(~n) == -linear_normal(n)

    def test_follows_quantiles_in_body(self):
        for index in range(0, 900, 7):
            n = (index << 53) | (0x5A5A5A5A5A5A5 << 1)
            p = 0.5 + n * 2.0**-64
            assert linear_normal(n) == pytest.approx(special.ndtri(p), abs=1e-4)

    def test_moments_over_even_grid(self):
        grid = np.linspace(LONG_MIN, LONG_MAX, 20001, dtype=np.float64)
        values = np.array([linear_normal(int(g)) for g in grid[1:-1]])
        assert abs(values.mean()) < 1e-3
        assert values.var() == pytest.approx(1.0, abs=0.03)


class TestLinearNormalF:
    """Test the table-and-interpolation mapper for ints."""

    def test_returns_float32(self):
        assert isinstance(linear_normal_f(99), np.float32)

    def test_signed_zeros(self):
        assert linear_normal_f(0) == 0.0 and not np.signbit(linear_normal_f(0))
        assert linear_normal_f(-1) == 0.0 and np.signbit(linear_normal_f(-1))

    def test_extremes(self):
        assert float(linear_normal_f(INT_MAX)) == pytest.approx(8.375, abs=1e-4)
        assert float(linear_normal_f(INT_MIN)) == pytest.approx(-8.375, abs=1e-4)

    def test_index_bits_from_config(self):
        shift = 31 - get_linear_config()["index_bits"]
        for k in (1, 17, 512):
            assert linear_normal_f(k << shift) == LINEAR_TABLE_F[k]

    def test_monotonic(self, sorted_ints):
        assert _non_decreasing([linear_normal_f(n) for n in sorted_ints])

    def test_close_to_long_variant(self, sorted_ints):
        for n in sorted_ints[::40]:
            assert float(linear_normal_f(n)) == pytest.approx(
                linear_normal(n << 32), abs=1e-5
            )
