"""Tests for applying the scalar transforms over arrays."""

import numpy as np

from distributor import (
    apply_transform,
    linear_normal,
    linear_normal_f,
    normal,
    normal_f,
    probit_d,
    probit_i,
)


def test_probabilities_to_float64():
    result = apply_transform(probit_d, [0.25, 0.5, 0.75])
    assert result.dtype == np.float64
    np.testing.assert_array_equal(result, [probit_d(0.25), 0.0, probit_d(0.75)])


def test_float32_transforms_default_to_float32():
    states = np.arange(10, dtype=np.uint32)
    for func in (normal_f, probit_i, linear_normal_f):
        result = apply_transform(func, states)
        assert result.dtype == np.float32
        assert result.shape == (10,)


def test_shape_preserved():
    states = np.arange(12, dtype=np.int64).reshape(3, 4) << 50
    result = apply_transform(linear_normal, states)
    assert result.shape == (3, 4)
    assert result[2, 3] == linear_normal(11 << 50)


def test_uint64_states_keep_all_bits():
    states = np.array([2**64 - 1, 2**63, 12345], dtype=np.uint64)
    result = apply_transform(normal, states)
    for state, value in zip(states.tolist(), result):
        assert value == normal(state)


def test_dtype_override():
    result = apply_transform(probit_d, np.linspace(0.1, 0.9, 5), dtype=np.float32)
    assert result.dtype == np.float32


def test_empty_input():
    result = apply_transform(normal, np.array([], dtype=np.uint64))
    assert result.shape == (0,)
