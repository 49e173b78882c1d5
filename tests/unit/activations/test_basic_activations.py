"""
Unit tests for basic activation functions.

Tests the activation functions in src/boardneat/activations/basic_activations.py
"""

import pytest
import numpy as np
from boardneat.activations.basic_activations import (
    identity_activation,
    clamped_activation,
    relu_activation,
    sigmoid_activation,
    tanh_activation,
    activations,
    activation_codes,
)


# Fixtures
@pytest.fixture
def sample_1d_array():
    """Standard 1D array for testing."""
    return np.array([-2.0, -1.0, 0.0, 1.0, 2.0])


class TestActivationsDictionary:
    """Test that all activations are accessible via the activations dictionary."""

    def test_all_functions_in_dictionary(self):
        for name in ['identity', 'clamped', 'relu', 'sigmoid', 'tanh']:
            assert name in activations, f"{name} not found in activations dictionary"

    def test_dictionary_functions_callable(self):
        for name, func in activations.items():
            assert callable(func), f"{name} is not callable"

    def test_every_activation_has_a_code(self):
        assert set(activation_codes) == set(activations)
        assert all(len(code) == 3 for code in activation_codes.values())


class TestSigmoid:
    """Test the sigmoid activation, the default of every network."""

    def test_zero_gives_half(self):
        assert sigmoid_activation(0.0) == pytest.approx(0.5)

    def test_symmetry(self, sample_1d_array):
        result = sigmoid_activation(sample_1d_array)
        np.testing.assert_allclose(result + result[::-1], np.ones(5))

    def test_known_value(self):
        assert sigmoid_activation(1.0) == pytest.approx(1.0 / (1.0 + np.exp(-1.0)))

    def test_no_overflow_for_large_inputs(self):
        """Test that extreme inputs saturate instead of overflowing."""
        with np.errstate(over='raise'):
            assert sigmoid_activation(1e6) == pytest.approx(1.0)
            assert sigmoid_activation(-1e6) == pytest.approx(0.0)

    def test_output_in_unit_interval(self, sample_1d_array):
        result = sigmoid_activation(sample_1d_array * 50)
        assert np.all(result >= 0.0) and np.all(result <= 1.0)


class TestOtherActivations:
    """Test the remaining activation functions."""

    def test_identity(self, sample_1d_array):
        np.testing.assert_array_equal(identity_activation(sample_1d_array), sample_1d_array)

    def test_clamped(self, sample_1d_array):
        np.testing.assert_array_equal(clamped_activation(sample_1d_array),
                                      np.array([-1.0, -1.0, 0.0, 1.0, 1.0]))

    def test_relu(self, sample_1d_array):
        np.testing.assert_array_equal(relu_activation(sample_1d_array),
                                      np.array([0.0, 0.0, 0.0, 1.0, 2.0]))

    def test_tanh(self, sample_1d_array):
        np.testing.assert_allclose(tanh_activation(sample_1d_array), np.tanh(sample_1d_array))

    def test_scalar_input(self):
        """Test that functions accept the plain floats a network feeds them."""
        for func in activations.values():
            assert np.isscalar(func(0.3)) or np.ndim(func(0.3)) == 0
