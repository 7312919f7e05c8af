"""
Tests for Activation Functions
==============================

Forward transforms, derivatives from outputs, and the registry.
"""

import numpy as np
import pytest
import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from mlvisualizer.activations import ReLU, Sigmoid, Tanh, Activation, get_activation


class TestForward:
    """Tests for forward transforms."""

    def test_relu(self):
        """Test ReLU zeroes negatives."""
        output = ReLU().forward(np.array([-2.0, 0.0, 3.0]))
        np.testing.assert_array_equal(output, [0.0, 0.0, 3.0])

    def test_sigmoid(self):
        """Test sigmoid values at known points."""
        output = Sigmoid().forward(np.array([0.0, 2.0]))
        np.testing.assert_allclose(output, [0.5, 1 / (1 + np.exp(-2.0))])

    def test_tanh(self):
        """Test tanh matches numpy."""
        x = np.linspace(-3, 3, 7)
        np.testing.assert_allclose(Tanh().forward(x), np.tanh(x))


class TestDerivativeFromOutput:
    """The derivative is a function of the output y = f(x)."""

    @pytest.mark.parametrize('activation', [Sigmoid(), Tanh()])
    def test_matches_numerical_slope(self, activation):
        """Test derivative(f(x)) against a centered difference of f."""
        x = np.linspace(-2, 2, 9)
        eps = 1e-6
        numerical = (activation.forward(x + eps) - activation.forward(x - eps)) / (2 * eps)
        analytical = activation.derivative(activation.forward(x))

        np.testing.assert_allclose(analytical, numerical, rtol=1e-6, atol=1e-9)

    def test_relu_derivative(self):
        """Test ReLU slope is 1 for positive outputs and 0 otherwise."""
        np.testing.assert_array_equal(ReLU().derivative(np.array([0.0, 0.5, 3.0])), [0.0, 1.0, 1.0])

    def test_sigmoid_derivative_formula(self):
        """Test y(1-y)."""
        assert Sigmoid().derivative(0.25) == pytest.approx(0.1875)

    def test_tanh_derivative_formula(self):
        """Test 1-y^2."""
        assert Tanh().derivative(0.5) == pytest.approx(0.75)


class TestRegistry:
    """Tests for get_activation."""

    @pytest.mark.parametrize('name, cls', [('relu', ReLU), ('sigmoid', Sigmoid), ('tanh', Tanh),
                                           ('ReLU', ReLU), ('TANH', Tanh)])
    def test_lookup(self, name, cls):
        """Test names resolve case-insensitively."""
        assert isinstance(get_activation(name), cls)

    def test_instance_passthrough(self):
        """Test instances are returned unchanged."""
        act = Tanh()
        assert get_activation(act) is act

    def test_unknown(self):
        """Test unknown names are rejected with the list of options."""
        with pytest.raises(ValueError, match="Available: relu, sigmoid, tanh"):
            get_activation('softplus')

    def test_base_class_is_abstract(self):
        """Test the base class has no transform."""
        with pytest.raises(NotImplementedError):
            Activation().forward(np.zeros(1))


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
