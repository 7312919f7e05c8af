"""
Gradient Checking Tests
=======================

Verify the online backpropagation update against numerical gradients.

One training step on a single sample (x, label) should change every
parameter by exactly

    delta = -learning_rate * dL/dparam,   L = 0.5 * (label - output)^2

because the backward pass uses the pre-update weights of later layers when
propagating the error. We compare:
    - Analytical update: parameters after train_epoch([sample]) minus before
    - Numerical gradient: centered finite differences of L
"""

import numpy as np
import pytest
import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from mlvisualizer.datasets import DataPoint
from mlvisualizer.neural_network import NeuralNetwork


def numerical_gradient(f, x, epsilon=1e-5):
    """
    Compute numerical gradient using centered finite differences.

    Args:
        f: Function of no arguments returning scalar loss, reading x in place
        x: Array perturbed in place
        epsilon: Small perturbation

    Returns:
        Numerical gradient, same shape as x
    """
    grad = np.zeros_like(x)

    it = np.nditer(x, flags=['multi_index'])
    while not it.finished:
        idx = it.multi_index

        x[idx] += epsilon
        loss_plus = f()

        x[idx] -= 2 * epsilon
        loss_minus = f()

        # Restore
        x[idx] += epsilon

        grad[idx] = (loss_plus - loss_minus) / (2 * epsilon)

        it.iternext()

    return grad


def squared_error(network, inputs, label):
    return lambda: 0.5 * (label - network.predict(inputs)) ** 2


def check_single_step(layer_definitions, inputs, label, learning_rate=0.1, seed=0):
    network = NeuralNetwork(len(inputs), layer_definitions, learning_rate, rng=seed)
    loss = squared_error(network, inputs, label)

    expected = []
    for layer in network.layers:
        expected.append((numerical_gradient(loss, layer.weights), numerical_gradient(loss, layer.biases)))

    before = [(layer.weights.copy(), layer.biases.copy()) for layer in network.layers]
    network.train_epoch([DataPoint(inputs, label)])

    for layer, (w_before, b_before), (w_grad, b_grad) in zip(network.layers, before, expected):
        np.testing.assert_allclose((layer.weights - w_before) / learning_rate, -w_grad, rtol=1e-5, atol=1e-8)
        np.testing.assert_allclose((layer.biases - b_before) / learning_rate, -b_grad, rtol=1e-5, atol=1e-8)


class TestOnlineUpdateGradients:
    """The per-sample update is a gradient step on the squared error."""

    def test_single_sigmoid_neuron(self):
        """Test logistic unit."""
        check_single_step([(1, 'sigmoid')], (0.4, -1.2), 1)

    def test_tanh_hidden_layer(self):
        """Test one tanh hidden layer."""
        check_single_step([(4, 'tanh'), (1, 'sigmoid')], (0.7, 0.2), 0)

    def test_deep_sigmoid_tanh(self):
        """Test two hidden layers; errors must flow through pre-update weights."""
        check_single_step([(3, 'sigmoid'), (5, 'tanh'), (1, 'sigmoid')], (-0.5, 0.9), 1, seed=3)

    def test_relu_hidden_layer(self):
        """Test ReLU away from its kink."""
        check_single_step([(6, 'relu'), (1, 'sigmoid')], (1.1, -0.3), 1, seed=5)


class TestErrorDirection:
    """A training step moves the output towards the label."""

    @pytest.mark.parametrize('label', [0, 1])
    def test_output_moves_towards_label(self, label):
        network = NeuralNetwork(2, [(4, 'tanh'), (1, 'sigmoid')], learning_rate=0.1, rng=11)
        inputs = (0.25, -0.75)

        before = network.predict(inputs)
        network.train_sample(inputs, label)
        after = network.predict(inputs)

        assert abs(label - after) < abs(label - before)


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
