"""
Activation Functions
====================

Non-linear activation functions applied at every neuron of the network.

Each activation implements:
- forward(x): the transform applied to the weighted sum
- derivative(y): the slope expressed in terms of the *output* y = f(x)

Backpropagation in this library only keeps each layer's outputs, so the
derivatives are written as functions of the output rather than of the raw
pre-activation. All three activations used here allow that:

    relu:    f'(x) = 1 if y > 0 else 0
    sigmoid: f'(x) = y * (1 - y)
    tanh:    f'(x) = 1 - y^2
"""

import numpy as np


class Activation:
    """Base class for all activation functions."""

    name = None

    def forward(self, x):
        """Apply activation function."""
        raise NotImplementedError

    def derivative(self, y):
        """Derivative of the activation, given its output y."""
        raise NotImplementedError

    def __call__(self, x):
        return self.forward(x)

    def __repr__(self):
        return f"{self.__class__.__name__}()"


class ReLU(Activation):
    """
    Rectified Linear Unit: f(x) = max(0, x)

    Derivative from output:
        f'(y) = 1 if y > 0 else 0
    """

    name = 'relu'

    def forward(self, x):
        return np.maximum(0, x)

    def derivative(self, y):
        return (np.asarray(y) > 0).astype(np.float64)


class Sigmoid(Activation):
    """
    Sigmoid: f(x) = 1 / (1 + exp(-x))

    Squashes output to (0, 1), which is why the output neuron of the
    network uses it: the score reads as the probability of label 1.

    Derivative from output:
        f'(y) = y * (1 - y)
    """

    name = 'sigmoid'

    def forward(self, x):
        return 1.0 / (1.0 + np.exp(-np.asarray(x, dtype=np.float64)))

    def derivative(self, y):
        y = np.asarray(y, dtype=np.float64)
        return y * (1 - y)


class Tanh(Activation):
    """
    Hyperbolic Tangent: f(x) = tanh(x)

    Output range: (-1, 1), zero-centered.

    Derivative from output:
        f'(y) = 1 - y^2
    """

    name = 'tanh'

    def forward(self, x):
        return np.tanh(x)

    def derivative(self, y):
        y = np.asarray(y, dtype=np.float64)
        return 1 - y ** 2


# ====================================
# Activation Registry
# ====================================

ACTIVATIONS = {
    'relu': ReLU,
    'sigmoid': Sigmoid,
    'tanh': Tanh,
}


def get_activation(name):
    """
    Get activation function by name.

    Args:
        name: String name ('relu', 'sigmoid', 'tanh') or Activation instance

    Returns:
        Activation instance

    Example:
        >>> act = get_activation('relu')
        >>> act(np.array([-1, 0, 1]))
        array([0, 0, 1])
    """
    if isinstance(name, Activation):
        return name

    name_lower = str(name).lower().replace('-', '_')
    if name_lower not in ACTIVATIONS:
        available = ', '.join(ACTIVATIONS.keys())
        raise ValueError(f"Unknown activation '{name}'. Available: {available}")

    return ACTIVATIONS[name_lower]()
