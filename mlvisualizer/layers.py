"""
Dense Layer - From Scratch Implementation
=========================================

A fully connected layer evaluated one sample at a time.

Each layer owns:
- weights: shape (neurons, input_size), row j feeds neuron j
- biases: shape (neurons,)
- an activation from the registry

Forward:  y = f(W @ x + b)

Backward (online SGD, applied immediately for every sample):
    gradient_j    = error_j * f'(y_j)
    prev_error_k  = sum_j W[j, k] * gradient_j      (pre-update weights)
    W[j, k]      += lr * gradient_j * x_k
    b_j          += lr * gradient_j

The error signal is `target - output`, so the update is an addition: it
moves the output towards the target.
"""

from collections import namedtuple

import numpy as np
from .activations import get_activation


LayerDefinition = namedtuple('LayerDefinition', ['neurons', 'activation'])
LayerDefinition.__doc__ = "Configuration of one layer: neuron count and activation name."

LayerTrace = namedtuple('LayerTrace', ['inputs', 'outputs'])
LayerTrace.__doc__ = "Inputs and outputs of one forward evaluation, consumed by backward()."


class Layer:
    """
    Fully connected layer with its own activation.

    Args:
        input_size: Number of inputs (previous layer's neurons)
        output_size: Number of neurons
        activation: Activation name or instance
        rng: np.random.Generator used for initialization

    Weights and biases are drawn independently and uniformly from [-1, 1).
    """

    def __init__(self, input_size, output_size, activation='relu', rng=None):
        if rng is None:
            rng = np.random.default_rng()

        self.input_size = input_size
        self.output_size = output_size
        self.activation = get_activation(activation)

        self.weights = rng.uniform(-1.0, 1.0, size=(output_size, input_size))
        self.biases = rng.uniform(-1.0, 1.0, size=output_size)

        # Most recent forward pass, for visualization
        self.last_inputs = np.zeros(input_size)
        self.last_outputs = np.zeros(output_size)

    def trace(self, inputs):
        """
        Evaluate the layer without touching any cached state.

        Args:
            inputs: Input vector, shape (input_size,)

        Returns:
            LayerTrace(inputs, outputs)
        """
        inputs = np.asarray(inputs, dtype=np.float64)
        outputs = self.activation.forward(self.weights @ inputs + self.biases)
        return LayerTrace(inputs, outputs)

    def forward(self, inputs):
        """Forward pass: y = f(W @ x + b). Caches inputs and outputs."""
        trace = self.trace(inputs)
        self.record(trace)
        return trace.outputs

    def record(self, trace):
        """Keep a trace as the most recent forward pass."""
        self.last_inputs = trace.inputs
        self.last_outputs = trace.outputs

    def backward(self, trace, error_signal, learning_rate):
        """
        Update weights and biases from one sample and propagate the error.

        Args:
            trace: LayerTrace from the forward evaluation of this sample
            error_signal: Error for each neuron, shape (output_size,)
            learning_rate: Step size

        Returns:
            Error signal for the previous layer, shape (input_size,)
        """
        gradient = np.asarray(error_signal, dtype=np.float64) * self.activation.derivative(trace.outputs)

        # Propagate through the weights before they change
        prev_error_signal = self.weights.T @ gradient

        self.weights += learning_rate * np.outer(gradient, trace.inputs)
        self.biases += learning_rate * gradient

        return prev_error_signal

    def __call__(self, inputs):
        return self.forward(inputs)

    def __repr__(self):
        return f"Layer({self.input_size}, {self.output_size}, {self.activation.name})"
