"""
PyTorch MLP Implementation
==========================

An nn.Module mirroring a NeuralNetwork layer for layer, with the same
parameters copied in. Autograd on it gives the exact gradients the
from-scratch backward pass is supposed to follow.

Architecture matches the NumPy implementation:
    Input -> [Linear -> relu/sigmoid/tanh] * n -> Linear(1) -> Sigmoid
"""

import numpy as np
import torch
import torch.nn as nn


TORCH_ACTIVATIONS = {
    'relu': nn.ReLU,
    'sigmoid': nn.Sigmoid,
    'tanh': nn.Tanh,
}


class MLPPyTorch(nn.Module):
    """
    PyTorch MLP with the same architecture as a NumPy NeuralNetwork.

    Example:
        >>> nn_model = NeuralNetwork(2, [(4, 'tanh'), (1, 'sigmoid')], 0.1, rng=0)
        >>> model = MLPPyTorch.from_network(nn_model)
        >>> output = model(torch.tensor([[0.5, -0.5]], dtype=torch.float64))
    """

    def __init__(self, input_size, layer_definitions):
        """
        Initialize PyTorch MLP.

        Args:
            input_size: Dimensionality of the input vectors
            layer_definitions: Sequence of (neurons, activation name)
        """
        super().__init__()

        modules = []
        current_input_size = input_size
        for neurons, activation in layer_definitions:
            modules.append(nn.Linear(current_input_size, neurons))
            modules.append(TORCH_ACTIVATIONS[activation]())
            current_input_size = neurons

        self.net = nn.Sequential(*modules).double()

    @property
    def linear_layers(self):
        return [module for module in self.net if isinstance(module, nn.Linear)]

    def forward(self, x):
        return self.net(x)

    @classmethod
    def from_network(cls, network):
        """Build the module and copy a NeuralNetwork's current parameters into it."""
        definitions = [(layer.output_size, layer.activation.name) for layer in network.layers]
        model = cls(network.input_size, definitions)

        with torch.no_grad():
            for linear, layer in zip(model.linear_layers, network.layers):
                # Both store weights as (out_features, in_features)
                linear.weight.copy_(torch.from_numpy(layer.weights))
                linear.bias.copy_(torch.from_numpy(layer.biases))

        return model


def squared_error_gradients(model, inputs, label):
    """
    Gradients of 0.5 * (label - output)^2 for every layer.

    Args:
        model: MLPPyTorch
        inputs: Input vector
        label: Target label

    Returns:
        List of (weight_grad, bias_grad) numpy arrays, input layer first
    """
    model.zero_grad()
    x = torch.tensor(np.asarray(inputs, dtype=np.float64)).unsqueeze(0)
    output = model(x)[0, 0]
    loss = 0.5 * (label - output) ** 2
    loss.backward()

    return [(linear.weight.grad.numpy().copy(), linear.bias.grad.numpy().copy())
            for linear in model.linear_layers]
