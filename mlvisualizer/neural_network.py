"""
Neural Network Main Class
=========================

A small feed-forward network for binary classification of 2D points:
- Layer stacking from LayerDefinitions
- Forward pass
- Online backpropagation (one weight update per sample)
- Training epoch with loss/accuracy tracking
- Read-only state snapshots for visualization

Architecture used by the visualizer:
    Input (2) -> [Hidden layers, relu/sigmoid/tanh] -> Dense(1) -> Sigmoid

Training minimizes the squared error between the sigmoid output and the
label. The output error `label - output` is fed straight into the output
layer's backward pass, so every update moves the score towards the label.
"""

import math
from collections import namedtuple

import numpy as np

from .layers import Layer, LayerDefinition
from .utils import EpochMetrics, count_parameters, get_rng, shuffled


LayerState = namedtuple('LayerState', ['activations', 'weights', 'biases'])
LayerState.__doc__ = "Snapshot of one layer: neuron activations, weight matrix and biases."


class NeuralNetwork:
    """
    Feed-forward neural network trained with per-sample SGD.

    Example:
        >>> from mlvisualizer.neural_network import NeuralNetwork
        >>> from mlvisualizer.datasets import generate_data
        >>> data = generate_data('gaussians', rng=0)
        >>> nn = NeuralNetwork(2, [(4, 'relu'), (1, 'sigmoid')], learning_rate=0.1, rng=0)
        >>> metrics = nn.train_epoch(data)
        >>> print(f"Loss: {metrics.average_loss:.4f} - Acc: {metrics.accuracy:.2%}")
    """

    trainable = True

    def __init__(self, input_size, layer_definitions, learning_rate, rng=None):
        """
        Initialize the network.

        Args:
            input_size: Dimensionality of the input vectors
            layer_definitions: Sequence of LayerDefinition or (neurons, activation)
                pairs, the last one being the output layer
            learning_rate: SGD step size
            rng: Seed or np.random.Generator for weight init and shuffling
        """
        self.input_size = input_size
        self.learning_rate = learning_rate
        self.rng = get_rng(rng)

        # Each layer's input size is the previous layer's neuron count
        self.layers = []
        current_input_size = input_size
        for definition in layer_definitions:
            definition = LayerDefinition(*definition)
            layer = Layer(current_input_size, definition.neurons, definition.activation, rng=self.rng)
            self.layers.append(layer)
            current_input_size = definition.neurons

    def predict(self, inputs):
        """
        Score a single input vector.

        Returns:
            The single output of the last layer (probability of label 1)
        """
        outputs = inputs
        for layer in self.layers:
            outputs = layer.forward(outputs)
        return float(outputs[0])

    def train_sample(self, inputs, label):
        """
        One forward/backward pass on a single sample.

        Args:
            inputs: Input vector
            label: Target label, 0 or 1

        Returns:
            Network output before the update
        """
        # Forward pass, keeping one trace per layer
        traces = []
        outputs = inputs
        for layer in self.layers:
            trace = layer.trace(outputs)
            layer.record(trace)
            traces.append(trace)
            outputs = trace.outputs
        output = float(outputs[0])

        # Backward pass, output layer first
        error_signal = np.array([label - output])
        for layer, trace in zip(reversed(self.layers), reversed(traces)):
            error_signal = layer.backward(trace, error_signal, self.learning_rate)

        return output

    def train_epoch(self, data):
        """
        Train on every point of `data` once, in a fresh random order.

        Args:
            data: Sequence of DataPoint (not reordered)

        Returns:
            EpochMetrics(average_loss, accuracy). Loss is the mean squared
            error, accuracy counts outputs that round (half up) to the
            label, measured before each sample's update. Both are nan for
            an empty dataset.
        """
        if len(data) == 0:
            return EpochMetrics(float('nan'), float('nan'))

        total_loss = 0.0
        correct = 0

        for point in shuffled(data, self.rng):
            output = self.train_sample(point.inputs, point.label)

            error = point.label - output
            total_loss += error * error
            if math.floor(output + 0.5) == point.label:
                correct += 1

        return EpochMetrics(total_loss / len(data), correct / len(data))

    def get_state(self):
        """
        Snapshot every layer for visualization.

        Returns:
            List of LayerState with copied arrays; later training does not
            change a snapshot already taken.
        """
        return [
            LayerState(
                activations=layer.last_outputs.copy(),
                weights=layer.weights.copy(),
                biases=layer.biases.copy(),
            )
            for layer in self.layers
        ]

    def summary(self):
        """Print model summary."""
        print("\n" + "=" * 60)
        print("Neural Network Summary")
        print("=" * 60)
        print(f"Input size: {self.input_size}")
        print(f"Learning rate: {self.learning_rate}")
        print("-" * 60)

        for i, layer in enumerate(self.layers):
            n_params = layer.weights.size + layer.biases.size
            print(f"{i:3d}. {str(layer):<35} Params: {n_params:,}")

        total_params = count_parameters(self.layers)
        print("-" * 60)
        print(f"Total trainable parameters: {total_params:,}")
        print("=" * 60 + "\n")

        return total_params

    def __repr__(self):
        sizes = ' -> '.join(str(layer.output_size) for layer in self.layers)
        return f"NeuralNetwork({self.input_size} -> {sizes}, lr={self.learning_rate})"


def build_network(input_size, hidden_layers, learning_rate, rng=None):
    """
    Build a network from hidden layer definitions.

    The output layer, one sigmoid neuron, is appended here so callers only
    configure the hidden part.

    Args:
        input_size: Dimensionality of the input vectors
        hidden_layers: Sequence of LayerDefinition or (neurons, activation);
            may be empty for a direct linear-to-sigmoid mapping
        learning_rate: SGD step size
        rng: Seed or np.random.Generator

    Returns:
        NeuralNetwork
    """
    definitions = [LayerDefinition(*d) for d in hidden_layers]
    definitions.append(LayerDefinition(1, 'sigmoid'))
    return NeuralNetwork(input_size, definitions, learning_rate, rng=rng)
