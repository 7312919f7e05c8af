"""
Utility Functions
=================

Helper functions for:
- Random number sources
- Shuffling datasets
- Converting between DataPoint lists and arrays
- Metrics
- Decision-boundary grids for visualization
"""

from collections import namedtuple

import numpy as np


EpochMetrics = namedtuple('EpochMetrics', ['average_loss', 'accuracy'])
EpochMetrics.__doc__ = "Average loss and accuracy of one training epoch."


def get_rng(random_state=None):
    """
    Turn a seed, a Generator or None into a numpy Generator.

    Every model and dataset generator draws its randomness from a Generator
    passed in through here, so a fixed seed reproduces a whole run.

    Args:
        random_state: None (fresh entropy), int seed, or np.random.Generator

    Returns:
        np.random.Generator
    """
    if isinstance(random_state, np.random.Generator):
        return random_state
    return np.random.default_rng(random_state)


def shuffled(data, rng):
    """
    Return the points of `data` in a new random order.

    The caller's sequence is left untouched.
    """
    indices = rng.permutation(len(data))
    return [data[i] for i in indices]


def to_arrays(data):
    """
    Convert a sequence of DataPoints to arrays.

    Args:
        data: Sequence of DataPoint

    Returns:
        X: Inputs, shape (N, D)
        y: Labels, shape (N,)
    """
    if len(data) == 0:
        return np.zeros((0, 0)), np.zeros(0, dtype=int)

    X = np.array([point.inputs for point in data], dtype=np.float64)
    y = np.array([point.label for point in data], dtype=int)
    return X, y


def accuracy_score(predict, data):
    """
    Fraction of `data` for which `predict(inputs)` returns the label.

    Args:
        predict: Callable mapping an input vector to a label
        data: Sequence of DataPoint

    Returns:
        Accuracy as float, 0.0 for an empty dataset
    """
    if len(data) == 0:
        return 0.0

    correct = sum(1 for point in data if predict(point.inputs) == point.label)
    return correct / len(data)


def data_bounds(data, padding=0.5):
    """
    Padded bounding box of the first two input coordinates.

    Returns:
        (min_x, max_x, min_y, max_y); (-2, 2, -2, 2) for an empty dataset
    """
    if len(data) == 0:
        return -2.0, 2.0, -2.0, 2.0

    X, _ = to_arrays(data)
    min_x, min_y = X[:, 0].min(), X[:, 1].min()
    max_x, max_y = X[:, 0].max(), X[:, 1].max()
    return min_x - padding, max_x + padding, min_y - padding, max_y + padding


def decision_boundary_grid(predict, data, resolution=25, padding=0.5):
    """
    Evaluate a model's score on a regular grid covering the data.

    Args:
        predict: Callable mapping an input vector to a score or label
        data: Sequence of DataPoint, used only for the grid bounds
        resolution: Number of cells along each axis
        padding: Margin added around the data bounds

    Returns:
        xs: Grid x coordinates, shape (resolution,)
        ys: Grid y coordinates, shape (resolution,)
        scores: Model output, shape (resolution, resolution), indexed [y, x]
    """
    min_x, max_x, min_y, max_y = data_bounds(data, padding)

    step_x = (max_x - min_x) / resolution
    step_y = (max_y - min_y) / resolution
    xs = min_x + np.arange(resolution) * step_x
    ys = min_y + np.arange(resolution) * step_y

    scores = np.zeros((resolution, resolution))
    for i, x in enumerate(xs):
        for j, y in enumerate(ys):
            scores[j, i] = predict(np.array([x, y]))

    return xs, ys, scores


def count_parameters(layers):
    """Total number of weights and biases across layers."""
    return sum(layer.weights.size + layer.biases.size for layer in layers)
