"""
Synthetic 2D Datasets
=====================

Labeled point clouds for binary classification, each with its own
difficulty for the three models:

- spiral: two interleaved arms, needs a deep non-linear boundary
- circle: a disc inside a ring, needs a closed boundary
- xor: opposite quadrants share a label, not linearly separable
- gaussians: two well separated clusters, linearly separable

Coordinates stay roughly within [-2, 2]. Every call draws fresh noise.
"""

import math
from collections import namedtuple

import numpy as np

from .utils import get_rng


DataPoint = namedtuple('DataPoint', ['inputs', 'label'])
DataPoint.__doc__ = "A labeled input vector; label is 0 or 1."


def generate_spiral_data(points_per_arm=100, noise=0.2, rng=None):
    """Two spiral arms half a turn apart, scaled down by 5."""
    rng = get_rng(rng)
    data = []

    for i in range(points_per_arm):
        r = i / points_per_arm * 5
        t = 1.75 * i / points_per_arm * 2 * np.pi

        for label, offset in ((0, 0.0), (1, np.pi)):
            x = r * np.sin(t + offset) + (rng.random() - 0.5) * noise
            y = r * np.cos(t + offset) + (rng.random() - 0.5) * noise
            data.append(DataPoint((x / 5, y / 5), label))

    return data


def generate_circle_data(num_points=200, noise=0.1, rng=None):
    """Points in a disc of radius 2; label 1 within 60% of the radius."""
    rng = get_rng(rng)
    radius = 2
    data = []

    for _ in range(num_points):
        r = rng.random() * radius
        angle = rng.random() * 2 * np.pi
        x = r * np.sin(angle) + (rng.random() - 0.5) * noise
        y = r * np.cos(angle) + (rng.random() - 0.5) * noise
        label = 1 if r < radius * 0.6 else 0
        data.append(DataPoint((x, y), label))

    return data


def generate_xor_data(num_points=200, noise=0.2, rng=None):
    """Uniform points in [-2, 2]^2; label 1 where x and y differ in sign. Halved."""
    rng = get_rng(rng)
    data = []

    for _ in range(num_points):
        x = rng.random() * 4 - 2
        y = rng.random() * 4 - 2
        label = 1 if (x > 0) != (y > 0) else 0
        noisy_x = x + (rng.random() - 0.5) * noise
        noisy_y = y + (rng.random() - 0.5) * noise
        data.append(DataPoint((noisy_x / 2, noisy_y / 2), label))

    return data


def generate_gaussians_data(num_points=200, noise=0.5, rng=None):
    """Clusters around (2, 2) with label 1 and (-2, -2) with label 0, scaled down by 3."""
    rng = get_rng(rng)
    centers = (((2, 2), 1), ((-2, -2), 0))
    data = []

    for _ in range(num_points // 2):
        for (cx, cy), label in centers:
            x = cx + (rng.random() - 0.5) * noise * 4
            y = cy + (rng.random() - 0.5) * noise * 4
            data.append(DataPoint((x / 3, y / 3), label))

    return data


# ====================================
# Dataset Registry
# ====================================

DATASETS = {
    'spiral': (generate_spiral_data, 'Spiral'),
    'circle': (generate_circle_data, 'Circle'),
    'xor': (generate_xor_data, 'XOR'),
    'gaussians': (generate_gaussians_data, 'Clusters'),
}

DEFAULT_DATASET = 'spiral'


def generate_data(name, rng=None):
    """
    Generate a dataset by registry key.

    Args:
        name: Key in DATASETS; unknown keys fall back to the spiral
        rng: Seed or np.random.Generator

    Returns:
        List of DataPoint
    """
    generator, _ = DATASETS.get(name, DATASETS[DEFAULT_DATASET])
    return generator(rng=rng)


def display_name(name):
    """Human readable name of a registered dataset, or the key itself."""
    if name in DATASETS:
        return DATASETS[name][1]
    return name


def points_from_arrays(X, y):
    """
    Build DataPoints from a feature matrix and a label vector.

    Args:
        X: Inputs, shape (N, D)
        y: Labels, shape (N,)

    Returns:
        List of DataPoint
    """
    X = np.asarray(X, dtype=np.float64)
    y = np.asarray(y).astype(int)
    return [DataPoint(tuple(float(v) for v in row), int(label)) for row, label in zip(X, y)]


def validate_points(points, input_size=2):
    """
    Check externally supplied points and normalize them to DataPoints.

    Accepts DataPoints, (inputs, label) pairs or mappings with 'inputs' and
    'label' keys.

    Args:
        points: Sequence of candidate points
        input_size: Required number of coordinates per point

    Returns:
        List of DataPoint

    Raises:
        ValueError: If the sequence is empty or any point is malformed
    """
    if not isinstance(points, (list, tuple)) or len(points) == 0:
        raise ValueError("Dataset must be a non-empty list of points")

    validated = []
    for i, point in enumerate(points):
        if isinstance(point, dict):
            if 'inputs' not in point or 'label' not in point:
                raise ValueError(f"Point {i} must have 'inputs' and 'label'")
            inputs, label = point['inputs'], point['label']
        else:
            try:
                inputs, label = point
            except (TypeError, ValueError):
                raise ValueError(f"Point {i} is not an (inputs, label) pair")

        if not isinstance(inputs, (list, tuple, np.ndarray)) or len(inputs) != input_size:
            raise ValueError(f"Point {i} must have {input_size} coordinates")

        coords = []
        for value in inputs:
            if isinstance(value, bool) or not isinstance(value, (int, float, np.number)):
                raise ValueError(f"Point {i} has a non-numeric coordinate: {value!r}")
            try:
                value = float(value)
            except (OverflowError, TypeError):
                raise ValueError(f"Point {i} has a coordinate out of float range")
            if not math.isfinite(value):
                raise ValueError(f"Point {i} has a non-finite coordinate: {value!r}")
            coords.append(value)

        if isinstance(label, bool) or label not in (0, 1):
            raise ValueError(f"Point {i} has label {label!r}, expected 0 or 1")

        validated.append(DataPoint(tuple(coords), int(label)))

    return validated
