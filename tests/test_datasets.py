"""
Tests for Synthetic Datasets
============================
"""

import numpy as np
import pytest
import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from mlvisualizer.datasets import (DATASETS, DataPoint, display_name, generate_data,
                                   points_from_arrays, validate_points)
from mlvisualizer.utils import to_arrays


class TestGenerators:
    """Tests for the registered generators."""

    @pytest.mark.parametrize('name', sorted(DATASETS))
    def test_shape_and_labels(self, name):
        """Test every dataset is 2D, binary, and within [-2, 2] roughly."""
        data = generate_data(name, rng=0)
        X, y = to_arrays(data)

        assert X.shape == (200, 2)
        assert set(np.unique(y)) == {0, 1}
        assert np.all(np.abs(X) <= 2.1)

    @pytest.mark.parametrize('name', sorted(DATASETS))
    def test_seeded_is_reproducible(self, name):
        assert generate_data(name, rng=5) == generate_data(name, rng=5)

    def test_fresh_noise_per_call(self):
        """Test two draws from one generator differ."""
        rng = np.random.default_rng(0)
        assert generate_data('circle', rng=rng) != generate_data('circle', rng=rng)

    def test_unknown_name_falls_back_to_spiral(self):
        assert generate_data('moons', rng=1) == generate_data('spiral', rng=1)

    def test_xor_labels(self):
        """Test XOR labels follow the quadrant rule away from the axes."""
        for point in generate_data('xor', rng=0):
            x, y = point.inputs
            if abs(x) > 0.1 and abs(y) > 0.1:
                assert point.label == (1 if (x > 0) != (y > 0) else 0)

    def test_gaussians_are_separable(self):
        """Test the clusters lie on opposite sides of x + y = 0."""
        for point in generate_data('gaussians', rng=0):
            assert (sum(point.inputs) > 0) == (point.label == 1)

    def test_display_names(self):
        assert display_name('gaussians') == 'Clusters'
        assert display_name('custom shape') == 'custom shape'


class TestConversions:
    """Tests for array conversion helpers."""

    def test_round_trip(self):
        X = np.array([[0.5, -1.0], [1.5, 2.0]])
        y = np.array([1, 0])

        points = points_from_arrays(X, y)
        X2, y2 = to_arrays(points)

        assert points[0] == DataPoint((0.5, -1.0), 1)
        np.testing.assert_array_equal(X2, X)
        np.testing.assert_array_equal(y2, y)


class TestValidatePoints:
    """Tests for validating externally supplied points."""

    def test_accepts_mappings_and_pairs(self):
        points = validate_points([{'inputs': [0, 1.5], 'label': 1}, ((0.2, 0.3), 0)])
        assert points == [DataPoint((0.0, 1.5), 1), DataPoint((0.2, 0.3), 0)]

    @pytest.mark.parametrize('points', [
        [],
        'not a list',
        [{'inputs': [0, 1]}],
        [{'inputs': [0], 'label': 1}],
        [{'inputs': [0, 'a'], 'label': 1}],
        [{'inputs': [0, float('nan')], 'label': 1}],
        [{'inputs': [10 ** 400, 0], 'label': 1}],
        [{'inputs': [0, 1], 'label': 2}],
        [{'inputs': [0, 1], 'label': True}],
        [(1, 2, 3)],
    ])
    def test_rejects_malformed(self, points):
        with pytest.raises(ValueError):
            validate_points(points)


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
