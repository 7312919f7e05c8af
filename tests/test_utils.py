"""
Tests for Utility Functions
===========================
"""

import numpy as np
import pytest
import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from mlvisualizer.datasets import DataPoint
from mlvisualizer.utils import (accuracy_score, data_bounds, decision_boundary_grid,
                                get_rng, shuffled)


class TestRng:
    """Tests for get_rng."""

    def test_seed(self):
        assert get_rng(3).random() == get_rng(3).random()

    def test_generator_passthrough(self):
        rng = np.random.default_rng(0)
        assert get_rng(rng) is rng


class TestShuffled:
    """Tests for shuffled."""

    def test_permutation_of_input(self):
        data = list(range(20))
        result = shuffled(data, np.random.default_rng(0))

        assert sorted(result) == data
        assert data == list(range(20))


class TestAccuracy:
    """Tests for accuracy_score."""

    def test_fraction(self):
        data = [DataPoint((1.0, 0.0), 1), DataPoint((-1.0, 0.0), 0), DataPoint((2.0, 0.0), 0)]
        predict = lambda inputs: 1 if inputs[0] > 0 else 0

        assert accuracy_score(predict, data) == pytest.approx(2 / 3)

    def test_empty(self):
        assert accuracy_score(lambda inputs: 0, []) == 0.0


class TestDecisionBoundaryGrid:
    """Tests for the decision-boundary grid."""

    def test_bounds_padding(self):
        data = [DataPoint((0.0, -1.0), 0), DataPoint((1.0, 1.0), 1)]
        assert data_bounds(data, padding=0.5) == (-0.5, 1.5, -1.5, 1.5)

    def test_empty_bounds(self):
        assert data_bounds([]) == (-2.0, 2.0, -2.0, 2.0)

    def test_grid_values(self):
        """Test the grid is indexed [y, x] and covers the bounds."""
        data = [DataPoint((-1.0, -1.0), 0), DataPoint((1.0, 1.0), 1)]
        xs, ys, scores = decision_boundary_grid(lambda p: 1 if p[0] > 0 else 0, data, resolution=10)

        assert xs.shape == ys.shape == (10,)
        assert scores.shape == (10, 10)
        assert xs[0] == pytest.approx(-1.5)
        np.testing.assert_array_equal(scores[0], (xs > 0).astype(float))
        np.testing.assert_array_equal(scores[:, 0], np.zeros(10))


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
