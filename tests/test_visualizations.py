"""
Smoke Tests for Visualizations
==============================
"""

import pytest
import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

matplotlib = pytest.importorskip('matplotlib')
matplotlib.use('Agg')
import matplotlib.pyplot as plt

from mlvisualizer.trainer import TrainingSession
from mlvisualizer.visualizations import plot_decision_boundary, plot_network_state, plot_training_history


@pytest.fixture
def session():
    session = TrainingSession(algorithm='neuralNetwork', dataset='circle', rng=0)
    session.run(3, verbose=False)
    return session


class TestPlots:
    """Each plot returns a figure."""

    def test_training_history(self, session, tmp_path):
        path = tmp_path / 'history.png'
        fig = plot_training_history(session.history, save_path=path)

        assert len(fig.axes) == 2
        assert path.exists()
        plt.close(fig)

    def test_decision_boundary(self, session):
        fig = plot_decision_boundary(session.predict, session.data, resolution=10)
        assert fig.axes[0].get_title() == 'Output & Decision Boundary'
        plt.close(fig)

    def test_network_state(self, session):
        fig = plot_network_state(session.network_state)
        assert len(fig.axes[0].get_xticklabels()) == 4
        plt.close(fig)


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
