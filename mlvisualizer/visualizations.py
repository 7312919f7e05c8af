"""
Visualization Utilities
=======================

This module provides functions for visualizing:
- Training progress (loss/accuracy curves)
- Decision boundaries over the 2D input plane
- Network state (activations and weights)
"""

import numpy as np
import matplotlib.pyplot as plt

from .utils import decision_boundary_grid, to_arrays


def plot_training_history(history, figsize=(14, 5), save_path=None):
    """
    Plot training history (loss and accuracy curves).

    Args:
        history: TrainingHistory
        figsize: Figure size
        save_path: Path to save figure
    """
    fig, axes = plt.subplots(1, 2, figsize=figsize)

    for ax, series, label, color in ((axes[0], history.loss, 'Loss', 'r-'),
                                     (axes[1], history.accuracy, 'Accuracy', 'b-')):
        if series:
            epochs, values = zip(*series)
            ax.plot(epochs, values, color, label=f'Training {label}', linewidth=2)
        ax.set_xlabel('Epoch', fontsize=12)
        ax.set_ylabel(label, fontsize=12)
        ax.set_title(f'Training {label}', fontsize=14)
        ax.grid(True, alpha=0.3)

    axes[1].set_ylim(0, 1.05)

    plt.tight_layout()

    if save_path:
        plt.savefig(save_path, dpi=150, bbox_inches='tight')
        print(f"Training history plot saved to {save_path}")

    return fig


def plot_decision_boundary(predict, data, resolution=25, figsize=(7, 7), ax=None, save_path=None):
    """
    Shade the input plane by model score and draw the data on top.

    Args:
        predict: Callable mapping an input vector to a score in [0, 1] or a label
        data: Sequence of DataPoint
        resolution: Grid cells per axis
        figsize: Figure size when `ax` is None
        ax: Existing axes to draw into
        save_path: Path to save figure
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)
    else:
        fig = ax.figure

    xs, ys, scores = decision_boundary_grid(predict, data, resolution)

    # Blue (label 0) to yellow (label 1)
    ax.pcolormesh(xs, ys, scores, cmap='viridis', vmin=0, vmax=1, alpha=0.4, shading='nearest')

    if len(data) > 0:
        X, y = to_arrays(data)
        colors = np.where(y == 1, '#facc15', '#3b82f6')
        ax.scatter(X[:, 0], X[:, 1], c=colors, s=20, edgecolors='white', linewidths=0.7)

    ax.set_title('Output & Decision Boundary', fontsize=14)
    ax.set_aspect('equal')

    if save_path:
        plt.savefig(save_path, dpi=150, bbox_inches='tight')
        print(f"Decision boundary plot saved to {save_path}")

    return fig


def plot_network_state(state, input_size=2, figsize=(10, 6), save_path=None):
    """
    Draw the network as neurons and connections.

    Neurons are colored by their latest activation. Connections are drawn
    blue for positive and red for negative weights, thicker for larger
    magnitudes.

    Args:
        state: List of LayerState from NeuralNetwork.get_state()
        input_size: Number of input nodes to draw
        figsize: Figure size
        save_path: Path to save figure
    """
    fig, ax = plt.subplots(figsize=figsize)

    sizes = [input_size] + [len(layer.biases) for layer in state]
    positions = []
    for column, size in enumerate(sizes):
        offsets = np.arange(size) - (size - 1) / 2
        positions.append([(column, -offset) for offset in offsets])

    # Connections
    for i, layer in enumerate(state):
        max_weight = max(np.abs(layer.weights).max(), 1e-8)
        for j, (x1, y1) in enumerate(positions[i + 1]):
            for k, (x0, y0) in enumerate(positions[i]):
                weight = layer.weights[j, k]
                ax.plot([x0, x1], [y0, y1],
                        color='#3b82f6' if weight >= 0 else '#ef4444',
                        linewidth=0.5 + 2.5 * abs(weight) / max_weight,
                        alpha=0.6, zorder=1)

    # Neurons
    for column, nodes in enumerate(positions):
        if column == 0:
            activations = np.zeros(len(nodes))
        else:
            activations = state[column - 1].activations
        xs, ys = zip(*nodes)
        ax.scatter(xs, ys, c=activations, cmap='viridis', vmin=0, vmax=1,
                   s=400, edgecolors='white', zorder=2)

    ax.set_xticks(range(len(sizes)))
    ax.set_xticklabels(['Input'] + [f'Layer {i + 1}' for i in range(len(state))])
    ax.set_yticks([])
    ax.set_title('Network State', fontsize=14)

    plt.tight_layout()

    if save_path:
        plt.savefig(save_path, dpi=150, bbox_inches='tight')
        print(f"Network plot saved to {save_path}")

    return fig
