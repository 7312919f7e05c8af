"""
ML Visualizer Core
==================

Trainable models behind an educational visualizer for binary classification
of 2D points, implemented with NumPy. This library covers:
- A feed-forward neural network with online backpropagation
- K-Nearest Neighbors
- A linear SVM trained by sub-gradient descent on the hinge loss
- Synthetic datasets (spiral, circle, XOR, clusters)
- A training session that drives epochs and records history
- Glue for an AI chat assistant that explains results and makes datasets
"""

from .activations import ReLU, Sigmoid, Tanh, get_activation
from .layers import Layer, LayerDefinition, LayerTrace
from .neural_network import NeuralNetwork, LayerState, build_network
from .knn import KNN
from .svm import SVM
from .models import ALGORITHMS, create_model
from .datasets import DATASETS, DataPoint, generate_data, points_from_arrays
from .trainer import TrainingHistory, TrainingSession
from .assistant import Assistant, ChatMessage
from .utils import EpochMetrics, decision_boundary_grid, get_rng

__version__ = "1.0.0"
__all__ = [
    # Activations
    'ReLU', 'Sigmoid', 'Tanh', 'get_activation',
    # Layers
    'Layer', 'LayerDefinition', 'LayerTrace',
    # Models
    'NeuralNetwork', 'LayerState', 'build_network', 'KNN', 'SVM',
    'ALGORITHMS', 'create_model',
    # Data
    'DATASETS', 'DataPoint', 'generate_data', 'points_from_arrays',
    # Training
    'TrainingHistory', 'TrainingSession', 'EpochMetrics',
    # Assistant
    'Assistant', 'ChatMessage',
    # Utilities
    'decision_boundary_grid', 'get_rng',
]
