"""
Model Selection
===============

The visualizer offers three algorithms behind one capability: each model
has predict(inputs) and a `trainable` flag. Trainable models also have
train_epoch(data).

The algorithm is chosen by name from ALGORITHMS, never by inspecting the
type of a live model.
"""

from .knn import KNN
from .neural_network import build_network
from .svm import SVM


NEURAL_NETWORK = 'neuralNetwork'
KNN_ALGORITHM = 'knn'
SVM_ALGORITHM = 'svm'

ALGORITHMS = {
    NEURAL_NETWORK: 'Neural Network',
    KNN_ALGORITHM: 'K-Nearest Neighbors',
    SVM_ALGORITHM: 'Support Vector Machine',
}


def create_model(algorithm, data, hyperparameters, rng=None):
    """
    Build a fresh model for the current configuration.

    Args:
        algorithm: Key in ALGORITHMS
        data: Current dataset; sets the network input size and is stored by KNN
        hyperparameters: Dict with 'layers', 'learning_rate', 'k', 'svm_c',
            'svm_learning_rate' (see config.default_hyperparameters)
        rng: Seed or np.random.Generator

    Returns:
        NeuralNetwork, KNN or SVM
    """
    if algorithm == NEURAL_NETWORK:
        input_size = len(data[0].inputs) if len(data) > 0 else 2
        return build_network(input_size, hyperparameters['layers'],
                             hyperparameters['learning_rate'], rng=rng)

    if algorithm == KNN_ALGORITHM:
        return KNN(hyperparameters['k']).fit(data)

    if algorithm == SVM_ALGORITHM:
        return SVM(hyperparameters['svm_learning_rate'], hyperparameters['svm_c'], rng=rng)

    available = ', '.join(ALGORITHMS.keys())
    raise ValueError(f"Unknown algorithm '{algorithm}'. Available: {available}")
