"""
Configuration Defaults and Limits
=================================

Defaults the visualizer starts with, and the limits user input is clamped
to before it reaches the models. The models themselves trust what they are
given.
"""

from .layers import LayerDefinition


DEFAULT_LEARNING_RATE = 0.03
MIN_LEARNING_RATE = 0.0001
MAX_LEARNING_RATE = 1.0

ACTIVATION_FUNCTIONS = ('relu', 'sigmoid', 'tanh')

MAX_LAYERS = 5
MIN_NEURONS = 1
MAX_NEURONS = 10

DEFAULT_HIDDEN_LAYERS = (
    LayerDefinition(4, 'relu'),
    LayerDefinition(2, 'relu'),
)
DEFAULT_K = 3
MIN_K = 1
MAX_K = 15

DEFAULT_SVM_C = 1.0
MIN_SVM_C = 0.1
MAX_SVM_C = 10.0

DEFAULT_SVM_LEARNING_RATE = 0.001
MIN_SVM_LEARNING_RATE = 0.0001
MAX_SVM_LEARNING_RATE = 0.1


def clamp(value, low, high):
    return max(low, min(high, value))


def clamp_neurons(neurons):
    """Neuron count within [MIN_NEURONS, MAX_NEURONS]."""
    return clamp(int(neurons), MIN_NEURONS, MAX_NEURONS)


def clamp_learning_rate(learning_rate):
    """Learning rate within [MIN_LEARNING_RATE, MAX_LEARNING_RATE]."""
    return clamp(float(learning_rate), MIN_LEARNING_RATE, MAX_LEARNING_RATE)


def clamp_k(k):
    """Neighbor count within [MIN_K, MAX_K]."""
    return clamp(int(k), MIN_K, MAX_K)


def clamp_svm_c(svm_c):
    """SVM regularization within [MIN_SVM_C, MAX_SVM_C]."""
    return clamp(float(svm_c), MIN_SVM_C, MAX_SVM_C)


def clamp_svm_learning_rate(learning_rate):
    """SVM learning rate within [MIN_SVM_LEARNING_RATE, MAX_SVM_LEARNING_RATE]."""
    return clamp(float(learning_rate), MIN_SVM_LEARNING_RATE, MAX_SVM_LEARNING_RATE)


def clamp_layers(layers):
    """
    Sanitize hidden layer definitions.

    Keeps at most MAX_LAYERS layers and clamps every neuron count.
    Activation names must be one of ACTIVATION_FUNCTIONS.

    Raises:
        ValueError: For an unknown activation name
    """
    clamped = []
    for neurons, activation in list(layers)[:MAX_LAYERS]:
        if activation not in ACTIVATION_FUNCTIONS:
            available = ', '.join(ACTIVATION_FUNCTIONS)
            raise ValueError(f"Unknown activation '{activation}'. Available: {available}")
        clamped.append(LayerDefinition(clamp_neurons(neurons), activation))
    return clamped


def default_hyperparameters():
    """Fresh copy of the hyperparameters every session starts with."""
    return {
        'layers': list(DEFAULT_HIDDEN_LAYERS),
        'learning_rate': DEFAULT_LEARNING_RATE,
        'k': DEFAULT_K,
        'svm_c': DEFAULT_SVM_C,
        'svm_learning_rate': DEFAULT_SVM_LEARNING_RATE,
    }
