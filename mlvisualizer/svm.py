"""
Linear Support Vector Machine
=============================

A linear SVM trained with stochastic sub-gradient descent on the hinge loss:

    L = (1/n) sum_i max(0, 1 - y_i (w.x_i + b)) + regularization

Labels are stored as {0, 1} and mapped to {-1, +1} for training.

Per sample, with y in {-1, +1}:
    inside the margin (hinge > 0):  w += lr * (C * y * x - w / n),  b += lr * C * y
    outside the margin:             w += lr * (-w / n)

The -w/n term is the L2 regularization spread evenly over the n samples of
an epoch.
"""

import numpy as np

from .utils import EpochMetrics, accuracy_score, get_rng, shuffled


class SVM:
    """
    Linear SVM for binary classification.

    Args:
        learning_rate: SGD step size (default: 0.001)
        C: Weight of the hinge term against regularization (default: 1.0)
        rng: Seed or np.random.Generator for weight init and shuffling

    The weight vector is created on first use, sized to the first input seen
    by predict() or train_epoch(), with values in [0, 0.01). Its length never
    changes afterwards.
    """

    trainable = True

    def __init__(self, learning_rate=0.001, C=1.0, rng=None):
        self.learning_rate = learning_rate
        self.C = C
        self.rng = get_rng(rng)

        self.weights = None
        self.bias = 0.0

    def _initialize_weights(self, input_size):
        if self.weights is None:
            self.weights = self.rng.random(input_size) * 0.01

    def decision_function(self, inputs):
        """Signed score w.x + b."""
        inputs = np.asarray(inputs, dtype=np.float64)
        self._initialize_weights(len(inputs))
        return float(inputs @ self.weights + self.bias)

    def predict(self, inputs):
        """Return 1 if w.x + b >= 0, else 0."""
        return 1 if self.decision_function(inputs) >= 0 else 0

    def train_epoch(self, data):
        """
        One pass of sub-gradient descent over `data` in a fresh random order.

        Args:
            data: Sequence of DataPoint (not reordered)

        Returns:
            EpochMetrics(average_loss, accuracy) where loss is the mean hinge
            loss seen during the pass and accuracy is recomputed over the
            whole dataset once the pass is done.
        """
        n = len(data)
        if n == 0:
            return EpochMetrics(0.0, 0.0)

        self._initialize_weights(len(data[0].inputs))

        total_loss = 0.0

        for point in shuffled(data, self.rng):
            inputs = np.asarray(point.inputs, dtype=np.float64)
            true_label = 1 if point.label == 1 else -1

            decision = float(inputs @ self.weights + self.bias)

            loss = max(0.0, 1 - true_label * decision)
            total_loss += loss

            if loss > 0:
                # Misclassified or inside the margin
                self.weights += self.learning_rate * (self.C * true_label * inputs - self.weights / n)
                self.bias += self.learning_rate * self.C * true_label
            else:
                # Regularization only
                self.weights += self.learning_rate * (-self.weights / n)

        # Accuracy of the weights the epoch ends with, not a running count
        return EpochMetrics(total_loss / n, self.get_accuracy(data))

    def get_accuracy(self, data):
        """Fraction of `data` predicted correctly, 0.0 when empty."""
        return accuracy_score(self.predict, data)

    def __repr__(self):
        return f"SVM(learning_rate={self.learning_rate}, C={self.C})"
