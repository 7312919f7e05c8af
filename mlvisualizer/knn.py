"""
K-Nearest Neighbors Classifier
==============================

There is nothing to learn: the model IS the training data.

At prediction time:
    1. Compute the Euclidean distance from the query to every stored point
    2. Take the k closest
    3. Return the majority label among them

Prediction is O(n) in the dataset size, which is fine for the few hundred
points the visualizer works with.
"""

from collections import Counter

import numpy as np

from .utils import accuracy_score, to_arrays


class KNN:
    """
    K-Nearest Neighbors classifier.

    Args:
        k: Number of neighbors that vote, clamped to at least 1

    Ties in the vote go to the label seen first among the nearest
    neighbors. Treat that order as unspecified.
    """

    trainable = False

    def __init__(self, k=3):
        self.k = max(1, int(k))
        self.data = []
        self._X, self._y = to_arrays(self.data)

    def fit(self, data):
        """Store a reference to the dataset and its array form."""
        self.data = data
        self._X, self._y = to_arrays(data)
        return self

    def predict(self, inputs):
        """
        Predict the label of one input vector.

        Returns:
            Majority label among the k nearest stored points, 0 if nothing
            has been stored
        """
        if len(self.data) == 0:
            return 0

        distances = np.sqrt(np.sum((self._X - np.asarray(inputs, dtype=np.float64)) ** 2, axis=1))

        # Stable sort keeps dataset order among equal distances
        k_indices = np.argsort(distances, kind='stable')[:self.k]
        votes = Counter(int(label) for label in self._y[k_indices])

        return votes.most_common(1)[0][0]

    def get_accuracy(self, data):
        """Fraction of `data` predicted correctly, 0.0 when empty."""
        return accuracy_score(self.predict, data)

    def __repr__(self):
        return f"KNN(k={self.k}, n_points={len(self.data)})"
