"""
Training Session
================

The driving loop around the models, as the visualizer runs it:

- one model per configuration; changing the algorithm, the dataset or any
  hyperparameter builds a fresh model and clears the history
- step() runs exactly one training epoch and records it
- run() repeats step() with a progress bar

A session is used from a single thread. Stopping is coarse: simply stop
calling step().
"""

import numpy as np
from tqdm import tqdm

from . import config
from .datasets import DEFAULT_DATASET, generate_data, validate_points
from .models import ALGORITHMS, KNN_ALGORITHM, NEURAL_NETWORK, SVM_ALGORITHM, create_model
from .utils import get_rng


class TrainingHistory:
    """
    Per-epoch loss and accuracy, as lists of (epoch, value) pairs.

    Append-only: one entry in each list per completed epoch.
    """

    def __init__(self):
        self.loss = []
        self.accuracy = []

    def append(self, epoch, metrics):
        """Record the EpochMetrics of `epoch`."""
        self.loss.append((epoch, float(metrics.average_loss)))
        self.accuracy.append((epoch, float(metrics.accuracy)))

    def latest_accuracy(self):
        """Accuracy of the last recorded epoch, or None."""
        if not self.accuracy:
            return None
        return self.accuracy[-1][1]

    def to_dict(self):
        return {
            'loss': [{'epoch': epoch, 'value': value} for epoch, value in self.loss],
            'accuracy': [{'epoch': epoch, 'value': value} for epoch, value in self.accuracy],
        }

    def __len__(self):
        return len(self.loss)

    def __repr__(self):
        return f"TrainingHistory(epochs={len(self)})"


class TrainingSession:
    """
    Holds the current algorithm, dataset, hyperparameters and model.

    Example:
        >>> session = TrainingSession(algorithm='svm', dataset='gaussians', rng=0)
        >>> history = session.run(epochs=50, verbose=False)
        >>> print(f"Accuracy: {history.latest_accuracy():.2%}")

    Args:
        algorithm: Key in models.ALGORITHMS
        dataset: Key in datasets.DATASETS
        data: Explicit list of DataPoint, overrides `dataset` generation
        rng: Seed or np.random.Generator shared by data generation and models
        **hyperparameters: Overrides for config.default_hyperparameters()
    """

    def __init__(self, algorithm=NEURAL_NETWORK, dataset=DEFAULT_DATASET, data=None,
                 rng=None, **hyperparameters):
        self.rng = get_rng(rng)
        self.algorithm = self._check_algorithm(algorithm)
        self.dataset_name = dataset
        self.data = list(data) if data is not None else generate_data(dataset, rng=self.rng)

        self.hyperparameters = config.default_hyperparameters()
        self.hyperparameters.update(self._clamp(hyperparameters))

        self.model = None
        self.epoch = 0
        self.history = TrainingHistory()
        self.network_state = None
        self.knn_accuracy = None

        self.reset()

    @staticmethod
    def _check_algorithm(algorithm):
        if algorithm not in ALGORITHMS:
            available = ', '.join(ALGORITHMS.keys())
            raise ValueError(f"Unknown algorithm '{algorithm}'. Available: {available}")
        return algorithm

    @staticmethod
    def _clamp(hyperparameters):
        """Apply the configuration limits before anything reaches a model."""
        unknown = set(hyperparameters) - set(config.default_hyperparameters())
        if unknown:
            raise ValueError(f"Unknown hyperparameters: {', '.join(sorted(unknown))}")

        clamped = dict(hyperparameters)
        if 'layers' in clamped:
            clamped['layers'] = config.clamp_layers(clamped['layers'])
        if 'learning_rate' in clamped:
            clamped['learning_rate'] = config.clamp_learning_rate(clamped['learning_rate'])
        if 'k' in clamped:
            clamped['k'] = config.clamp_k(clamped['k'])
        if 'svm_c' in clamped:
            clamped['svm_c'] = config.clamp_svm_c(clamped['svm_c'])
        if 'svm_learning_rate' in clamped:
            clamped['svm_learning_rate'] = config.clamp_svm_learning_rate(clamped['svm_learning_rate'])
        return clamped

    def reset(self):
        """Discard the current model and build a fresh one."""
        self.epoch = 0
        self.history = TrainingHistory()
        self.model = create_model(self.algorithm, self.data, self.hyperparameters, rng=self.rng)

        if self.algorithm == NEURAL_NETWORK:
            self.network_state = self.model.get_state()
        else:
            self.network_state = None

        if self.algorithm == KNN_ALGORITHM:
            self.knn_accuracy = self.model.get_accuracy(self.data)
        else:
            self.knn_accuracy = None

        return self.model

    def set_algorithm(self, algorithm):
        self.algorithm = self._check_algorithm(algorithm)
        return self.reset()

    def set_dataset(self, name):
        """Generate a registered dataset and start over on it."""
        self.dataset_name = name
        self.data = generate_data(name, rng=self.rng)
        return self.reset()

    def replace_dataset(self, points, name):
        """
        Replace the whole dataset, then start over.

        Raises:
            ValueError: If `points` is malformed; the session is unchanged
        """
        data = validate_points(points)
        self.data = data
        self.dataset_name = name
        return self.reset()

    def update(self, **hyperparameters):
        """Change hyperparameters, then start over."""
        self.hyperparameters.update(self._clamp(hyperparameters))
        return self.reset()

    def step(self):
        """
        Run one training epoch.

        Returns:
            EpochMetrics, or None for a model that does not train (KNN)
        """
        if not self.model.trainable:
            return None

        metrics = self.model.train_epoch(self.data)
        self.epoch += 1
        self.history.append(self.epoch, metrics)

        if self.algorithm == NEURAL_NETWORK:
            self.network_state = self.model.get_state()

        return metrics

    def run(self, epochs, verbose=True):
        """
        Train for a number of epochs.

        Args:
            epochs: Number of calls to step()
            verbose: Show a progress bar and print a summary

        Returns:
            TrainingHistory
        """
        if not self.model.trainable:
            if verbose:
                print(f"{ALGORITHMS[self.algorithm]} has no training step "
                      f"- Acc: {self.knn_accuracy:.4f}")
            return self.history

        if verbose:
            pbar = tqdm(range(epochs), desc=f"{ALGORITHMS[self.algorithm]}")
        else:
            pbar = range(epochs)

        for _ in pbar:
            metrics = self.step()

            if verbose:
                pbar.set_postfix({
                    'loss': f'{metrics.average_loss:.4f}',
                    'acc': f'{metrics.accuracy:.4f}'
                })

        if verbose and len(self.history) > 0:
            _, loss = self.history.loss[-1]
            print(f"Epoch {self.epoch} - Loss: {loss:.4f} - Acc: {self.history.latest_accuracy():.4f}")

        return self.history

    def predict(self, inputs):
        """Score of the current model, for drawing the decision boundary."""
        return self.model.predict(np.asarray(inputs, dtype=np.float64))

    def current_accuracy(self):
        """Latest epoch accuracy, KNN's fitted accuracy, or 0."""
        latest = self.history.latest_accuracy()
        if latest is not None:
            return latest
        return self.knn_accuracy or 0.0

    def context(self):
        """
        Read-only view of the session for the chat assistant.

        Contains the algorithm, dataset name, epoch, latest accuracy, full
        history and the hyperparameters of the selected algorithm only.
        """
        context = {
            'algorithm': self.algorithm,
            'dataset_name': self.dataset_name,
            'epoch': self.epoch,
            'current_accuracy': self.current_accuracy(),
            'history': self.history.to_dict(),
        }

        if self.algorithm == NEURAL_NETWORK:
            context['layers'] = [
                {'neurons': neurons, 'activation': activation}
                for neurons, activation in self.hyperparameters['layers']
            ]
            context['learning_rate'] = self.hyperparameters['learning_rate']
        elif self.algorithm == KNN_ALGORITHM:
            context['k'] = self.hyperparameters['k']
        elif self.algorithm == SVM_ALGORITHM:
            context['svm_c'] = self.hyperparameters['svm_c']
            context['svm_learning_rate'] = self.hyperparameters['svm_learning_rate']

        return context

    def __repr__(self):
        return (f"TrainingSession(algorithm={self.algorithm!r}, dataset={self.dataset_name!r}, "
                f"epoch={self.epoch})")
