"""Base interface for supervised models."""

from abc import ABC, abstractmethod
from typing import Any

import torch


class SupervisedModel(ABC):
    """
    Base class for models trained on inputs together with observed outputs.
    """

    @abstractmethod
    def train(self, inputs: Any, outputs: Any) -> "SupervisedModel":
        """
        Fit model parameters to observed data.

        Args:
            inputs: Design matrix of shape (n_samples, n_features).
            outputs: Target vector of shape (n_samples,).

        Returns:
            self: The trained model
        """
        pass

    @abstractmethod
    def predict(self, inputs: Any) -> torch.Tensor:
        """
        Predict outputs for new inputs.

        Args:
            inputs: Design matrix of shape (m_samples, n_features).

        Returns:
            predictions: Tensor of shape (m_samples,)
        """
        pass

    @property
    @abstractmethod
    def is_trained(self) -> bool:
        pass
