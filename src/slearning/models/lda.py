# src/slearning/models/lda.py
from __future__ import annotations

from typing import Any, Optional

import torch

from slearning.exceptions import ShapeError, UntrainedModelError
from slearning.field import DTypeLike, resolve_dtype
from slearning.linalg import matvec
from slearning.models.base import SupervisedModel
from slearning.typing import as_design_matrix, as_target, as_torch
from slearning.validation import check_prediction_inputs, check_training_data


class LinearDiscriminantAnalysis(SupervisedModel):
    """
    Linear discriminant analysis (common class covariance). Placeholder.

    `train` only validates its inputs; no discriminant is estimated.
    Coefficients can be assigned directly, after which `predict` returns
    inputs @ coefficients. Without coefficients `predict` raises
    UntrainedModelError.
    """

    def __init__(self, *, dtype: DTypeLike = None) -> None:
        self._dtype = resolve_dtype(dtype)
        self._coefficients: Optional[torch.Tensor] = None

    @property
    def dtype(self) -> torch.dtype:
        return self._dtype

    @property
    def is_trained(self) -> bool:
        return self._coefficients is not None

    @property
    def coefficients(self) -> Optional[torch.Tensor]:
        return None if self._coefficients is None else self._coefficients.clone()

    @coefficients.setter
    def coefficients(self, value: Any) -> None:
        if value is None:
            self._coefficients = None
            return
        beta = as_torch(value, dtype=self._dtype)
        if beta.ndim != 1:
            raise ShapeError(f"coefficients must be (k,). Got {tuple(beta.shape)}")
        self._coefficients = beta.clone()

    def train(self, inputs: Any, outputs: Any) -> "LinearDiscriminantAnalysis":
        X, _ = as_design_matrix(inputs, dtype=self._dtype)
        y = as_target(outputs, dtype=self._dtype)
        check_training_data(X, y)
        return self

    def predict(self, inputs: Any) -> torch.Tensor:
        if self._coefficients is None:
            raise UntrainedModelError()
        X, _ = as_design_matrix(inputs, dtype=self._dtype)
        check_prediction_inputs(X, int(self._coefficients.shape[0]))
        return matvec(X, self._coefficients)
