# src/slearning/models/ridge.py
from __future__ import annotations

from typing import Any, Optional

import torch

from slearning.design import augment, augment_names
from slearning.exceptions import SLearningError, UnknownError, UntrainedModelError
from slearning.field import DTypeLike, resolve_dtype
from slearning.linalg import matvec
from slearning.models.base import SupervisedModel
from slearning.solver import solve_normal_equations
from slearning.typing import as_design_matrix, as_target
from slearning.validation import (
    check_design_columns,
    check_penalty,
    check_prediction_inputs,
    check_training_data,
)


class RidgeRegressor(SupervisedModel):
    """
    Ridge regression (L2-penalized least squares), solved in closed form.

    Minimizes ||y - X beta||^2 + penalty * ||beta_{1:}||^2 when fit_intercept
    is True (the intercept is not penalized), or ||y - X beta||^2 +
    penalty * ||beta||^2 otherwise, via the normal equations

        beta = (X'X + penalty * D)^{-1} X'y

    Configuration (penalty, fit_intercept, dtype) is fixed at construction.
    Only the coefficients change, and only when `train` succeeds: a failed
    `train` leaves a previously trained (or untrained) model as it was.

    Example:
        >>> model = RidgeRegressor(0.5, fit_intercept=False)
        >>> model.train([[1.0, 3.0], [2.0, 4.0]], [1.5, 3.5])
        >>> model.predict([[1.0, 3.0]])
    """

    model_name = "Ridge"

    def __init__(
        self,
        penalty: float = 1.0,
        *,
        fit_intercept: bool = True,
        dtype: DTypeLike = None,
    ) -> None:
        self._penalty = check_penalty(penalty)
        self._fit_intercept = bool(fit_intercept)
        self._dtype = resolve_dtype(dtype)

        self._coefficients: Optional[torch.Tensor] = None
        self._param_names: Optional[list[str]] = None

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(penalty={self._penalty}, "
            f"fit_intercept={self._fit_intercept}, dtype={self._dtype})"
        )

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------
    @property
    def penalty(self) -> float:
        return self._penalty

    @property
    def fit_intercept(self) -> bool:
        return self._fit_intercept

    @property
    def dtype(self) -> torch.dtype:
        return self._dtype

    # ------------------------------------------------------------------
    # Trained state
    # ------------------------------------------------------------------
    @property
    def is_trained(self) -> bool:
        return self._coefficients is not None

    @property
    def coefficients(self) -> Optional[torch.Tensor]:
        """(p,) coefficients of the augmented design, or None before training."""
        if self._coefficients is None:
            return None
        return self._coefficients.clone()

    @property
    def param_names(self) -> Optional[list[str]]:
        """Names of the coefficients when trained on a pandas.DataFrame."""
        return None if self._param_names is None else list(self._param_names)

    @property
    def intercept(self) -> Optional[float]:
        if self._coefficients is None:
            return None
        if not self._fit_intercept:
            return 0.0
        return float(self._coefficients[0])

    # ------------------------------------------------------------------
    # Train / predict
    # ------------------------------------------------------------------
    def train(self, inputs: Any, outputs: Any) -> "RidgeRegressor":
        """
        Fit coefficients on inputs (n,k) and outputs (n,).

        Raises InvalidDataError (zero rows, row mismatch, inf/nan, singular
        normal matrix). Stored coefficients are replaced only on success.
        """
        X, names = as_design_matrix(inputs, dtype=self._dtype)
        y = as_target(outputs, dtype=self._dtype)
        check_training_data(X, y)

        Xa = augment(X, self._fit_intercept)
        check_design_columns(Xa)

        try:
            beta = solve_normal_equations(
                Xa,
                y,
                penalty=self._penalty,
                fit_intercept=self._fit_intercept,
            )
        except SLearningError:
            raise
        except RuntimeError as e:
            raise UnknownError(f"{self.model_name} training failed: {e}") from e

        self._param_names = augment_names(names, self._fit_intercept)
        self._coefficients = beta
        return self

    def predict(self, inputs: Any) -> torch.Tensor:
        """Predictions (m,) for inputs (m,k), augmented exactly as in training."""
        if self._coefficients is None:
            raise UntrainedModelError()

        X, _ = as_design_matrix(inputs, dtype=self._dtype)
        Xa = augment(X, self._fit_intercept)
        check_prediction_inputs(Xa, int(self._coefficients.shape[0]))
        return matvec(Xa, self._coefficients)
