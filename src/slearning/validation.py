from __future__ import annotations

import math

import torch

from slearning.exceptions import InvalidDataError, InvalidParametersError, ShapeError
from slearning.field import as_scalar, is_negative


def check_penalty(penalty) -> float:
    """Return penalty as float, rejecting negative or non-finite values."""
    value = as_scalar(penalty, name="penalty")
    if math.isnan(value) or math.isinf(value):
        raise InvalidParametersError(f"penalty must be finite. Got {value}")
    if is_negative(value):
        raise InvalidParametersError(f"penalty must be non-negative. Got {value}")
    return value


def _check_finite(t: torch.Tensor, what: str) -> None:
    if not torch.isfinite(t).all():
        raise InvalidDataError(f"{what} contain inf/nan")


def check_training_data(X: torch.Tensor, y: torch.Tensor) -> None:
    """Pre-train checks on raw (not yet augmented) inputs X: (n,k) and outputs y: (n,)."""
    n_inputs = int(X.shape[0])
    n_outputs = int(y.shape[0])
    if n_inputs == 0:
        raise InvalidDataError("training data has no observations (0 input rows)")
    if n_inputs != n_outputs:
        raise ShapeError(
            f"number of input rows ({n_inputs}) does not match number of outputs ({n_outputs})"
        )
    _check_finite(X, "inputs")
    _check_finite(y, "outputs")


def check_design_columns(X: torch.Tensor) -> None:
    """An (augmented) design matrix needs at least one column to be solved for."""
    if int(X.shape[1]) == 0:
        raise ShapeError("design matrix has no columns; add variables or set fit_intercept=True")


def check_prediction_inputs(X: torch.Tensor, n_coefficients: int) -> None:
    """Pre-predict checks on the augmented inputs X: (m,p) against p trained coefficients."""
    n_given = int(X.shape[1])
    if n_given != n_coefficients:
        raise ShapeError(
            f"model was trained with {n_coefficients} variables but {n_given} were given"
        )
    _check_finite(X, "inputs")
