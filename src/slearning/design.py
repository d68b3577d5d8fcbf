# src/slearning/design.py
from __future__ import annotations

from typing import Optional

import torch

from slearning.linalg import insert_column

INTERCEPT_NAME = "const"


def augment(X: torch.Tensor, fit_intercept: bool) -> torch.Tensor:
    """Design matrix actually seen by the solver.

    - fit_intercept=False: X is returned unchanged, (n,k)
    - fit_intercept=True : a new (n,k+1) matrix with a column of ones at
      position 0; X itself is not modified

    Must be applied the same way at train and predict time so that
    coefficient j always multiplies the same column.
    """
    if not fit_intercept:
        return X
    return insert_column(X, 0, 1.0)


def augment_names(names: Optional[list[str]], fit_intercept: bool) -> Optional[list[str]]:
    if names is None or not fit_intercept:
        return names
    return [INTERCEPT_NAME, *names]
