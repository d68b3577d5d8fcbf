from __future__ import annotations

from typing import Any, Optional, Sequence, Tuple, Union

import numpy as np
import torch

from slearning.exceptions import InvalidDataError, ShapeError

ArrayLike = Union[torch.Tensor, np.ndarray, Sequence[Any]]


def _is_pandas_df(x: Any) -> bool:
    try:
        import pandas as pd  # type: ignore
        return isinstance(x, pd.DataFrame)
    except ImportError:
        return False


def _is_pandas_series(x: Any) -> bool:
    try:
        import pandas as pd  # type: ignore
        return isinstance(x, pd.Series)
    except ImportError:
        return False


def as_torch(x: Any, *, dtype: torch.dtype) -> torch.Tensor:
    """
    Convert common array-likes to a CPU torch.Tensor of the given dtype.
    Supports torch, numpy, nested lists, and pandas (if installed).
    """
    if _is_pandas_df(x) or _is_pandas_series(x):
        x = x.to_numpy()  # type: ignore[attr-defined]

    try:
        t = x if isinstance(x, torch.Tensor) else torch.as_tensor(np.asarray(x))
    except (TypeError, ValueError, RuntimeError) as e:
        raise InvalidDataError(f"Cannot convert input of type {type(x).__name__} to a tensor: {e}") from e

    if t.is_complex() or t.dtype == torch.bool:
        raise InvalidDataError(f"Input must be real-valued. Got dtype {t.dtype}")
    return t.to(device="cpu", dtype=dtype)


def as_design_matrix(X: Any, *, dtype: torch.dtype) -> Tuple[torch.Tensor, Optional[list[str]]]:
    """
    Standardize inputs to X: (n,k).

    Also returns param_names when X is a pandas.DataFrame.
    """
    param_names: Optional[list[str]] = None

    if _is_pandas_df(X):
        param_names = [str(c) for c in X.columns]  # type: ignore[attr-defined]

    Xt = as_torch(X, dtype=dtype)
    if Xt.ndim != 2:
        raise ShapeError(f"X must be (n,k). Got {tuple(Xt.shape)}")
    return Xt, param_names


def as_target(y: Any, *, dtype: torch.dtype) -> torch.Tensor:
    """Standardize outputs to y: (n,). A single-column DataFrame is accepted."""
    if _is_pandas_df(y):
        y_np = y.to_numpy()  # type: ignore[attr-defined]
        if y_np.ndim != 2 or y_np.shape[1] != 1:
            raise ShapeError("If y is a DataFrame, it must have exactly one column.")
        y = y_np[:, 0]

    yt = as_torch(y, dtype=dtype)
    if yt.ndim != 1:
        raise ShapeError(f"y must be (n,). Got {tuple(yt.shape)}")
    return yt
