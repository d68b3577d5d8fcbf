# src/slearning/api.py
from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

from slearning.models.ols import OlsRegressor
from slearning.models.ridge import RidgeRegressor

__all__ = ["OlsRegressor", "RidgeRegressor", "__version__"]

try:
    __version__ = version("slearning")
except PackageNotFoundError:  # editable/local
    __version__ = "0.0.0"
