# src/slearning/models/ols.py
from __future__ import annotations

from slearning.field import DTypeLike
from slearning.models.ridge import RidgeRegressor


class OlsRegressor(RidgeRegressor):
    """
    Ordinary Least Squares (OLS) linear regression.

    Fits a linear model by minimizing the squared residuals:
        minimize ||y - X beta||^2

    The solution is obtained via the normal equations:
        beta = (X'X)^{-1} X'y

    Implemented as RidgeRegressor with the penalty fixed at 0, so both share
    one solver and RidgeRegressor(0.0) gives exactly the same coefficients.
    Exactly collinear inputs raise SingularMatrixError; use a RidgeRegressor
    with a positive penalty for those.
    """

    model_name = "OLS"

    def __init__(self, *, fit_intercept: bool = True, dtype: DTypeLike = None) -> None:
        super().__init__(0.0, fit_intercept=fit_intercept, dtype=dtype)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(fit_intercept={self.fit_intercept}, dtype={self.dtype})"
