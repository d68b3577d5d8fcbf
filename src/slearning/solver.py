# src/slearning/solver.py
from __future__ import annotations

import torch

from slearning.exceptions import ShapeError, SingularMatrixError
from slearning.linalg import gram, matvec, shift_diagonal, try_inverse, xt_vec
from slearning.validation import check_penalty


def solve_normal_equations(
    X: torch.Tensor,
    y: torch.Tensor,
    *,
    penalty: float = 0.0,
    fit_intercept: bool = False,
) -> torch.Tensor:
    """Closed-form least squares / ridge estimate.

    Solves (X'X + penalty * D) beta = X'y where D is the identity, except that
    D[0,0] = 0 when fit_intercept is True: the intercept column (column 0 of
    the augmented design) is never penalized.

    Inputs
    - X: (n,p) augmented design matrix
    - y: (n,)
    - penalty: lambda >= 0; 0 gives ordinary least squares

    Returns
    - beta: (p,)

    Raises InvalidParametersError for a negative or non-finite penalty and
    SingularMatrixError when LU inversion of the (penalized) normal matrix
    hits a zero pivot. For penalty > 0 the normal matrix is positive definite
    in exact arithmetic, so in practice this is the collinear penalty == 0
    case, or a penalty that vanishes entirely when added at the working
    precision.
    """
    penalty = check_penalty(penalty)
    if X.ndim != 2 or y.ndim != 1 or X.shape[0] != y.shape[0]:
        raise ShapeError(f"Expected X (n,p) and y (n,). Got X {tuple(X.shape)}, y {tuple(y.shape)}")

    G = gram(X)  # (p,p)
    if penalty > 0:
        G = shift_diagonal(G, penalty, start=1 if fit_intercept else 0)

    G_inv = try_inverse(G)
    if G_inv is None:
        raise SingularMatrixError("the normal matrix is not invertible")

    return matvec(G_inv, xt_vec(X, y))
