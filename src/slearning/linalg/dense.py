from __future__ import annotations

from typing import Optional
import warnings

import torch

from slearning.exceptions import ShapeError
from slearning.field import ill_conditioned_cond
from slearning.linalg.einsum import einsum


def _check_square(A: torch.Tensor) -> None:
    if A.ndim != 2 or A.shape[0] != A.shape[1]:
        raise ShapeError(f"A must be (k,k). Got {tuple(A.shape)}")


def gram(X: torch.Tensor) -> torch.Tensor:
    """X'X for X: (n,k). Returns (k,k)."""
    return einsum("nk,nj->kj", X, X)


def xt_vec(X: torch.Tensor, y: torch.Tensor) -> torch.Tensor:
    """X'y for X: (n,k), y: (n,). Returns (k,)."""
    return einsum("nk,n->k", X, y)


def matvec(A: torch.Tensor, b: torch.Tensor) -> torch.Tensor:
    """A b for A: (m,k), b: (k,). Returns (m,)."""
    if A.shape[-1] != b.shape[0]:
        raise ShapeError(f"Cannot multiply {tuple(A.shape)} by {tuple(b.shape)}")
    return einsum("mk,k->m", A, b)


def insert_column(X: torch.Tensor, index: int, value: float) -> torch.Tensor:
    """Return a copy of X: (n,k) with a constant column inserted at `index`."""
    if X.ndim != 2:
        raise ShapeError(f"X must be (n,k). Got {tuple(X.shape)}")
    n, k = X.shape
    if not 0 <= index <= k:
        raise ShapeError(f"Column index {index} out of range for {k} columns")
    col = torch.full((n, 1), value, dtype=X.dtype, device=X.device)
    return torch.cat([X[:, :index], col, X[:, index:]], dim=1)


def diagonal(A: torch.Tensor) -> torch.Tensor:
    _check_square(A)
    return torch.diagonal(A).clone()


def shift_diagonal(A: torch.Tensor, value: float, *, start: int = 0) -> torch.Tensor:
    """Return A + value on diagonal entries start..k-1. A is left untouched."""
    _check_square(A)
    out = A.clone()
    diag = torch.diagonal(out)
    diag[start:] += value
    return out


def try_inverse(A: torch.Tensor) -> Optional[torch.Tensor]:
    """
    Invert a (k,k) matrix, reporting failure instead of raising.

    Returns None when LU hits a zero pivot or the inverse is not finite.
    Warns (RuntimeWarning) when A is invertible but ill-conditioned.
    """
    _check_square(A)
    k = A.shape[0]
    if k == 0:
        return A.clone()

    A_inv, info = torch.linalg.inv_ex(A)
    if int(info) != 0 or not torch.isfinite(A_inv).all():
        return None

    cond = float(torch.linalg.cond(A))
    if cond > ill_conditioned_cond(A.dtype):
        warnings.warn(
            f"Normal matrix is ill-conditioned (cond = {cond:.2e}). "
            "Coefficients may be inaccurate; consider a positive penalty.",
            RuntimeWarning,
            stacklevel=2,
        )
    return A_inv
