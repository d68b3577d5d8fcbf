from __future__ import annotations

from typing import Any
import torch


def einsum(equation: str, *operands: Any) -> torch.Tensor:
    """
    Thin wrapper around torch.einsum.

    Every contraction in slearning (Gram matrix, X'y, predictions) goes
    through here so the summation order is the same at train and predict time.
    """
    return torch.einsum(equation, *operands)
