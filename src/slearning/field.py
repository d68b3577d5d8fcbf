# src/slearning/field.py
"""Numeric field: the floating precisions a model may compute in.

Every model instance picks one dtype at construction time and coerces all of
its inputs to it, so training and prediction never mix precisions.
"""
from __future__ import annotations

import math
from typing import Union

import torch

from slearning.exceptions import InvalidParametersError

DTypeLike = Union[torch.dtype, str, None]

DEFAULT_DTYPE = torch.float64
SUPPORTED_DTYPES = (torch.float32, torch.float64)

_ALIASES = {
    "float32": torch.float32,
    "single": torch.float32,
    "f32": torch.float32,
    "float64": torch.float64,
    "double": torch.float64,
    "f64": torch.float64,
}


def resolve_dtype(dtype: DTypeLike = None) -> torch.dtype:
    """Map a dtype or alias to one of SUPPORTED_DTYPES (None -> DEFAULT_DTYPE)."""
    if dtype is None:
        return DEFAULT_DTYPE
    if isinstance(dtype, str):
        key = dtype.strip().lower().removeprefix("torch.")
        if key not in _ALIASES:
            raise InvalidParametersError(
                f"Unknown dtype {dtype!r}. Use one of: {', '.join(sorted(_ALIASES))}"
            )
        return _ALIASES[key]
    if dtype not in SUPPORTED_DTYPES:
        raise InvalidParametersError(f"dtype must be torch.float32 or torch.float64. Got {dtype}")
    return dtype


def eps(dtype: torch.dtype) -> float:
    return float(torch.finfo(dtype).eps)


def ill_conditioned_cond(dtype: torch.dtype) -> float:
    """Condition number above which a RuntimeWarning is emitted.

    Fixed at half the digits of float64 for every supported dtype.
    """
    return 1.0 / math.sqrt(eps(torch.float64))


def as_scalar(value, *, name: str = "value") -> float:
    """Coerce a python/numpy/0-d tensor real to float, rejecting anything else."""
    if isinstance(value, bool):
        raise InvalidParametersError(f"{name} must be a real number. Got {value!r}")
    if isinstance(value, torch.Tensor):
        if value.numel() != 1 or value.is_complex():
            raise InvalidParametersError(f"{name} must be a real scalar. Got tensor of shape {tuple(value.shape)}")
        return float(value.item())
    try:
        return float(value)
    except (TypeError, ValueError) as e:
        raise InvalidParametersError(f"{name} must be a real number. Got {value!r}") from e


def is_negative(value: float) -> bool:
    return value < 0.0

