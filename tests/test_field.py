import pytest
import torch

from slearning.exceptions import InvalidParametersError
from slearning.field import DEFAULT_DTYPE, as_scalar, eps, ill_conditioned_cond, resolve_dtype


@pytest.mark.parametrize(
    "alias, expected",
    [
        (None, DEFAULT_DTYPE),
        (torch.float32, torch.float32),
        (torch.float64, torch.float64),
        ("float32", torch.float32),
        ("single", torch.float32),
        ("F64", torch.float64),
        ("torch.float64", torch.float64),
        ("double", torch.float64),
    ],
)
def test_resolve_dtype(alias, expected):
    assert resolve_dtype(alias) == expected


@pytest.mark.parametrize("bad", [torch.float16, torch.int64, torch.complex64, "half", "int"])
def test_resolve_dtype_rejects(bad):
    with pytest.raises(InvalidParametersError):
        resolve_dtype(bad)


def test_ill_conditioned_threshold_is_dtype_independent():
    assert ill_conditioned_cond(torch.float32) == ill_conditioned_cond(torch.float64)
    assert ill_conditioned_cond(torch.float64) == pytest.approx(eps(torch.float64) ** -0.5)


def test_as_scalar():
    assert as_scalar(2) == 2.0
    assert as_scalar(torch.tensor([1.5])) == 1.5
    with pytest.raises(InvalidParametersError):
        as_scalar(torch.ones(2))
    with pytest.raises(InvalidParametersError):
        as_scalar(None)
