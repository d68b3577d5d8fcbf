import torch

from slearning import augment
from slearning.design import augment_names


def test_augment_without_intercept_returns_input():
    X = torch.randn(5, 3, dtype=torch.float64)
    assert augment(X, False) is X


def test_augment_inserts_leading_ones(torch_dtype):
    X = torch.arange(6, dtype=torch_dtype).view(3, 2)
    Xa = augment(X, True)

    assert Xa.shape == (3, 3)
    assert Xa.dtype == torch_dtype
    assert torch.equal(Xa[:, 0], torch.ones(3, dtype=torch_dtype))
    assert torch.equal(Xa[:, 1:], X)


def test_augment_does_not_modify_input():
    X = torch.zeros(4, 2, dtype=torch.float64)
    augment(X, True)
    assert torch.equal(X, torch.zeros(4, 2, dtype=torch.float64))


def test_augment_zero_rows():
    Xa = augment(torch.empty((0, 2), dtype=torch.float64), True)
    assert Xa.shape == (0, 3)


def test_augment_names():
    assert augment_names(["x1", "x2"], True) == ["const", "x1", "x2"]
    assert augment_names(["x1", "x2"], False) == ["x1", "x2"]
    assert augment_names(None, True) is None
