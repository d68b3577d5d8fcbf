import torch
import pytest

@pytest.fixture(scope="session")
def torch_dtype():
    # Use float64 in tests for numerical stability.
    return torch.float64

def make_design(n: int, k: int, *, seed: int = 123, dtype=torch.float64):
    """
    Deterministic-ish design generator with full column rank (almost surely).
    Returns:
      X : (n,k) without a constant column
      beta_true : (k+1,) intercept first
      y : (n,)
    """
    g = torch.Generator().manual_seed(seed)
    X = torch.randn((n, k), generator=g, dtype=dtype)

    beta_true = torch.arange(1, k + 2, dtype=dtype)
    beta_true = beta_true / beta_true.abs().sum()  # keep magnitudes modest

    eps = 0.1 * torch.randn((n,), generator=g, dtype=dtype)
    y = beta_true[0] + X @ beta_true[1:] + eps
    return X, beta_true, y
