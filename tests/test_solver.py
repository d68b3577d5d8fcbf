import pytest
import torch

from slearning import InvalidParametersError, ShapeError, SingularMatrixError, augment, solve_normal_equations

from conftest import make_design


def test_solver_ols_exact_fit(torch_dtype):
    X = augment(torch.tensor([[1.0, 1.0], [1.0, 2.0], [2.0, 2.0], [2.0, 3.0]], dtype=torch_dtype), True)
    y = torch.tensor([6.0, 8.0, 9.0, 11.0], dtype=torch_dtype)

    beta = solve_normal_equations(X, y, penalty=0.0, fit_intercept=True)
    torch.testing.assert_close(beta, torch.tensor([3.0, 1.0, 2.0], dtype=torch_dtype))


def test_solver_penalizes_every_diagonal_entry_without_intercept(torch_dtype):
    X, _, y = make_design(15, 3, seed=9, dtype=torch_dtype)
    lam = 0.7

    beta = solve_normal_equations(X, y, penalty=lam, fit_intercept=False)
    beta_direct = torch.linalg.solve(X.T @ X + lam * torch.eye(3, dtype=torch_dtype), X.T @ y)

    assert torch.max(torch.abs(beta - beta_direct)).item() < 1e-10


def test_solver_exempts_intercept_column(torch_dtype):
    X, _, y = make_design(15, 2, seed=9, dtype=torch_dtype)
    Xa = augment(X, True)
    lam = 3.0

    exempt = solve_normal_equations(Xa, y, penalty=lam, fit_intercept=True)
    uniform = solve_normal_equations(Xa, y, penalty=lam, fit_intercept=False)

    D = torch.eye(3, dtype=torch_dtype)
    D[0, 0] = 0.0
    beta_direct = torch.linalg.solve(Xa.T @ Xa + lam * D, Xa.T @ y)

    assert torch.max(torch.abs(exempt - beta_direct)).item() < 1e-10
    assert torch.max(torch.abs(exempt - uniform)).item() > 1e-6


def test_solver_singular_normal_matrix(torch_dtype):
    X = torch.tensor([[1.0, 2.0], [2.0, 4.0]], dtype=torch_dtype)
    y = torch.tensor([1.5, 3.5], dtype=torch_dtype)

    with pytest.raises(SingularMatrixError, match="the normal matrix is not invertible"):
        solve_normal_equations(X, y)

    beta = solve_normal_equations(X, y, penalty=0.5)
    assert torch.isfinite(beta).all()


def test_solver_rejects_mismatched_shapes():
    with pytest.raises(ShapeError):
        solve_normal_equations(torch.ones(3, 2), torch.ones(2))
    with pytest.raises(ShapeError):
        solve_normal_equations(torch.ones(3), torch.ones(3))


@pytest.mark.parametrize("penalty", [-0.5, float("nan")])
def test_solver_rejects_invalid_penalty(penalty):
    X = torch.tensor([[1.0, 3.0], [2.0, 4.0]], dtype=torch.float64)
    y = torch.tensor([1.5, 3.5], dtype=torch.float64)
    with pytest.raises(InvalidParametersError):
        solve_normal_equations(X, y, penalty=penalty)
