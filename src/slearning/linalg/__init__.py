"""
slearning.linalg

Dense matrix/vector operations used by the regression models.

Shapes
------
- X: (n, k)   design matrix, n observations, k variables
- y: (n,)     target vector
- G: (k, k)   Gram matrix X'X
"""
from .einsum import einsum
from .dense import diagonal, gram, insert_column, matvec, shift_diagonal, try_inverse, xt_vec

__all__ = [
    "einsum",
    "gram",
    "xt_vec",
    "matvec",
    "insert_column",
    "diagonal",
    "shift_diagonal",
    "try_inverse",
]
