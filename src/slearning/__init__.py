from slearning.api import __version__
from slearning.design import augment
from slearning.exceptions import (
    InvalidDataError,
    InvalidParametersError,
    ShapeError,
    SingularMatrixError,
    SLearningError,
    UnknownError,
    UntrainedModelError,
)
from slearning.models import LinearDiscriminantAnalysis, OlsRegressor, RidgeRegressor, SupervisedModel
from slearning.solver import solve_normal_equations

__all__ = [
    "OlsRegressor",
    "RidgeRegressor",
    "LinearDiscriminantAnalysis",
    "SupervisedModel",
    "augment",
    "solve_normal_equations",
    "SLearningError",
    "InvalidParametersError",
    "InvalidDataError",
    "ShapeError",
    "SingularMatrixError",
    "UntrainedModelError",
    "UnknownError",
    "__version__",
]
