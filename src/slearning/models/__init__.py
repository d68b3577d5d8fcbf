from slearning.models.base import SupervisedModel
from slearning.models.lda import LinearDiscriminantAnalysis
from slearning.models.ols import OlsRegressor
from slearning.models.ridge import RidgeRegressor

__all__ = ["SupervisedModel", "OlsRegressor", "RidgeRegressor", "LinearDiscriminantAnalysis"]
