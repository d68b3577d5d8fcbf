from __future__ import annotations


class SLearningError(Exception):
    """Base exception for slearning."""


class InvalidParametersError(SLearningError, ValueError):
    """Invalid model configuration, e.g. a negative penalty."""


class InvalidDataError(SLearningError, ValueError):
    """Inconsistent or degenerate training/prediction data."""


class ShapeError(InvalidDataError):
    """Invalid shape or dimension mismatch."""


class SingularMatrixError(InvalidDataError):
    """Normal matrix is singular or numerically non-invertible."""


class UntrainedModelError(SLearningError, RuntimeError):
    """Operation requires a trained model."""

    def __init__(self, message: str = "this operation requires the model to be trained") -> None:
        super().__init__(message)


class UnknownError(SLearningError, RuntimeError):
    """Unclassified internal failure."""
