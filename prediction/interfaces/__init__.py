"""
Interfaces Package

Abstract interfaces for predictor implementations.
"""

from prediction.interfaces.predictor_interface import (
    PredictorError,
    PredictorInterface,
)

__all__ = [
    "PredictorError",
    "PredictorInterface",
]
