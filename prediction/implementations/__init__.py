"""
Implementations Package

Concrete predictor implementations.
"""

from prediction.implementations.http_predictor import HTTPPredictor
from prediction.implementations.mock_predictor import MockPredictor

__all__ = [
    "HTTPPredictor",
    "MockPredictor",
]
