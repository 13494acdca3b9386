"""
Prediction Constants

Centralized constants for the prediction client module.
Following the same pattern as core/constants.py for consistency.
"""

from enum import Enum

# =============================================================================
# PREDICTOR STATUS
# =============================================================================


class PredictorStatus(Enum):
    """Prediction request status codes"""

    SERVER_ERROR = "server_error"  # Service answered with an error status
    NETWORK_ERROR = "network_error"  # No response (connection, timeout, ...)


class EndpointMode(Enum):
    """How the request target is chosen"""

    REMOTE = "remote"  # Fixed hosted URL
    LOCAL = "local"  # Fixed localhost URL
    MODEL = "model"  # Localhost URL with the model name as path segment


# =============================================================================
# FILE HANDLING
# =============================================================================

DEFAULT_FILENAME = "image"
DEFAULT_CONTENT_TYPE = "application/octet-stream"

# Extension used for preview files when the filename has none
DEFAULT_PREVIEW_SUFFIX = ".img"

# =============================================================================
# MOCK PREDICTOR
# =============================================================================

MOCK_DEFAULT_RESPONSE = {"prediction": "green", "confidence": 0.87}
MOCK_NETWORK_ERROR_MESSAGE = "Simulated network failure"
