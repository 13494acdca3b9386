"""
Core Constants

Closed sets and user-facing literals for the prediction client.
Configuration values (URLs, timeouts) live in config/settings.py.
"""

from enum import Enum

# =============================================================================
# STATES
# =============================================================================


class UploadState(Enum):
    """Request cycle states"""

    IDLE = "idle"
    FILE_SELECTED = "file_selected"
    UPLOADING = "uploading"
    SUCCESS = "success"
    FAILURE = "failure"


class ModelVariant(Enum):
    """Backend model variants exposed by the model-parameterized endpoint"""

    OPTIMIZED = "optimized"
    VGG16 = "vgg16"

    @classmethod
    def from_value(cls, value) -> "ModelVariant":
        """Accept a ModelVariant or its string value"""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            valid = ", ".join(m.value for m in cls)
            raise ValueError(f"Unknown model: {value!r} (valid: {valid})") from None


DEFAULT_MODEL_VARIANT = ModelVariant.OPTIMIZED

# =============================================================================
# LABELS
# =============================================================================

# Raw prediction codes returned by the service -> displayed text
LABEL_TRANSLATIONS = {
    "half_ripened": "Half ripened",
    "fully_ripened": "Fully ripened",
    "green": "Green",
}

CONFIDENCE_FORMAT = "{:.2f}"
CONFIDENCE_MISSING_TEXT = "n/a"

# =============================================================================
# USER-FACING MESSAGES
# =============================================================================

MSG_INVALID_FILE = "Invalid file format"
MSG_NO_FILE = "Please upload a file first!"
MSG_NO_PREDICTION = "No prediction received from server."
MSG_SERVER_ERROR_PREFIX = "Error: "
MSG_UNKNOWN_SERVER_ERROR = "Unknown error occurred."
MSG_TRANSPORT_ERROR = "Error occurred while uploading image."
