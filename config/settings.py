"""
Central Configuration File

ALL configuration values live here. This is the single source of truth.

Guidelines:
- Secrets (API keys, credentials) should be in .env, NOT here
- Import these settings in modules: from config.settings import PREDICTION_REMOTE_URL
- Every value can be overridden from the environment (or .env file)
"""

import os

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


def _env_optional_float(name: str, default=None):
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    return float(value)


# =============================================================================
# PREDICTION ENDPOINTS
# =============================================================================

# Hosted prediction service
PREDICTION_REMOTE_URL = os.getenv(
    "PREDICTION_REMOTE_URL",
    "https://tomatoes-classification-be.onrender.com/predict",
)

# Prediction service running on this machine
PREDICTION_LOCAL_URL = os.getenv(
    "PREDICTION_LOCAL_URL",
    "http://127.0.0.1:5000/predict",
)

# Local service exposing one route per model ("{model}" is substituted)
PREDICTION_MODEL_URL_TEMPLATE = os.getenv(
    "PREDICTION_MODEL_URL_TEMPLATE",
    "http://127.0.0.1:5000/predict/{model}",
)

# Which endpoint to use: "remote", "local" or "model"
PREDICTION_ENDPOINT_MODE = os.getenv("PREDICTION_ENDPOINT_MODE", "remote").lower()

# Predictor implementation: "auto", "http" or "mock"
PREDICTOR_MODE = os.getenv("PREDICTOR_MODE", "auto").lower()

# =============================================================================
# MODEL SELECTION
# =============================================================================

# Initial model; the selector is shown only with the "model" endpoint mode
DEFAULT_MODEL = os.getenv("DEFAULT_MODEL", "optimized")

# =============================================================================
# HTTP CONFIGURATION
# =============================================================================

# Seconds to wait for the prediction service. Empty/unset = wait indefinitely
PREDICTION_HTTP_TIMEOUT = _env_optional_float("PREDICTION_HTTP_TIMEOUT")

# Multipart field carrying the image
UPLOAD_FIELD_NAME = "file"

# Connectivity check (TCP connect to the endpoint host)
NETWORK_CHECK_TIMEOUT = float(os.getenv("NETWORK_CHECK_TIMEOUT", "3"))

# =============================================================================
# PREVIEW CONFIGURATION
# =============================================================================

# Directory holding preview files. Empty = a fresh temp dir per controller
PREVIEW_DIR = os.getenv("PREVIEW_DIR", "")
PREVIEW_FILE_PREFIX = "preview_"

# =============================================================================
# LOGGING CONFIGURATION
# =============================================================================

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_DIR = os.getenv("LOG_DIR", "/var/log/ripeness-client")
LOG_FILE_NAME = "client.log"
LOG_FALLBACK_DIR = "logs"
LOG_BACKUP_COUNT = 7
