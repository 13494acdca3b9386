"""
Predictor Factory

Factory pattern for creating predictor implementations and endpoint
resolvers. Follows same pattern as the other factories for consistency.

Automatically configures from config/settings.py (and so from .env).
"""

import logging
from typing import Literal, Optional

from config.settings import (
    PREDICTION_ENDPOINT_MODE,
    PREDICTION_HTTP_TIMEOUT,
    PREDICTION_LOCAL_URL,
    PREDICTION_MODEL_URL_TEMPLATE,
    PREDICTION_REMOTE_URL,
    PREDICTOR_MODE,
)
from prediction.constants import EndpointMode
from prediction.endpoints import EndpointResolver, FixedEndpoint, ModelEndpoint
from prediction.implementations.http_predictor import HTTPPredictor
from prediction.implementations.mock_predictor import MockPredictor
from prediction.interfaces.predictor_interface import PredictorInterface

# Type alias
PredictorMode = Literal["auto", "http", "mock"]


class PredictorFactory:
    """
    Factory for creating predictor implementations.

    Usage:
        # Mode from settings (PREDICTOR_MODE)
        predictor = PredictorFactory.create_predictor()

        # Force mock for testing
        predictor = PredictorFactory.create_predictor(mode="mock")
    """

    _logger = logging.getLogger(__name__)

    @classmethod
    def create_predictor(
        cls,
        mode: Optional[PredictorMode] = None,
        timeout: Optional[float] = PREDICTION_HTTP_TIMEOUT,
    ) -> PredictorInterface:
        """
        Create a predictor instance.

        Args:
            mode: "auto" (HTTP, mock if it cannot be created), "http" (force
                  real), "mock" (force simulation). None reads PREDICTOR_MODE.
            timeout: HTTP timeout in seconds, None waits indefinitely

        Returns:
            PredictorInterface implementation

        Raises:
            RuntimeError: If mode="http" but the client cannot be created
            ValueError: If mode is unknown
        """
        mode = mode or PREDICTOR_MODE

        if mode == "mock":
            cls._logger.info("Creating Mock Predictor (forced)")
            return MockPredictor()

        if mode == "http":
            try:
                predictor = HTTPPredictor(timeout=timeout)
                cls._logger.info("Creating HTTP Predictor (forced)")
                return predictor
            except Exception as e:
                raise RuntimeError(
                    f"HTTP predictor requested but not available: {e}"
                ) from e

        if mode == "auto":
            try:
                predictor = HTTPPredictor(timeout=timeout)
                cls._logger.info("Creating HTTP Predictor (auto-detected)")
                return predictor
            except Exception as e:
                cls._logger.warning(
                    f"HTTP predictor not available ({e}), using Mock Predictor"
                )
                return MockPredictor()

        raise ValueError(f"Unknown predictor mode: {mode}")

    @classmethod
    def create_endpoint_resolver(
        cls,
        mode: Optional[str] = None,
    ) -> EndpointResolver:
        """
        Create the endpoint resolver for a mode.

        Args:
            mode: "remote", "local" or "model"; None reads
                  PREDICTION_ENDPOINT_MODE

        Raises:
            ValueError: If mode is unknown
        """
        try:
            endpoint_mode = EndpointMode((mode or PREDICTION_ENDPOINT_MODE).lower())
        except ValueError:
            valid = ", ".join(m.value for m in EndpointMode)
            raise ValueError(
                f"Unknown endpoint mode: {mode or PREDICTION_ENDPOINT_MODE} "
                f"(valid: {valid})"
            ) from None

        if endpoint_mode == EndpointMode.REMOTE:
            resolver = FixedEndpoint(PREDICTION_REMOTE_URL)
        elif endpoint_mode == EndpointMode.LOCAL:
            resolver = FixedEndpoint(PREDICTION_LOCAL_URL)
        else:
            resolver = ModelEndpoint(PREDICTION_MODEL_URL_TEMPLATE)

        cls._logger.debug(f"Endpoint mode {endpoint_mode.value}: {resolver!r}")
        return resolver


# Convenience functions for quick creation
def create_predictor(force_mock: bool = False) -> PredictorInterface:
    """
    Quick predictor creation with simple mock override.

    Example:
        predictor = create_predictor()
        predictor = create_predictor(force_mock=True)  # Testing
    """
    mode = "mock" if force_mock else None
    return PredictorFactory.create_predictor(mode=mode)


def create_endpoint_resolver(mode: Optional[str] = None) -> EndpointResolver:
    return PredictorFactory.create_endpoint_resolver(mode)
