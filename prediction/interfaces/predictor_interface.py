"""
Predictor Interface

Abstract interface for prediction service clients.
Follows Dependency Inversion Principle - the controller depends on this
abstraction, not on a concrete HTTP client.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional

from prediction.constants import PredictorStatus
from prediction.models.selected_file import SelectedFile


class PredictorInterface(ABC):
    """
    Abstract base class for prediction clients.

    Any implementation (HTTP, mock, ...) must implement these methods.
    """

    @abstractmethod
    def predict(self, selected_file: SelectedFile, url: str) -> Any:
        """
        Send one image to the prediction service.

        Args:
            selected_file: Image to classify
            url: Resolved request target

        Returns:
            The decoded response body (usually a dict with "prediction" and
            "confidence"), or None if the service returned no body

        Raises:
            PredictorError: On transport or server failure

        Example:
            payload = predictor.predict(selected, "http://127.0.0.1:5000/predict")
        """

    @abstractmethod
    def is_available(self) -> bool:
        """
        Check if the predictor can send requests.

        Returns:
            True if the client is configured and usable
        """

    @abstractmethod
    def test_connection(self, url: str) -> bool:
        """
        Test that the service behind url can be reached.

        Returns:
            True if connection successful
        """

    def close(self) -> None:
        """Release client resources (sessions, sockets)"""


class PredictorError(Exception):
    """
    Exception raised for prediction request failures.

    response_data is the decoded error body when the service answered
    (None means no response at all: connection refused, timeout, ...).

    Examples:
    - Connection refused
    - HTTP 500 with {"error": "bad image"}
    """

    def __init__(
        self,
        message: str,
        status: PredictorStatus = PredictorStatus.NETWORK_ERROR,
        response_data: Optional[Any] = None,
        status_code: Optional[int] = None,
    ):
        super().__init__(message)
        self.status = status
        self.response_data = response_data
        self.status_code = status_code

    @property
    def has_response(self) -> bool:
        return self.response_data is not None
