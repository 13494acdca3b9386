"""
Mock Predictor Implementation

Simulated prediction service for testing and offline development.
"""

import copy
import logging
import threading
import time
from typing import Any, List, Optional

from prediction.constants import (
    MOCK_DEFAULT_RESPONSE,
    MOCK_NETWORK_ERROR_MESSAGE,
    PredictorStatus,
)
from prediction.interfaces.predictor_interface import (
    PredictorError,
    PredictorInterface,
)
from prediction.models.selected_file import SelectedFile

_UNSET = object()


class MockPredictor(PredictorInterface):
    """
    Mock prediction client.

    This returns a canned response without any network access.
    Useful for:
    - Unit tests
    - Running the UI without a prediction service
    - Simulating server and network failures

    Usage:
        predictor = MockPredictor(response={"prediction": "green", "confidence": 0.9})
        predictor.fail_with_server_error({"error": "bad image"})
        predictor.fail_with_network_error()
    """

    def __init__(
        self,
        response: Any = _UNSET,
        delay: float = 0.0,
    ):
        """
        Initialize mock predictor.

        Args:
            response: Body returned on success (default: green / 0.87)
            delay: Seconds to sleep per request
        """
        self.logger = logging.getLogger(__name__)
        self.response = (
            copy.deepcopy(MOCK_DEFAULT_RESPONSE) if response is _UNSET else response
        )
        self.delay = delay
        self._error: Optional[PredictorError] = None

        # Lets tests hold a request "in flight"
        self.release_event = threading.Event()
        self.release_event.set()

        # Track requests for testing
        self.request_history: List[dict] = []

        self.logger.info(f"Mock Predictor initialized (delay: {delay})")

    def predict(self, selected_file: SelectedFile, url: str) -> Any:
        self.request_history.append(
            {
                "url": url,
                "filename": selected_file.filename,
                "content_type": selected_file.content_type,
                "size": selected_file.size,
                "timestamp": time.time(),
            },
        )
        self.logger.info(f"[MOCK] POST {url} ({selected_file.filename})")

        if self.delay:
            time.sleep(self.delay)
        self.release_event.wait()

        if self._error is not None:
            self.logger.warning(f"[MOCK] Simulated failure: {self._error}")
            raise self._error

        return copy.deepcopy(self.response)

    def is_available(self) -> bool:
        """Mock predictor is always available"""
        return True

    def test_connection(self, url: str) -> bool:
        return self._error is None or self._error.has_response

    # =========================================================================
    # TESTING HELPER METHODS
    # =========================================================================

    def set_response(self, response: Any) -> None:
        """Succeed with this body from now on"""
        self.response = response
        self._error = None

    def fail_with_server_error(
        self,
        response_data: Any = None,
        status_code: int = 500,
    ) -> None:
        """Fail as if the service answered with an error status"""
        self._error = PredictorError(
            f"Server returned HTTP {status_code}",
            status=PredictorStatus.SERVER_ERROR,
            response_data={} if response_data is None else response_data,
            status_code=status_code,
        )

    def fail_with_network_error(self) -> None:
        """Fail as if no response was received"""
        self._error = PredictorError(MOCK_NETWORK_ERROR_MESSAGE)

    def hold_requests(self) -> None:
        """Block predict() until release_requests() is called"""
        self.release_event.clear()

    def release_requests(self) -> None:
        self.release_event.set()

    def get_request_history(self) -> List[dict]:
        return self.request_history.copy()

    def get_last_request(self) -> Optional[dict]:
        return self.request_history[-1] if self.request_history else None

    def clear_history(self) -> None:
        self.request_history.clear()
        self.logger.debug("[MOCK] Request history cleared")
