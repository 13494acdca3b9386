"""
HTTP Predictor Implementation

Real prediction client: multipart POST over requests.
"""

import logging
import time
from typing import Any, Optional

import requests

from config.settings import PREDICTION_HTTP_TIMEOUT, UPLOAD_FIELD_NAME
from core.network import check_endpoint_connectivity
from prediction.constants import PredictorStatus
from prediction.interfaces.predictor_interface import (
    PredictorError,
    PredictorInterface,
)
from prediction.models.selected_file import SelectedFile


class HTTPPredictor(PredictorInterface):
    """
    Sends images to the prediction service.

    Non-2xx answers raise PredictorError carrying the decoded body, so the
    caller can surface the server's own message. Failures without an answer
    raise PredictorError with response_data=None.

    Usage:
        predictor = HTTPPredictor()
        payload = predictor.predict(selected, "https://.../predict")
    """

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = PREDICTION_HTTP_TIMEOUT,
    ):
        """
        Initialize HTTP predictor.

        Args:
            session: requests.Session to use (injected in tests)
            timeout: Seconds to wait for the service, None waits indefinitely
        """
        self.logger = logging.getLogger(__name__)
        self.session = session or requests.Session()
        self.timeout = timeout

        self.logger.info(f"HTTP Predictor initialized (timeout: {timeout})")

    def predict(self, selected_file: SelectedFile, url: str) -> Any:
        start_time = time.time()
        self.logger.info(
            f"POST {url} ({selected_file.filename}, {selected_file.size} bytes)",
        )

        try:
            response = self.session.post(
                url,
                files={UPLOAD_FIELD_NAME: selected_file.as_multipart()},
                timeout=self.timeout,
            )
        except requests.exceptions.Timeout as e:
            raise PredictorError(f"Request timed out: {e}") from e
        except requests.exceptions.RequestException as e:
            raise PredictorError(f"Request failed: {e}") from e

        duration = time.time() - start_time

        if not 200 <= response.status_code < 300:
            self.logger.warning(
                f"Prediction service answered {response.status_code} ({duration:.2f}s)",
            )
            body = _decode_json(response)
            raise PredictorError(
                f"Server returned HTTP {response.status_code}",
                status=PredictorStatus.SERVER_ERROR,
                response_data=body if body is not None else {},
                status_code=response.status_code,
            )

        self.logger.debug(f"Prediction response received ({duration:.2f}s)")
        return _decode_json(response)

    def is_available(self) -> bool:
        return self.session is not None

    def test_connection(self, url: str) -> bool:
        return check_endpoint_connectivity(url)

    def close(self) -> None:
        self.session.close()


def _decode_json(response: requests.Response) -> Any:
    """Decoded JSON body, or None when empty or not JSON"""
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return None
