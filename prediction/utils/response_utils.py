"""
Response Utilities

Turns predictor failures into the messages shown to the user.
"""

from collections.abc import Mapping

from core.constants import (
    MSG_SERVER_ERROR_PREFIX,
    MSG_TRANSPORT_ERROR,
    MSG_UNKNOWN_SERVER_ERROR,
)
from prediction.interfaces.predictor_interface import PredictorError


def server_error_message(response_data) -> str:
    """
    Message for an error answer from the service.

    Example:
        server_error_message({"error": "bad image"})  # "Error: bad image"
        server_error_message({})                      # "Error: Unknown error occurred."
    """
    detail = None
    if isinstance(response_data, Mapping):
        detail = response_data.get("error")
    return f"{MSG_SERVER_ERROR_PREFIX}{detail or MSG_UNKNOWN_SERVER_ERROR}"


def describe_failure(error: Exception) -> str:
    """
    Message for any failed request.

    PredictorErrors that carry a response use the server's message, every
    other failure gets the generic upload error.
    """
    if isinstance(error, PredictorError) and error.has_response:
        return server_error_message(error.response_data)
    return MSG_TRANSPORT_ERROR
