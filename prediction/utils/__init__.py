"""
Prediction Utilities Package

Public API:
    - describe_failure: Map a failed request to its user-facing message
    - server_error_message: Message for an error answer from the service
"""

from prediction.utils.response_utils import describe_failure, server_error_message

__all__ = [
    "describe_failure",
    "server_error_message",
]
