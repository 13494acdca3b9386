"""
Core utilities and modules.

Public API:
    - StateMachine / reduce: Request cycle state handling
    - UploadViewState: Immutable view state of an upload component
    - UploadState / ModelVariant: State and model enumerations
    - PredictionResult: Successful prediction
    - translate_label / format_confidence: Display helpers
    - check_endpoint_connectivity / get_network_status: Reachability checks

Usage:
    from core import UploadViewState, reduce
    from core.state_machine import PredictionReceived

    state = reduce(UploadViewState(), PredictionReceived(0, {"prediction": "green"}))
"""

from core.constants import ModelVariant, UploadState
from core.labels import format_confidence, translate_label
from core.models import PredictionResult
from core.network import check_endpoint_connectivity, get_network_status
from core.state_machine import StateMachine, UploadViewState, reduce

__all__ = [
    "ModelVariant",
    "PredictionResult",
    "StateMachine",
    "UploadState",
    "UploadViewState",
    "check_endpoint_connectivity",
    "format_confidence",
    "get_network_status",
    "reduce",
    "translate_label",
]
