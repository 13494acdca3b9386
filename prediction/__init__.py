"""
Prediction Module

Image upload client for the tomato ripeness prediction service.

Public API:
    - UploadController: High-level upload/prediction coordinator
    - SelectedFile / InvalidFileError: Picked image payload
    - PredictorError / PredictorStatus: Failure details
    - FixedEndpoint / ModelEndpoint: Request target strategies
    - create_predictor / create_endpoint_resolver: Factory functions

Usage:
    from prediction import UploadController

    controller = UploadController()
    controller.select_file("tomato.jpg")
    state = controller.upload()
"""

from prediction.constants import EndpointMode, PredictorStatus
from prediction.controllers.upload_controller import UploadController
from prediction.endpoints import EndpointResolver, FixedEndpoint, ModelEndpoint
from prediction.factory import (
    PredictorFactory,
    create_endpoint_resolver,
    create_predictor,
)
from prediction.interfaces.predictor_interface import PredictorError, PredictorInterface
from prediction.models.selected_file import InvalidFileError, SelectedFile

# Public API
__all__ = [
    "EndpointMode",
    "EndpointResolver",
    "FixedEndpoint",
    "InvalidFileError",
    "ModelEndpoint",
    "PredictorError",
    "PredictorFactory",
    "PredictorInterface",
    "PredictorStatus",
    "SelectedFile",
    "UploadController",
    "create_endpoint_resolver",
    "create_predictor",
]
