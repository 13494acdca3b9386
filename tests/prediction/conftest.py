"""
Prediction Test Configuration and Fixtures

This file contains pytest fixtures shared across prediction tests.
Nothing here touches the network: HTTP tests use a fake session.

To use pytest:
    pip install -e ".[test]"
    pytest tests/prediction/
"""

import json

import pytest
import requests

from core.constants import ModelVariant
from prediction.controllers.upload_controller import UploadController
from prediction.endpoints import FixedEndpoint, ModelEndpoint
from prediction.implementations.mock_predictor import MockPredictor
from prediction.managers.preview_manager import PreviewManager

REMOTE_URL = "https://predict.example.test/predict"
MODEL_TEMPLATE = "http://127.0.0.1:5000/predict/{model}"

# Smallest valid PNG header is enough; the client never decodes images
PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 64


# =============================================================================
# HTTP FAKES
# =============================================================================


def make_response(status_code=200, json_body=None, content=None):
    """Build a real requests.Response without a server"""
    response = requests.Response()
    response.status_code = status_code
    if content is None:
        content = b"" if json_body is None else json.dumps(json_body).encode()
    response._content = content
    response.headers["Content-Type"] = "application/json"
    return response


class FakeSession:
    """
    Stands in for requests.Session.

    Returns the queued response (or raises the queued exception) and
    records every call.
    """

    def __init__(self, response=None, exception=None):
        if response is None:
            response = make_response(json_body={})
        self.response = response
        self.exception = exception
        self.calls = []
        self.closed = False

    def post(self, url, files=None, timeout=None, **kwargs):
        self.calls.append({"url": url, "files": files, "timeout": timeout})
        if self.exception is not None:
            raise self.exception
        return self.response

    def close(self):
        self.closed = True


@pytest.fixture
def response_factory():
    """Factory for requests.Response objects: response_factory(500, {"error": "x"})"""
    return make_response


@pytest.fixture
def session_factory():
    """Factory for FakeSession objects: session_factory(response=..., exception=...)"""
    return FakeSession


# =============================================================================
# FILE FIXTURES
# =============================================================================


@pytest.fixture
def image_file(tmp_path):
    """A small image file on disk"""
    path = tmp_path / "tomato.png"
    path.write_bytes(PNG_BYTES)
    return path


@pytest.fixture
def preview_manager(tmp_path):
    """PreviewManager writing into the test's temp dir"""
    manager = PreviewManager(base_dir=tmp_path / "previews")
    yield manager
    manager.cleanup()


# =============================================================================
# CONTROLLER FIXTURES
# =============================================================================


@pytest.fixture
def mock_predictor():
    """MockPredictor answering green / 0.87"""
    return MockPredictor()


@pytest.fixture
def controller(mock_predictor, preview_manager):
    """
    UploadController with a fixed endpoint and mock predictor.

    Usage:
        def test_upload(controller, image_file):
            controller.select_file(image_file)
            state = controller.upload()
    """
    upload_controller = UploadController(
        predictor=mock_predictor,
        endpoint=FixedEndpoint(REMOTE_URL),
        preview_manager=preview_manager,
    )
    yield upload_controller
    mock_predictor.release_requests()
    upload_controller.wait(timeout=5)
    upload_controller.cleanup()


@pytest.fixture
def model_controller(mock_predictor, preview_manager):
    """UploadController using the model-parameterized endpoint"""
    upload_controller = UploadController(
        predictor=mock_predictor,
        endpoint=ModelEndpoint(MODEL_TEMPLATE),
        preview_manager=preview_manager,
        model=ModelVariant.OPTIMIZED,
    )
    yield upload_controller
    mock_predictor.release_requests()
    upload_controller.wait(timeout=5)
    upload_controller.cleanup()
