"""
Streamlit Page Tests

Runs the page headless with streamlit's AppTest. A controller backed by a
MockPredictor is placed in session state before the first run, so the page
never builds one from settings.

To run:
    pytest tests/ui/test_streamlit_app.py -v
"""

import base64
from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

from prediction.controllers.upload_controller import UploadController
from prediction.endpoints import FixedEndpoint, ModelEndpoint
from prediction.implementations.mock_predictor import MockPredictor
from prediction.managers.preview_manager import PreviewManager

CONTROLLER_KEY = "upload_controller"
APP_PATH = str(Path(__file__).resolve().parents[2] / "ui" / "streamlit_app.py")
REMOTE_URL = "https://predict.example.test/predict"
MODEL_TEMPLATE = "http://127.0.0.1:5000/predict/{model}"

# 1x1 PNG, decodable so st.image accepts the preview
PNG_BYTES = base64.b64decode(
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAQAAAC1HAwCAAAAC0lEQVR42mNkYAAAAAYAAjCB0C8AAAAASUVORK5CYII=",
)


@pytest.fixture
def mock_predictor():
    return MockPredictor()


@pytest.fixture
def controller_factory(mock_predictor, tmp_path):
    """
    Build controllers sharing the mock predictor.

    Usage:
        controller = controller_factory(ModelEndpoint(MODEL_TEMPLATE))
    """
    created = []

    def factory(endpoint):
        controller = UploadController(
            predictor=mock_predictor,
            endpoint=endpoint,
            preview_manager=PreviewManager(base_dir=tmp_path / f"previews{len(created)}"),
        )
        created.append(controller)
        return controller

    yield factory

    mock_predictor.release_requests()
    for controller in created:
        controller.wait(timeout=5)
        controller.cleanup()


def run_page(controller):
    app = AppTest.from_file(APP_PATH, default_timeout=30)
    app.session_state[CONTROLLER_KEY] = controller
    app.run()
    assert not app.exception
    return app


# =============================================================================
# UPLOAD TRIGGER
# =============================================================================


@pytest.mark.unit_integration
def test_trigger_disabled_while_request_in_flight(controller_factory, mock_predictor):
    """The page renders the trigger disabled until the request settles."""
    controller = controller_factory(FixedEndpoint(REMOTE_URL))
    controller.select_file(PNG_BYTES, filename="tomato.png")
    mock_predictor.hold_requests()

    app = run_page(controller)
    assert app.button[0].disabled is False

    app.button[0].click().run()

    assert controller.is_loading is True
    assert app.button[0].disabled is True
    assert app.info[0].value == "Predicting..."

    # A second click while in flight sends nothing
    app.button[0].click().run()
    assert len(mock_predictor.get_request_history()) == 1

    mock_predictor.release_requests()
    controller.wait(timeout=5)
    app.run()

    assert app.button[0].disabled is False
    assert len(app.info) == 0
    assert app.success[0].value == "Prediction: Green"
    assert any(element.value == "Confidence: 0.87" for element in app.markdown)


@pytest.mark.unit_integration
def test_upload_without_file_shows_hint(controller_factory, mock_predictor):
    controller = controller_factory(FixedEndpoint(REMOTE_URL))

    app = run_page(controller)
    app.button[0].click().run()
    controller.wait(timeout=5)
    app.run()

    assert app.error[0].value == "Please upload a file first!"
    assert mock_predictor.get_request_history() == []


# =============================================================================
# MODEL SELECTOR
# =============================================================================


@pytest.mark.unit_integration
def test_model_selector_hidden_for_fixed_endpoint(controller_factory):
    app = run_page(controller_factory(FixedEndpoint(REMOTE_URL)))

    assert len(app.radio) == 0


@pytest.mark.unit_integration
def test_model_selector_shown_for_model_endpoint(controller_factory):
    """The radio appears with the model endpoint and drives the controller."""
    controller = controller_factory(ModelEndpoint(MODEL_TEMPLATE))

    app = run_page(controller)

    assert len(app.radio) == 1
    assert list(app.radio[0].options) == ["optimized", "vgg16"]
    assert app.radio[0].value == "optimized"

    app.radio[0].set_value("vgg16").run()

    assert controller.state.model.value == "vgg16"
    assert controller.current_endpoint() == "http://127.0.0.1:5000/predict/vgg16"
