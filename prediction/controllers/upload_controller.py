"""
Upload Controller

High-level coordinator for one image upload component.
Owns the view state, mediates file selection, sends the prediction request
and maps the answer (or failure) back to state.

This follows the same pattern as the other controllers:
- Clean, simple API for the UI
- Handles all request complexity internally
- Proper error handling and logging
"""

import logging
import threading
import weakref
from typing import Any, Callable, Dict, Optional, Tuple

from config.settings import DEFAULT_MODEL
from core.constants import MSG_TRANSPORT_ERROR, ModelVariant
from core.state_machine import (
    FileCleared,
    FileRejected,
    FileSelected,
    ModelSelected,
    PredictionFailed,
    PredictionReceived,
    StateMachine,
    UploadRejected,
    UploadStarted,
    UploadViewState,
)
from prediction.endpoints import EndpointResolver
from prediction.factory import create_endpoint_resolver, create_predictor
from prediction.interfaces.predictor_interface import PredictorError, PredictorInterface
from prediction.managers.preview_manager import PreviewManager
from prediction.models.selected_file import InvalidFileError, SelectedFile
from prediction.utils.response_utils import describe_failure

_Request = Tuple[int, SelectedFile, str]


class UploadController:
    """
    Image upload and prediction controller.

    This class:
    - Validates picked files and manages their previews
    - Sends at most one prediction request at a time
    - Translates responses and failures into UploadViewState
    - Ignores answers for a file that has since been replaced

    Usage:
        controller = UploadController()

        controller.select_file("tomato.jpg")
        state = controller.upload()

        if state.result:
            print(state.result.display_label, state.result.confidence_text)
        else:
            print(state.error)
    """

    def __init__(
        self,
        predictor: Optional[PredictorInterface] = None,
        endpoint: Optional[EndpointResolver] = None,
        preview_manager: Optional[PreviewManager] = None,
        model: Optional[Any] = None,
    ):
        """
        Initialize upload controller.

        Args:
            predictor: PredictorInterface implementation, or None to auto-create
            endpoint: EndpointResolver, or None to build from settings
            preview_manager: PreviewManager, or None for a private one
            model: Initial model selection (default from settings)

        Example:
            # Normal usage - configured from .env
            controller = UploadController()

            # Testing
            controller = UploadController(predictor=MockPredictor())
        """
        self.logger = logging.getLogger(__name__)

        self.predictor = predictor or create_predictor()
        self.endpoint = endpoint or create_endpoint_resolver()
        self.previews = preview_manager or PreviewManager()

        # Released by cleanup() or once the controller is garbage collected
        self._finalizer = weakref.finalize(
            self,
            _release_resources,
            self.previews,
            self.predictor,
        )

        initial_model = ModelVariant.from_value(model or DEFAULT_MODEL)
        self._machine = StateMachine(UploadViewState(model=initial_model))

        # Guards every state change and the in-flight check
        self._lock = threading.RLock()
        self._worker: Optional[threading.Thread] = None

        if not self.predictor.is_available():
            self.logger.warning("Predictor initialized but not available")

        self.logger.info(
            f"Upload Controller initialized "
            f"(endpoint: {self.endpoint!r}, model: {initial_model.value})",
        )

    # =========================================================================
    # STATE
    # =========================================================================

    @property
    def state(self) -> UploadViewState:
        return self._machine.get_current_state()

    @property
    def is_loading(self) -> bool:
        return self.state.loading

    @property
    def can_upload(self) -> bool:
        return self.state.can_upload

    @property
    def model_selector_enabled(self) -> bool:
        return self.endpoint.uses_model

    def set_state_change_callback(
        self,
        callback: Callable[[UploadViewState, UploadViewState], None],
    ) -> None:
        self._machine.register_callback("on_state_change", callback)

    def _dispatch(self, event) -> UploadViewState:
        with self._lock:
            return self._machine.dispatch(event)

    # =========================================================================
    # USER ACTIONS
    # =========================================================================

    def select_file(
        self,
        source: Any,
        filename: Optional[str] = None,
        content_type: Optional[str] = None,
    ) -> UploadViewState:
        """
        Handle a file pick.

        Any previous result, error and preview are discarded. Invalid input
        never raises: it leaves the "Invalid file format" error in state.

        Args:
            source: bytes, binary file object or path
            filename: Name to send (defaults to the source's own name)
            content_type: MIME type (guessed from filename if omitted)
        """
        with self._lock:
            self.previews.revoke(self.state.preview)

            try:
                selected = SelectedFile.from_source(
                    source,
                    filename=filename,
                    content_type=content_type,
                )
            except InvalidFileError as e:
                self.logger.warning(f"Rejected file selection: {e}")
                return self._dispatch(FileRejected())

            try:
                preview = self.previews.create(selected)
            except OSError as e:
                self.logger.warning(f"Preview unavailable for {selected.filename}: {e}")
                preview = None

            self.logger.info(
                f"File selected: {selected.filename} "
                f"({selected.size} bytes, {selected.content_type})",
            )
            return self._dispatch(FileSelected(file=selected, preview=preview))

    def clear_file(self) -> UploadViewState:
        """
        Forget the selected file and go back to idle.

        The preview is revoked. An answer still in flight for the cleared
        file is discarded when it arrives.
        """
        with self._lock:
            self.previews.revoke(self.state.preview)
            self.logger.info("File selection cleared")
            return self._dispatch(FileCleared())

    def select_model(self, model: Any) -> UploadViewState:
        """
        Change the model used by the next upload.

        A request already in flight keeps the model it was sent with.

        Raises:
            ValueError: If model is not a known ModelVariant
        """
        variant = ModelVariant.from_value(model)
        self.logger.info(f"Model selected: {variant.value}")
        return self._dispatch(ModelSelected(variant))

    def upload(self) -> UploadViewState:
        """
        Send the selected file and wait for the answer.

        Returns immediately (without a request) when no file is selected or
        a request is already in flight.

        Returns:
            The state after the request settled
        """
        request = self._begin_upload()
        if request is None:
            return self.state
        return self._run_request(*request)

    def upload_in_background(self) -> Optional[threading.Thread]:
        """
        Send the selected file on a worker thread.

        Returns:
            The started thread, or None if no request was sent
        """
        request = self._begin_upload()
        if request is None:
            return None

        worker = threading.Thread(
            target=self._run_request,
            args=request,
            name="prediction-request",
            daemon=True,
        )
        self._worker = worker
        worker.start()
        return worker

    def wait(self, timeout: Optional[float] = None) -> UploadViewState:
        """Block until a background request settles"""
        worker = self._worker
        if worker is not None:
            worker.join(timeout)
        return self.state

    # =========================================================================
    # REQUEST CYCLE
    # =========================================================================

    def _begin_upload(self) -> Optional[_Request]:
        with self._lock:
            state = self.state

            if state.loading:
                self.logger.debug("Upload ignored: request already in flight")
                return None

            if state.file is None:
                self.logger.warning("Upload requested without a file")
                self._dispatch(UploadRejected())
                return None

            # Target resolved now, with the model selected at trigger time
            url = self.endpoint.resolve(state.model)
            self._dispatch(
                UploadStarted(selection_id=state.selection_id, model=state.model),
            )
            return state.selection_id, state.file, url

    def _run_request(
        self,
        selection_id: int,
        selected_file: SelectedFile,
        url: str,
    ) -> UploadViewState:
        outcome = PredictionFailed(selection_id, MSG_TRANSPORT_ERROR)
        try:
            payload = self.predictor.predict(selected_file, url)
            outcome = PredictionReceived(selection_id, payload)
        except PredictorError as e:
            self.logger.error(f"Prediction request failed: {e} (status: {e.status.value})")
            outcome = PredictionFailed(selection_id, describe_failure(e))
        except Exception as e:
            self.logger.error(f"Unexpected error during prediction: {e}", exc_info=True)
        finally:
            # Always re-enable the trigger, whatever happened
            state = self._settle(outcome)

        return state

    def _settle(self, outcome) -> UploadViewState:
        with self._lock:
            stale = outcome.selection_id != self.state.selection_id
            state = self._dispatch(outcome)

        if stale:
            self.logger.info("Discarded response for a replaced file selection")
        elif state.result is not None:
            self.logger.info(
                f"✅ Prediction: {state.result.display_label} "
                f"(confidence: {state.result.confidence_text})",
            )
        else:
            self.logger.error(f"❌ Prediction failed: {state.error}")
        return state

    # =========================================================================
    # STATUS / LIFECYCLE
    # =========================================================================

    def current_endpoint(self) -> str:
        """URL an upload triggered now would be sent to"""
        return self.endpoint.resolve(self.state.model)

    def test_connection(self) -> bool:
        """
        Test that the prediction service can be reached.

        Returns:
            True if connection successful
        """
        url = self.current_endpoint()
        self.logger.info(f"Testing connection to {url}...")

        try:
            result = self.predictor.test_connection(url)
        except Exception as e:
            self.logger.error(f"Connection test error: {e}")
            return False

        if result:
            self.logger.info("✅ Connection test passed")
        else:
            self.logger.warning("❌ Connection test failed")
        return result

    def get_status(self) -> Dict[str, Any]:
        """
        Get current controller status.

        Example:
            status = controller.get_status()
            print(f"Loading: {status['loading']}")
        """
        status = self._machine.get_status_info()
        status.update(
            {
                "endpoint": self.current_endpoint(),
                "predictor_type": type(self.predictor).__name__,
                "active_previews": self.previews.active_count,
            },
        )
        return status

    def cleanup(self) -> None:
        """Release previews and the predictor's connection pool"""
        self.logger.info("Upload Controller cleanup")
        with self._lock:
            self._finalizer()

    def __enter__(self) -> "UploadController":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.cleanup()


def _release_resources(previews: PreviewManager, predictor: PredictorInterface) -> None:
    """Finalizer body; must not reference the controller itself"""
    previews.cleanup()
    predictor.close()
