import logging
import time
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any, Callable, Dict, Optional

from core.constants import (
    DEFAULT_MODEL_VARIANT,
    MSG_INVALID_FILE,
    MSG_NO_FILE,
    MSG_NO_PREDICTION,
    ModelVariant,
    UploadState,
)
from core.models import PredictionResult

if TYPE_CHECKING:
    from prediction.managers.preview_manager import PreviewReference
    from prediction.models.selected_file import SelectedFile


# =============================================================================
# VIEW STATE
# =============================================================================


@dataclass(frozen=True)
class UploadViewState:
    """
    Everything the UI needs to render one upload component.

    selection_id increases on every pick (valid or not). Responses carry the
    selection they were sent for, so a late response for a replaced file can
    be recognised and dropped.
    """

    status: UploadState = UploadState.IDLE
    file: Optional["SelectedFile"] = None
    preview: Optional["PreviewReference"] = None
    result: Optional[PredictionResult] = None
    error: str = ""
    loading: bool = False
    model: ModelVariant = DEFAULT_MODEL_VARIANT
    selection_id: int = 0
    request_selection_id: Optional[int] = None

    @property
    def has_file(self) -> bool:
        return self.file is not None

    @property
    def can_upload(self) -> bool:
        """Trigger control is enabled only while nothing is in flight"""
        return not self.loading


# =============================================================================
# EVENTS
# =============================================================================


@dataclass(frozen=True)
class FileSelected:
    file: "SelectedFile"
    preview: Optional["PreviewReference"] = None


@dataclass(frozen=True)
class FileRejected:
    pass


@dataclass(frozen=True)
class FileCleared:
    pass


@dataclass(frozen=True)
class UploadRejected:
    pass


@dataclass(frozen=True)
class UploadStarted:
    selection_id: int
    model: ModelVariant = DEFAULT_MODEL_VARIANT


@dataclass(frozen=True)
class PredictionReceived:
    selection_id: int
    payload: Any = None


@dataclass(frozen=True)
class PredictionFailed:
    selection_id: int
    message: str = ""


@dataclass(frozen=True)
class ModelSelected:
    model: ModelVariant


# =============================================================================
# REDUCER
# =============================================================================


def _settle(state: UploadViewState, selection_id: int):
    """Clear the in-flight flag; report whether the response is still current"""
    settled = replace(state, loading=False, request_selection_id=None)
    return settled, selection_id == state.selection_id


def reduce(state: UploadViewState, event) -> UploadViewState:
    """
    Apply one event to the view state and return the new state.

    Pure: the input state is never modified.

    Raises:
        TypeError: For unknown event types
    """
    if isinstance(event, FileSelected):
        return replace(
            state,
            status=UploadState.FILE_SELECTED,
            file=event.file,
            preview=event.preview,
            result=None,
            error="",
            selection_id=state.selection_id + 1,
        )

    if isinstance(event, FileRejected):
        return replace(
            state,
            status=UploadState.FILE_SELECTED,
            file=None,
            preview=None,
            result=None,
            error=MSG_INVALID_FILE,
            selection_id=state.selection_id + 1,
        )

    if isinstance(event, FileCleared):
        return replace(
            state,
            status=UploadState.IDLE,
            file=None,
            preview=None,
            result=None,
            error="",
            selection_id=state.selection_id + 1,
        )

    if isinstance(event, UploadRejected):
        return replace(state, result=None, error=MSG_NO_FILE)

    if isinstance(event, UploadStarted):
        return replace(
            state,
            status=UploadState.UPLOADING,
            result=None,
            error="",
            loading=True,
            model=event.model,
            request_selection_id=event.selection_id,
        )

    if isinstance(event, PredictionReceived):
        settled, current = _settle(state, event.selection_id)
        if not current:
            return settled

        result = PredictionResult.from_payload(event.payload)
        if result is None:
            return replace(
                settled,
                status=UploadState.FAILURE,
                result=None,
                error=MSG_NO_PREDICTION,
            )
        return replace(settled, status=UploadState.SUCCESS, result=result, error="")

    if isinstance(event, PredictionFailed):
        settled, current = _settle(state, event.selection_id)
        if not current:
            return settled
        return replace(
            settled,
            status=UploadState.FAILURE,
            result=None,
            error=event.message,
        )

    if isinstance(event, ModelSelected):
        return replace(state, model=event.model)

    raise TypeError(f"Unknown event: {type(event).__name__}")


# =============================================================================
# STATE MACHINE
# =============================================================================


class StateMachine:
    """
    Holds the current view state of one upload component.
    Applies events through reduce() and notifies a state-change callback.
    """

    def __init__(self, initial_state: Optional[UploadViewState] = None):
        self.current_state = initial_state or UploadViewState()
        self.previous_state: Optional[UploadViewState] = None
        self.state_start_time = time.time()
        self.logger = logging.getLogger(__name__)

        self.callbacks: Dict[str, Optional[Callable]] = {
            "on_state_change": None,  # Called with (old_state, new_state)
        }

        self.logger.debug(
            f"State machine initialized in {self.current_state.status.value.upper()} state",
        )

    def register_callback(self, callback_name: str, callback_func: Callable):
        """Register a callback function for state machine events"""
        if callback_name in self.callbacks:
            self.callbacks[callback_name] = callback_func
            self.logger.debug(f"Registered callback: {callback_name}")
        else:
            raise ValueError(f"Unknown callback: {callback_name}")

    def get_current_state(self) -> UploadViewState:
        return self.current_state

    def get_state_duration(self) -> float:
        """Get how long we've been in the current status (seconds)"""
        return time.time() - self.state_start_time

    def dispatch(self, event) -> UploadViewState:
        """Apply an event, log status transitions and notify listeners"""
        old_state = self.current_state
        new_state = reduce(old_state, event)

        self.previous_state = old_state
        self.current_state = new_state

        if new_state.status != old_state.status:
            self.state_start_time = time.time()
            self.logger.info(
                f"State transition: {old_state.status.value} -> "
                f"{new_state.status.value} ({type(event).__name__})",
            )

        if self.callbacks["on_state_change"]:
            try:
                self.callbacks["on_state_change"](old_state, new_state)
            except Exception as e:
                self.logger.error(f"Error in state change callback: {e}")

        return new_state

    def get_status_info(self) -> Dict:
        """Get detailed status information for debugging/monitoring"""
        state = self.current_state
        return {
            "current_state": state.status.value,
            "previous_state": (
                self.previous_state.status.value if self.previous_state else None
            ),
            "state_duration": self.get_state_duration(),
            "loading": state.loading,
            "has_file": state.has_file,
            "model": state.model.value,
            "error": state.error,
            "callbacks_registered": {
                name: callback is not None for name, callback in self.callbacks.items()
            },
        }
