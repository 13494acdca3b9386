"""
Streamlit Upload Page

Renders one UploadController: image picker, preview, optional model
selector, upload trigger and the prediction or error.

The request runs on the controller's worker thread. While it is in flight
the page shows the trigger disabled and a fragment polls until the request
settles, then reruns the whole page.

Usage:
    streamlit run ui/streamlit_app.py
"""

import sys
from pathlib import Path

import streamlit as st

# Add project root to path when launched with `streamlit run`
sys.path.insert(0, str(Path(__file__).parent.parent))

from config.logging_setup import setup_logging  # noqa: E402
from core.constants import ModelVariant  # noqa: E402
from core.state_machine import UploadViewState  # noqa: E402
from prediction import UploadController  # noqa: E402

PAGE_TITLE = "Tomato Ripeness Prediction"
CONTROLLER_KEY = "upload_controller"
FILE_KEY = "image_file"
MODEL_KEY = "model_choice"

# Seconds between checks while a request is in flight
POLL_INTERVAL = 0.5


def get_controller() -> UploadController:
    """
    One controller per browser session.

    The controller releases its previews when the session state drops it,
    so nothing here keeps it alive.
    """
    if CONTROLLER_KEY not in st.session_state:
        st.session_state[CONTROLLER_KEY] = UploadController()
    return st.session_state[CONTROLLER_KEY]


def _on_file_change() -> None:
    controller = get_controller()
    uploaded = st.session_state.get(FILE_KEY)
    if uploaded is None:
        controller.clear_file()
        return
    controller.select_file(
        uploaded,
        filename=uploaded.name,
        content_type=uploaded.type,
    )


def _on_model_change() -> None:
    get_controller().select_model(st.session_state[MODEL_KEY])


def _on_upload_click() -> None:
    # Runs before the rerun, so the page below already sees loading=True
    get_controller().upload_in_background()


def render_model_selector(state: UploadViewState) -> None:
    options = [variant.value for variant in ModelVariant]
    st.radio(
        "Model",
        options=options,
        index=options.index(state.model.value),
        key=MODEL_KEY,
        on_change=_on_model_change,
        horizontal=True,
    )


@st.fragment(run_every=POLL_INTERVAL)
def watch_request() -> None:
    """Rendered only while loading; reruns the page once the request settles"""
    if not get_controller().is_loading:
        st.rerun()
    st.info("Predicting...")


def render_result(state: UploadViewState) -> None:
    result = state.result
    if result is None:
        return
    st.success(f"Prediction: {result.display_label}")
    st.write(f"Confidence: {result.confidence_text}")


def main() -> None:
    setup_logging()
    st.set_page_config(page_title=PAGE_TITLE)

    controller = get_controller()
    st.title("Upload an Image for Prediction")

    if controller.model_selector_enabled:
        render_model_selector(controller.state)

    st.file_uploader("Select Image", key=FILE_KEY, on_change=_on_file_change)

    state = controller.state
    if state.preview is not None and controller.previews.is_active(state.preview):
        st.image(str(state.preview.path), caption="Preview")

    if state.error:
        st.error(state.error)

    st.button(
        "Upload and Predict",
        type="primary",
        disabled=not state.can_upload,
        on_click=_on_upload_click,
    )

    if state.loading:
        watch_request()

    render_result(state)


if __name__ == "__main__":
    main()
