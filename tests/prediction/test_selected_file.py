"""
Selected File Tests

Validation of picked items into binary payloads.
"""

import io

import pytest

from prediction.models.selected_file import InvalidFileError, SelectedFile


class FakeUploadedFile(io.BytesIO):
    """Mimics Streamlit's UploadedFile (BytesIO with name and type)"""

    def __init__(self, data, name, type):
        super().__init__(data)
        self.name = name
        self.type = type


# =============================================================================
# ACCEPTED SOURCES
# =============================================================================


@pytest.mark.unit
def test_from_bytes():
    selected = SelectedFile.from_source(b"abc", filename="a.jpg")

    assert selected.content == b"abc"
    assert selected.filename == "a.jpg"
    assert selected.content_type == "image/jpeg"
    assert selected.size == 3


@pytest.mark.unit
def test_from_bytes_without_name():
    selected = SelectedFile.from_source(bytearray(b"abc"))

    assert selected.filename == "image"
    assert selected.content_type == "application/octet-stream"


@pytest.mark.unit
def test_from_path(image_file):
    selected = SelectedFile.from_source(str(image_file))

    assert selected.filename == "tomato.png"
    assert selected.content == image_file.read_bytes()


@pytest.mark.unit
def test_from_uploaded_file_object():
    uploaded = FakeUploadedFile(b"webp data", name="fruit.webp", type="image/webp")
    uploaded.read()  # already consumed once, must be rewound

    selected = SelectedFile.from_source(uploaded)

    assert selected.content == b"webp data"
    assert selected.filename == "fruit.webp"
    assert selected.content_type == "image/webp"


@pytest.mark.unit
def test_explicit_content_type_wins():
    selected = SelectedFile.from_source(b"x", filename="a.png", content_type="image/x")

    assert selected.content_type == "image/x"


@pytest.mark.unit
def test_as_multipart():
    selected = SelectedFile.from_source(b"x", filename="a.png")

    assert selected.as_multipart() == ("a.png", b"x", "image/png")


# =============================================================================
# REJECTED SOURCES
# =============================================================================


@pytest.mark.unit
@pytest.mark.parametrize("source", [None, 42, {"file": "x"}, ["a"]])
def test_unsupported_sources(source):
    with pytest.raises(InvalidFileError):
        SelectedFile.from_source(source)


@pytest.mark.unit
def test_empty_payload_rejected():
    with pytest.raises(InvalidFileError):
        SelectedFile.from_source(b"")


@pytest.mark.unit
def test_missing_path_rejected(tmp_path):
    with pytest.raises(InvalidFileError):
        SelectedFile.from_source(tmp_path / "missing.jpg")


@pytest.mark.unit
def test_directory_rejected(tmp_path):
    with pytest.raises(InvalidFileError):
        SelectedFile.from_source(tmp_path)


@pytest.mark.unit
def test_text_stream_rejected():
    with pytest.raises(InvalidFileError):
        SelectedFile.from_source(io.StringIO("not binary"))
