"""
Preview Manager Tests

Preview files are created per selection and released when superseded.
"""

import pytest

from prediction.managers.preview_manager import PreviewManager
from prediction.models.selected_file import SelectedFile


@pytest.fixture
def selected():
    return SelectedFile.from_source(b"image bytes", filename="tomato.jpg")


@pytest.mark.unit
def test_create_writes_file(preview_manager, selected):
    preview = preview_manager.create(selected)

    assert preview.path.read_bytes() == b"image bytes"
    assert preview.path.suffix == ".jpg"
    assert preview.uri.startswith("file://")
    assert preview_manager.is_active(preview)
    assert preview_manager.active_count == 1


@pytest.mark.unit
def test_revoke_deletes_file(preview_manager, selected):
    preview = preview_manager.create(selected)

    assert preview_manager.revoke(preview) is True
    assert not preview.path.exists()
    assert preview_manager.active_count == 0


@pytest.mark.unit
def test_revoke_twice_or_none(preview_manager, selected):
    preview = preview_manager.create(selected)
    preview_manager.revoke(preview)

    assert preview_manager.revoke(preview) is False
    assert preview_manager.revoke(None) is False


@pytest.mark.unit
def test_repeated_selections_do_not_accumulate(preview_manager, selected):
    preview = None
    for _ in range(10):
        preview_manager.revoke(preview)
        preview = preview_manager.create(selected)

    assert preview_manager.active_count == 1
    assert len(list(preview_manager.base_dir.iterdir())) == 1


@pytest.mark.unit
def test_private_temp_dir_removed_on_cleanup(selected):
    manager = PreviewManager()
    preview = manager.create(selected)
    directory = manager.base_dir

    manager.cleanup()

    assert not preview.path.exists()
    assert not directory.exists()
    assert manager.base_dir is None


@pytest.mark.unit
def test_given_dir_kept_on_cleanup(tmp_path, selected):
    manager = PreviewManager(base_dir=tmp_path)
    manager.create(selected)

    manager.cleanup()

    assert tmp_path.exists()
    assert list(tmp_path.iterdir()) == []
