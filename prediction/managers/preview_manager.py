"""
Preview Manager

Creates and releases local preview files for selected images.

Every preview is a file in a directory owned by this manager. A preview
must be revoked once it is superseded; cleanup() removes everything that
is left, including the directory if the manager created it.
"""

import logging
import shutil
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional
from uuid import uuid4

from config.settings import PREVIEW_DIR, PREVIEW_FILE_PREFIX
from prediction.constants import DEFAULT_PREVIEW_SUFFIX
from prediction.models.selected_file import SelectedFile


@dataclass(frozen=True)
class PreviewReference:
    """Revocable handle to a rendered preview"""

    preview_id: str
    path: Path

    @property
    def uri(self) -> str:
        return self.path.resolve().as_uri()


class PreviewManager:
    """
    Tracks preview files for one upload component.

    Usage:
        manager = PreviewManager()
        preview = manager.create(selected_file)
        ...
        manager.revoke(preview)
        manager.cleanup()
    """

    def __init__(self, base_dir: Optional[Path] = None):
        """
        Initialize preview manager.

        Args:
            base_dir: Directory for preview files. None uses PREVIEW_DIR from
                      settings, or a private temp dir created on first use.
        """
        self.logger = logging.getLogger(__name__)

        configured = base_dir or (Path(PREVIEW_DIR) if PREVIEW_DIR else None)
        self._base_dir: Optional[Path] = Path(configured) if configured else None
        self._owns_dir = self._base_dir is None
        self._active: Dict[str, PreviewReference] = {}

    @property
    def base_dir(self) -> Optional[Path]:
        return self._base_dir

    @property
    def active_count(self) -> int:
        return len(self._active)

    def _ensure_dir(self) -> Path:
        if self._base_dir is None:
            self._base_dir = Path(tempfile.mkdtemp(prefix="ripeness_previews_"))
            self.logger.debug(f"Created preview directory: {self._base_dir}")
        else:
            self._base_dir.mkdir(parents=True, exist_ok=True)
        return self._base_dir

    def create(self, selected_file: SelectedFile) -> PreviewReference:
        """
        Write a preview file for the selected image.

        Raises:
            OSError: If the preview cannot be written
        """
        directory = self._ensure_dir()
        preview_id = uuid4().hex
        suffix = selected_file.suffix or DEFAULT_PREVIEW_SUFFIX
        path = directory / f"{PREVIEW_FILE_PREFIX}{preview_id}{suffix}"
        path.write_bytes(selected_file.content)

        preview = PreviewReference(preview_id=preview_id, path=path)
        self._active[preview_id] = preview
        self.logger.debug(f"Preview created: {path.name}")
        return preview

    def revoke(self, preview: Optional[PreviewReference]) -> bool:
        """
        Release a preview. Unknown or already revoked previews are ignored.

        Returns:
            True if a preview was released
        """
        if preview is None or preview.preview_id not in self._active:
            return False

        del self._active[preview.preview_id]
        try:
            preview.path.unlink()
        except FileNotFoundError:
            pass
        except OSError as e:
            self.logger.warning(f"Could not delete preview {preview.path}: {e}")
        self.logger.debug(f"Preview revoked: {preview.path.name}")
        return True

    def is_active(self, preview: PreviewReference) -> bool:
        return preview.preview_id in self._active

    def cleanup(self) -> None:
        """Revoke all previews and remove the directory if we created it"""
        for preview in list(self._active.values()):
            self.revoke(preview)

        if self._owns_dir and self._base_dir is not None:
            shutil.rmtree(self._base_dir, ignore_errors=True)
            self.logger.debug(f"Removed preview directory: {self._base_dir}")
            self._base_dir = None
