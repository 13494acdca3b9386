"""
Selected File Model

The image chosen by the user, normalized to an in-memory binary payload.
"""

import mimetypes
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from prediction.constants import DEFAULT_CONTENT_TYPE, DEFAULT_FILENAME


class InvalidFileError(ValueError):
    """Raised when a picked item is not a usable binary payload"""


@dataclass(frozen=True)
class SelectedFile:
    """
    Represents one picked image.

    A new pick always builds a new SelectedFile; instances are never merged.
    """

    filename: str
    content: bytes = field(repr=False)
    content_type: str = DEFAULT_CONTENT_TYPE

    @property
    def size(self) -> int:
        return len(self.content)

    @property
    def suffix(self) -> str:
        return Path(self.filename).suffix.lower()

    def as_multipart(self):
        """(filename, bytes, content type) tuple as expected by requests' files="""
        return (self.filename, self.content, self.content_type)

    @classmethod
    def from_source(
        cls,
        source: Any,
        filename: Optional[str] = None,
        content_type: Optional[str] = None,
    ) -> "SelectedFile":
        """
        Build a SelectedFile from whatever the file picker produced.

        Accepted sources:
        - bytes, bytearray, memoryview
        - binary file-like objects (read() returning bytes), e.g. a
          Streamlit UploadedFile or an open(..., "rb") handle
        - a path (str or Path) to an existing file

        Raises:
            InvalidFileError: If the source cannot provide non-empty bytes

        Example:
            selected = SelectedFile.from_source(uploaded, filename=uploaded.name)
        """
        content = None

        if isinstance(source, (bytes, bytearray, memoryview)):
            content = bytes(source)

        elif isinstance(source, (str, Path)):
            path = Path(source)
            if not path.is_file():
                raise InvalidFileError(f"Not a file: {source}")
            content = path.read_bytes()
            filename = filename or path.name

        elif hasattr(source, "read"):
            if hasattr(source, "seek"):
                source.seek(0)
            data = source.read()
            if not isinstance(data, (bytes, bytearray)):
                raise InvalidFileError(
                    f"File object returned {type(data).__name__}, expected bytes",
                )
            content = bytes(data)
            filename = filename or _name_of(source)
            content_type = content_type or getattr(source, "type", None)

        if content is None:
            raise InvalidFileError(f"Unsupported file source: {type(source).__name__}")
        if not content:
            raise InvalidFileError("File is empty")

        filename = filename or DEFAULT_FILENAME
        if not content_type:
            content_type = mimetypes.guess_type(filename)[0] or DEFAULT_CONTENT_TYPE

        return cls(filename=filename, content=content, content_type=content_type)


def _name_of(source: Any) -> Optional[str]:
    name = getattr(source, "name", None)
    if isinstance(name, str) and name:
        return Path(name).name
    return None
