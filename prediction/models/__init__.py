"""
Models Package

Data classes for the prediction module.
"""

from prediction.models.selected_file import InvalidFileError, SelectedFile

__all__ = [
    "InvalidFileError",
    "SelectedFile",
]
