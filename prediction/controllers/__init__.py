"""
Controllers Package

High-level upload coordinators.
"""

from prediction.controllers.upload_controller import UploadController

__all__ = [
    "UploadController",
]
