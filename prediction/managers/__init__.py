"""
Managers Package

Resource managers for the prediction module.
"""

from prediction.managers.preview_manager import PreviewManager, PreviewReference

__all__ = [
    "PreviewManager",
    "PreviewReference",
]
