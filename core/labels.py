"""
Label Helpers

Pure display helpers for prediction output.
"""

from typing import Optional

from core.constants import (
    CONFIDENCE_FORMAT,
    CONFIDENCE_MISSING_TEXT,
    LABEL_TRANSLATIONS,
)


def translate_label(raw_label):
    """
    Translate a raw prediction code into display text.

    Unknown codes (and non-string values) are returned unchanged.

    Example:
        translate_label("half_ripened")  # "Half ripened"
        translate_label("rotten")        # "rotten"
    """
    if isinstance(raw_label, str):
        return LABEL_TRANSLATIONS.get(raw_label, raw_label)
    return raw_label


def format_confidence(confidence: Optional[float]) -> str:
    """Format confidence with two decimals, no unit (scale is service-defined)"""
    if confidence is None:
        return CONFIDENCE_MISSING_TEXT
    return CONFIDENCE_FORMAT.format(confidence)
