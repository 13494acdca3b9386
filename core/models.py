"""
Core Models

Data classes shared by the state machine and the UI.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from numbers import Real
from typing import Any, Optional

from core.labels import format_confidence, translate_label


@dataclass(frozen=True)
class PredictionResult:
    """
    Last successful prediction.

    Attributes:
        label: Raw code returned by the service (e.g. "half_ripened")
        display_label: Translated label shown to the user
        confidence: Confidence as returned by the service, never rescaled
    """

    label: str
    display_label: str
    confidence: Optional[float] = None

    @property
    def confidence_text(self) -> str:
        return format_confidence(self.confidence)

    @classmethod
    def from_payload(cls, payload: Any) -> Optional["PredictionResult"]:
        """
        Build a result from a response body.

        Returns None when the body has no usable prediction field.
        Confidence is kept only when numeric.

        Example:
            PredictionResult.from_payload({"prediction": "green", "confidence": 0.87})
            # PredictionResult(label="green", display_label="Green", confidence=0.87)
        """
        if not isinstance(payload, Mapping):
            return None

        label = payload.get("prediction")
        if not isinstance(label, str) or not label:
            return None

        confidence = payload.get("confidence")
        if isinstance(confidence, bool) or not isinstance(confidence, Real):
            confidence = None

        return cls(
            label=label,
            display_label=translate_label(label),
            confidence=confidence,
        )
