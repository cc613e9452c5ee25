# Mood Fusion Engine data model

import math
from datetime import datetime
from typing import Dict, List, NamedTuple, Optional

from mood_fusion.utils.config import CONFIDENCE_FLOOR, DEFAULT_MOOD


class AffectivePoint(NamedTuple):
    """Position in the valence/arousal circumplex, both axes in [-1, 1]."""

    valence: float
    arousal: float

    def to_dict(self) -> Dict[str, float]:
        return {"valence": self.valence, "arousal": self.arousal}


ORIGIN = AffectivePoint(0.0, 0.0)


class CatalogEntry(NamedTuple):
    key: str
    label: str
    point: AffectivePoint


class _MoodInputFields(NamedTuple):
    mood: object
    confidence: float
    weight: float
    source: str
    timestamp: datetime


class MoodInput(_MoodInputFields):
    """One contributor's observation, clamped at construction and read-only afterwards.

    Confidence is clamped to [0, 1] (NaN becomes 0). Weight is floored at 0;
    NaN or infinite weights are treated as 0, i.e. a non-participating input.
    """

    __slots__ = ()

    def __new__(cls, mood, confidence: float, weight: float, source: str, timestamp: datetime):
        confidence = float(confidence)
        confidence = max(0.0, min(1.0, confidence)) if not math.isnan(confidence) else 0.0
        weight = float(weight)
        weight = max(0.0, weight) if math.isfinite(weight) else 0.0
        return super().__new__(cls, mood, confidence, weight, source, timestamp)

    def to_dict(self):
        return {
            "mood": self.mood,
            "confidence": self.confidence,
            "weight": self.weight,
            "source": self.source,
            "timestamp": self.timestamp.isoformat(),
        }


class FusionResult:
    """Tagged fusion outcome; ``source`` is one of single, fusion, default or error.

    ``contributing_moods`` is only set for fusion results and ``error`` only for
    error results, so callers branch on ``source`` instead of catching.
    """

    def __init__(
        self,
        vector: AffectivePoint,
        label: str,
        confidence: float,
        source: str,
        contributing_moods: Optional[List[str]] = None,
        error: Optional[str] = None,
        details: Dict = None,
    ):
        self.vector = vector
        self.label = label
        self.confidence = confidence
        self.source = source
        self.contributing_moods = contributing_moods
        self.error = error
        self.details = details or {}

    @classmethod
    def default(cls) -> "FusionResult":
        return cls(ORIGIN, DEFAULT_MOOD.capitalize(), 1.0, "default", details={"input_count": 0})

    @classmethod
    def failure(cls, message: str) -> "FusionResult":
        return cls(ORIGIN, DEFAULT_MOOD.capitalize(), CONFIDENCE_FLOOR, "error", error=message)

    def __repr__(self):
        return f"FusionResult(label={self.label!r}, source={self.source!r}, confidence={self.confidence:.3f})"

    def to_dict(self):
        out = {
            "label": self.label,
            "vector": self.vector.to_dict(),
            "confidence": self.confidence,
            "source": self.source,
        }
        if self.contributing_moods is not None:
            out["contributing_moods"] = list(self.contributing_moods)
        if self.error is not None:
            out["error"] = self.error
        out["details"] = self.details
        return out
