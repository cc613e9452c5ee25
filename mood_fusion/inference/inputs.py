from datetime import datetime, timezone
from typing import Iterable, List

from mood_fusion.core import MoodInput
from mood_fusion.utils.config import API_SOURCE, DEFAULT_CONFIDENCE, DEFAULT_SOURCE, DEFAULT_WEIGHT

# Mood tokens are resolved lazily at fusion time, so building never rejects a token


def build_mood_input(mood, confidence: float = DEFAULT_CONFIDENCE, weight: float = DEFAULT_WEIGHT,
                     source: str = DEFAULT_SOURCE) -> MoodInput:
    return MoodInput(mood, confidence, weight, source, datetime.now(timezone.utc))


def parse_mood_input(raw) -> MoodInput:
    """Coerce a bare token or a ``{"mood": ...}`` mapping into a MoodInput.

    Missing or zero-valued confidence/weight fall back to the defaults and a
    missing source is tagged ``api``.
    """
    if isinstance(raw, MoodInput):
        return raw
    if isinstance(raw, str):
        return build_mood_input(raw)
    if isinstance(raw, dict) and raw.get("mood"):
        return build_mood_input(
            raw["mood"],
            raw.get("confidence") or DEFAULT_CONFIDENCE,
            raw.get("weight") or DEFAULT_WEIGHT,
            raw.get("source") or API_SOURCE,
        )
    raise ValueError(f"Invalid mood input: {raw!r}")


def parse_mood_inputs(raws: Iterable) -> List[MoodInput]:
    return [parse_mood_input(r) for r in raws]
