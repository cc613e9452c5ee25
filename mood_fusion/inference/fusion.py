import numpy as np
from collections.abc import Sequence
from typing import List, Optional

from mood_fusion.catalog import get_mood_vector, normalize_mood
from mood_fusion.core import AffectivePoint, FusionResult, MoodInput
from mood_fusion.inference.classifier import classify_vector
from mood_fusion.utils.config import CONFIDENCE_CEILING, CONFIDENCE_FLOOR, FUSION_METHOD
from mood_fusion.utils.logger import get_logger

logger = get_logger("fusion")


def _malformed(inputs) -> Optional[str]:
    if isinstance(inputs, (str, bytes, bytearray)) or not isinstance(inputs, Sequence):
        return f"Mood inputs must be a sequence of MoodInput, got {type(inputs).__name__}"
    for i, item in enumerate(inputs):
        if not isinstance(item, MoodInput):
            return f"Mood input at position {i} is not a MoodInput: {item!r}"
    return None


def _passthrough(item: MoodInput) -> FusionResult:
    entry = get_mood_vector(item.mood)
    return FusionResult(entry.point, entry.label, item.confidence, "single", details={"input_count": 1})


def _weighted_fusion(inputs: List[MoodInput]) -> FusionResult:
    keys = [normalize_mood(item.mood) for item in inputs]
    points = np.array([get_mood_vector(k).point for k in keys], dtype=np.float64)
    confs = np.array([item.confidence for item in inputs], dtype=np.float64)
    base = np.array([item.weight for item in inputs], dtype=np.float64)

    # Effective weight = confidence x caller weight; weights are finite and >= 0 (see MoodInput)
    eff = confs * base
    fallback = float(eff.max()) == 0.0
    if fallback:
        # Nothing carries weight: plain centroid, minimum confidence
        weights = np.full(len(inputs), 1.0 / len(inputs))
        confidence = CONFIDENCE_FLOOR
    else:
        # Rescale by the largest weight first so huge weights cannot overflow the sum
        scaled = eff / eff.max()
        weights = scaled / scaled.sum()
        # base.max() > 0 whenever some effective weight is non-zero
        rel = base / base.max()
        confidence = float((rel * confs).sum() / rel.sum())
        confidence = max(CONFIDENCE_FLOOR, min(CONFIDENCE_CEILING, confidence))

    fused = np.clip((weights[:, None] * points).sum(axis=0), -1.0, 1.0)
    vector = AffectivePoint(float(fused[0]), float(fused[1]))
    match = classify_vector(vector)

    details = {
        "input_count": len(inputs),
        "fusion_method": FUSION_METHOD,
        "closest_mood_distance": match.distance,
        "used_weights": [float(w) for w in weights],
        "fallback_applied": fallback,
    }
    return FusionResult(vector, match.label, confidence, "fusion", contributing_moods=keys, details=details)


def fuse_moods(inputs) -> FusionResult:
    """Fuse an ordered sequence of MoodInput into one affective estimate.

    Never raises. A malformed call yields an ``error`` result, an empty
    sequence the neutral ``default`` result, a single input passes through
    verbatim as ``single``, and anything longer is a confidence-weighted
    centroid labelled by the nearest catalog mood.
    """
    problem = _malformed(inputs)
    if problem:
        logger.warning(problem)
        return FusionResult.failure(problem)
    if len(inputs) == 0:
        return FusionResult.default()

    try:
        if len(inputs) == 1:
            res = _passthrough(inputs[0])
        else:
            res = _weighted_fusion(list(inputs))
    except Exception as e:
        logger.exception("Mood fusion failed")
        return FusionResult.failure(str(e))

    logger.debug(f"Fused {len(inputs)} input(s): {res.label} | source={res.source} | confidence={res.confidence:.3f}")
    return res
