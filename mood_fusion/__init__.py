# Root package initializer for mood_fusion
# Re-exports the engine entry points for callers that only need fusion.

from mood_fusion.catalog import get_mood_vector, is_valid_mood, normalize_mood
from mood_fusion.inference.classifier import classify_vector
from mood_fusion.inference.fusion import fuse_moods
from mood_fusion.inference.inputs import build_mood_input

__all__ = [
    "build_mood_input",
    "classify_vector",
    "fuse_moods",
    "get_mood_vector",
    "is_valid_mood",
    "normalize_mood",
]
