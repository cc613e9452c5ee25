"""Canonical mood catalog and token normalization.

Each mood sits at a fixed point of Russell's circumplex (valence, arousal).
The tables are built once at import time and never mutated.
"""

from types import MappingProxyType
from typing import Dict

from mood_fusion.core import AffectivePoint, CatalogEntry
from mood_fusion.utils.config import DEFAULT_MOOD
from mood_fusion.utils.logger import get_logger

logger = get_logger("catalog")

# Declaration order is the classifier's tie-break order
_MOODS = [
    ("excited", "Excited", 0.8, 0.9),
    ("happy", "Happy", 0.7, 0.6),
    ("surprised", "Surprised", 0.3, 0.8),
    ("calm", "Calm", 0.6, -0.4),
    ("content", "Content", 0.5, -0.2),
    ("peaceful", "Peaceful", 0.7, -0.6),
    ("sad", "Sad", -0.6, -0.4),
    ("depressed", "Depressed", -0.8, -0.7),
    ("sleepy", "Sleepy", -0.1, -0.8),
    ("bored", "Bored", -0.3, -0.6),
    ("angry", "Angry", -0.7, 0.8),
    ("anxious", "Anxious", -0.5, 0.7),
    ("frustrated", "Frustrated", -0.6, 0.6),
    ("neutral", "Neutral", 0.0, 0.0),
    ("thoughtful", "Thoughtful", 0.1, 0.2),
    ("focused", "Focused", 0.2, 0.4),
]

MOOD_CATALOG = MappingProxyType({
    key: CatalogEntry(key, label, AffectivePoint(valence, arousal))
    for key, label, valence, arousal in _MOODS
})

MOOD_ALIASES = MappingProxyType({
    "joyful": "happy",
    "elated": "excited",
    "furious": "angry",
    "mad": "angry",
})

EMOJI_TO_MOOD = MappingProxyType({
    "\U0001F60A": "happy",       # smiling face with smiling eyes
    "\U0001F622": "sad",         # crying face
    "\U0001F620": "angry",       # angry face
    "\U0001F634": "sleepy",      # sleeping face
    "\U0001F914": "thoughtful",  # thinking face
    "\U0001F60D": "excited",     # heart eyes
    "\U0001F92F": "surprised",   # exploding head
    "\U0001F60C": "calm",        # relieved face
    "\U0001F610": "neutral",     # neutral face
    "\U0001F630": "anxious",     # anxious face with sweat
})


def _lookup(token):
    if not isinstance(token, str):
        return None
    if token in EMOJI_TO_MOOD:
        return EMOJI_TO_MOOD[token]
    key = token.strip().lower()
    if key in MOOD_CATALOG:
        return key
    return MOOD_ALIASES.get(key)


def normalize_mood(token) -> str:
    """Map a raw token (key, alias or emoji, any case) to a canonical key.

    Unknown or malformed tokens fall back to ``neutral`` instead of raising.
    """
    key = _lookup(token)
    if key is None:
        logger.debug(f"Unknown mood token {token!r}, falling back to '{DEFAULT_MOOD}'")
        return DEFAULT_MOOD
    return key


def is_valid_mood(token) -> bool:
    return _lookup(token) is not None


def vector_of(key: str) -> CatalogEntry:
    return MOOD_CATALOG[key]


def get_mood_vector(token) -> CatalogEntry:
    return vector_of(normalize_mood(token))


def get_mood_mappings() -> Dict[str, CatalogEntry]:
    return dict(MOOD_CATALOG)
