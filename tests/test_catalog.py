import pytest

from mood_fusion.catalog import (
    EMOJI_TO_MOOD,
    MOOD_ALIASES,
    MOOD_CATALOG,
    get_mood_mappings,
    get_mood_vector,
    is_valid_mood,
    normalize_mood,
    vector_of,
)


def test_catalog_has_sixteen_entries_within_range():
    assert len(MOOD_CATALOG) == 16
    for key, entry in MOOD_CATALOG.items():
        assert entry.key == key
        assert -1.0 <= entry.point.valence <= 1.0
        assert -1.0 <= entry.point.arousal <= 1.0


def test_neutral_is_origin_and_strictly_closest():
    assert MOOD_CATALOG["neutral"].point == (0.0, 0.0)
    others = [e for k, e in MOOD_CATALOG.items() if k != "neutral"]
    assert all(e.point.valence ** 2 + e.point.arousal ** 2 > 0 for e in others)


def test_basic_vector_lookup():
    happy = get_mood_vector("happy")
    assert happy.point.valence == 0.7
    assert happy.point.arousal == 0.6
    assert happy.label == "Happy"
    assert vector_of("calm").point == (0.6, -0.4)


@pytest.mark.parametrize("token,expected", [
    ("happy", "happy"),
    ("HAPPY", "happy"),
    ("  Calm ", "calm"),
    ("joyful", "happy"),
    ("Furious", "angry"),
    ("mad", "angry"),
    ("elated", "excited"),
    ("\U0001F622", "sad"),
    ("\U0001F60C", "calm"),
    ("totallyfakemood", "neutral"),
    ("", "neutral"),
    (None, "neutral"),
    (42, "neutral"),
])
def test_normalize_mood(token, expected):
    assert normalize_mood(token) == expected


def test_is_valid_mood():
    assert is_valid_mood("neutral")
    assert is_valid_mood("Sad")
    assert is_valid_mood("joyful")
    assert is_valid_mood("\U0001F630")
    assert not is_valid_mood("nuetral")
    assert not is_valid_mood("")
    assert not is_valid_mood("   ")
    assert not is_valid_mood("xyz123")
    assert not is_valid_mood(None)


def test_alias_and_emoji_targets_are_canonical():
    for target in list(MOOD_ALIASES.values()) + list(EMOJI_TO_MOOD.values()):
        assert target in MOOD_CATALOG


def test_catalog_is_read_only_and_mappings_are_copies():
    with pytest.raises(TypeError):
        MOOD_CATALOG["new"] = MOOD_CATALOG["happy"]
    mappings = get_mood_mappings()
    mappings.pop("happy")
    assert "happy" in MOOD_CATALOG
