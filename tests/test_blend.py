import pytest

from mood_fusion.inference.blend import blend_moods
from mood_fusion.inference.inputs import build_mood_input


def test_blend_two_groups():
    room_a = [build_mood_input("happy", 0.9), build_mood_input("excited", 0.8)]
    room_b = [build_mood_input("sad", 0.7)]
    res = blend_moods(room_a, room_b)

    assert res["participant_count"] == 3
    assert res["blend_ratio"] == pytest.approx(2 / 3)
    assert res["breakdown"]["group_b"] == {"participants": 1, "weight": pytest.approx(1 / 3)}
    assert res["group_a_mood"].source == "fusion"
    assert res["group_b_mood"].source == "single"
    assert res["group_b_mood"].label == "Sad"
    assert res["fused_mood"].contributing_moods == ["happy", "excited", "sad"]


def test_blend_with_empty_group():
    res = blend_moods([], [build_mood_input("calm", 0.6)])
    assert res["group_a_mood"].source == "default"
    assert res["fused_mood"].source == "single"
    assert res["blend_ratio"] == 0.0


def test_blend_both_empty():
    res = blend_moods([], [])
    assert res["participant_count"] == 0
    assert res["blend_ratio"] == 0.5
    assert res["fused_mood"].source == "default"
    assert res["fused_mood"].label == "Neutral"
