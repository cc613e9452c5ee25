from typing import Dict, Sequence

from mood_fusion.core import FusionResult, MoodInput
from mood_fusion.inference.fusion import fuse_moods

# Blend two groups of participants (e.g. two connected rooms) into one shared mood


def blend_moods(inputs_a: Sequence[MoodInput], inputs_b: Sequence[MoodInput]) -> Dict:
    inputs_a = list(inputs_a)
    inputs_b = list(inputs_b)
    total = len(inputs_a) + len(inputs_b)

    group_a = fuse_moods(inputs_a) if inputs_a else FusionResult.default()
    group_b = fuse_moods(inputs_b) if inputs_b else FusionResult.default()
    fused = fuse_moods(inputs_a + inputs_b)

    ratio_a = len(inputs_a) / total if total else 0.5
    ratio_b = len(inputs_b) / total if total else 0.5
    return {
        "fused_mood": fused,
        "group_a_mood": group_a,
        "group_b_mood": group_b,
        "blend_ratio": ratio_a,
        "participant_count": total,
        "breakdown": {
            "group_a": {"participants": len(inputs_a), "weight": ratio_a},
            "group_b": {"participants": len(inputs_b), "weight": ratio_b},
        },
    }
