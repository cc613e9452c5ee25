import pytest

from mood_fusion.catalog import MOOD_CATALOG
from mood_fusion.core import AffectivePoint
from mood_fusion.inference.classifier import classify_vector


def test_origin_is_neutral():
    res = classify_vector(AffectivePoint(0.0, 0.0))
    assert res.mood_name == "neutral"
    assert res.label == "Neutral"
    assert res.distance == 0.0


@pytest.mark.parametrize("key", list(MOOD_CATALOG.keys()))
def test_every_catalog_point_classifies_to_itself(key):
    res = classify_vector(MOOD_CATALOG[key].point)
    assert res.mood_name == key
    assert res.label == MOOD_CATALOG[key].label
    assert res.distance == pytest.approx(0.0)


def test_nearest_neighbour_and_distance():
    res = classify_vector((0.75, 0.85))
    assert res.mood_name == "excited"
    assert res.distance == pytest.approx((0.05 ** 2 + 0.05 ** 2) ** 0.5)

    assert classify_vector((-0.9, -0.9)).mood_name == "depressed"
    assert classify_vector([0.65, -0.5]).mood_name in {"calm", "peaceful"}


def test_tie_breaks_on_declaration_order():
    # equidistant from excited (0.8, 0.9) and happy (0.7, 0.6); excited is declared first
    res = classify_vector((0.75, 0.75))
    assert res.mood_name == "excited"
