import numpy as np
from typing import NamedTuple, Sequence

from mood_fusion.catalog import MOOD_CATALOG

# 1-nearest-neighbour over the fixed catalog points, rows in catalog declaration order
_KEYS = list(MOOD_CATALOG.keys())
_POINTS = np.array([MOOD_CATALOG[k].point for k in _KEYS], dtype=np.float64)


class Classification(NamedTuple):
    mood_name: str
    label: str
    distance: float


def classify_vector(vector: Sequence[float]) -> Classification:
    v = np.asarray(vector, dtype=np.float64).reshape(2)
    dists = np.sqrt(((_POINTS - v) ** 2).sum(axis=1))
    # argmin returns the first index among equal minima
    idx = int(np.argmin(dists))
    key = _KEYS[idx]
    return Classification(key, MOOD_CATALOG[key].label, float(dists[idx]))
