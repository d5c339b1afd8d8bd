from __future__ import annotations

from typing import AbstractSet, List, Sequence

import numpy as np

from .models import WindowSet


def jaccard_similarity(first: AbstractSet[str], second: AbstractSet[str]) -> float:
    """Intersection over union of two token sets; 0.0 when both are empty."""
    union = first | second
    if not union:
        return 0.0
    return len(first & second) / len(union)


def similarity_series(windows: Sequence[WindowSet]) -> List[float]:
    """Similarity of every adjacent window pair, in window order."""
    return [
        jaccard_similarity(previous.tokens, current.tokens)
        for previous, current in zip(windows, windows[1:])
    ]


def rate_of_change(similarities: Sequence[float]) -> List[float]:
    """Signed first difference of the similarity series."""
    if len(similarities) < 2:
        return []
    values = np.asarray(similarities, dtype=float)
    return [float(delta) for delta in np.diff(values)]
