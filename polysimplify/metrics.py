from __future__ import annotations
from typing import Sequence

import numpy as np

from polysimplify.distance import get_sq_seg_dist
from polysimplify.points import coords


def max_deviation(points: Sequence, kept_indices: Sequence[int]) -> float:
    """
    Largest distance from an input point to the output segment spanning it.
    kept_indices: ascending indices of the surviving points (simplify_indices)
    Returns 0.0 when fewer than 2 points are kept.
    """
    kept = list(kept_indices)
    if len(kept) < 2:
        return 0.0
    if any(b <= a for a, b in zip(kept, kept[1:])):
        raise ValueError("kept_indices must be strictly ascending")

    worst = 0.0
    for a, b in zip(kept, kept[1:]):
        for i in range(a + 1, b):
            sq = float(get_sq_seg_dist(points[i], points[a], points[b]))
            if sq > worst:
                worst = sq
    return float(np.sqrt(worst))


def compression_ratio(n_in: int, n_out: int) -> float:
    """n_out / n_in, 1.0 for empty input."""
    if n_in <= 0:
        return 1.0
    return float(n_out) / float(n_in)


def path_length(points: Sequence) -> float:
    """Total Euclidean length of the polyline."""
    if len(points) < 2:
        return 0.0
    P = np.array([coords(p) for p in points], dtype=float)
    return float(np.sum(np.linalg.norm(np.diff(P, axis=0), axis=1)))
