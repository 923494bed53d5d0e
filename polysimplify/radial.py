from __future__ import annotations
from typing import List, Sequence

import numpy as np

from polysimplify.distance import get_sq_dist


def radial_keep_indices(points: Sequence, sq_tolerance) -> List[int]:
    """
    Indices kept by the radial-distance filter.
    A point survives if it is farther than the tolerance from the previously
    *kept* point. First and last always survive.
    """
    n = len(points)
    if n <= 2:
        return list(range(n))

    keep = [0]
    prev = points[0]
    for i in range(1, n - 1):
        p = points[i]
        if get_sq_dist(p, prev) > sq_tolerance:
            keep.append(i)
            prev = p

    keep.append(n - 1)
    return keep


def simplify_radial_dist(points: Sequence, sq_tolerance) -> list:
    """
    Basic distance-based simplification, O(n) single pass.
    sq_tolerance: tolerance already squared
    """
    return [points[i] for i in radial_keep_indices(points, sq_tolerance)]


def radial_mask(points_xy: np.ndarray, sq_tolerance: float) -> np.ndarray:
    """
    Array form of the radial filter.
    points_xy: (N,2)
    returns keep mask (N,) bool
    """
    pts = np.asarray(points_xy, dtype=float)
    n = pts.shape[0]
    keep = np.zeros(n, dtype=bool)
    if n <= 2:
        keep[:] = True
        return keep

    keep[0] = True
    keep[-1] = True

    # sequential by nature: each test depends on the last kept point
    px, py = pts[0]
    for i in range(1, n - 1):
        dx = pts[i, 0] - px
        dy = pts[i, 1] - py
        if dx * dx + dy * dy > sq_tolerance:
            keep[i] = True
            px, py = pts[i]
    return keep
