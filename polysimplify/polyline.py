from __future__ import annotations
from typing import List, Sequence

import numpy as np

from polysimplify.distance import get_sq_seg_dist, sq_seg_dist_array

# work-stack task kinds
_RANGE = 0
_EMIT = 1


def _farthest(points: Sequence, first: int, last: int, sq_tolerance):
    """
    Interior index of max squared segment distance to (points[first], points[last]).
    Only distances above sq_tolerance count; on ties the first index wins.
    Returns (index, max_sq) with index = -1 when nothing exceeds the tolerance.
    """
    a, b = points[first], points[last]
    max_sq = sq_tolerance
    index = -1
    for i in range(first + 1, last):
        sq = get_sq_seg_dist(points[i], a, b)
        if sq > max_sq:
            index = i
            max_sq = sq
    return index, max_sq


def douglas_peucker_indices(points: Sequence, sq_tolerance) -> List[int]:
    """
    Ramer-Douglas-Peucker on index ranges, with an explicit work stack instead
    of recursion. Indices come out ascending: for every split the left range
    is fully emitted, then the anchor, then the right range.
    """
    n = len(points)
    if n <= 2:
        return list(range(n))

    last = n - 1
    out = [0]
    stack = [(_RANGE, 0, last)]
    while stack:
        kind, i, j = stack.pop()
        if kind == _EMIT:
            out.append(i)
            continue

        index, _ = _farthest(points, i, j, sq_tolerance)
        if index < 0:
            continue

        # LIFO: pushed right-to-left so the left range pops first
        if j - index > 1:
            stack.append((_RANGE, index, j))
        stack.append((_EMIT, index, index))
        if index - i > 1:
            stack.append((_RANGE, i, index))

    out.append(last)
    return out


def simplify_douglas_peucker(points: Sequence, sq_tolerance) -> list:
    """
    Simplification using Ramer-Douglas-Peucker.
    sq_tolerance: tolerance already squared
    """
    return [points[i] for i in douglas_peucker_indices(points, sq_tolerance)]


def rdp_mask(points_xy: np.ndarray, sq_tolerance: float) -> np.ndarray:
    """
    Array form of the refiner. Same splits and tie-breaking as
    douglas_peucker_indices, with the interior scan vectorized.
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

    stack = [(0, n - 1)]
    while stack:
        i, j = stack.pop()
        if j - i < 2:
            continue

        d2 = sq_seg_dist_array(pts[i + 1:j], pts[i], pts[j])
        # only distances above the tolerance compete; NaN never wins a split
        d2 = np.where(d2 > sq_tolerance, d2, -np.inf)
        k = int(np.argmax(d2))  # first max on ties
        if d2[k] > sq_tolerance:
            kmax = i + 1 + k
            keep[kmax] = True
            stack.append((i, kmax))
            stack.append((kmax, j))

    return keep


def rdp(points_xy: np.ndarray, epsilon: float) -> np.ndarray:
    """
    Rows of points_xy kept by rdp_mask, with epsilon squared once up front.
    Inputs of 0, 1 or 2 rows come back as a copy.
    """
    pts = np.asarray(points_xy)
    if pts.shape[0] <= 2:
        return pts.copy()
    return pts[rdp_mask(pts, float(epsilon) * float(epsilon))]
