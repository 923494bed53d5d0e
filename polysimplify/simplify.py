from __future__ import annotations
import logging
from typing import List, Sequence

import numpy as np

from polysimplify.config import DEFAULT_TOLERANCE, DEFAULT_HIGHEST_QUALITY
from polysimplify.radial import radial_keep_indices, radial_mask
from polysimplify.polyline import douglas_peucker_indices, rdp_mask

logger = logging.getLogger(__name__)


def _sq_tolerance(tolerance):
    if tolerance < 0:
        # squaring drops the sign, so this runs as abs(tolerance)
        logger.warning("negative tolerance %r behaves as %r", tolerance, -tolerance)
    return tolerance * tolerance


def simplify_indices(
    points: Sequence,
    tolerance=DEFAULT_TOLERANCE,
    highest_quality: bool = DEFAULT_HIGHEST_QUALITY,
) -> List[int]:
    """
    Indices (ascending) of the input points that survive simplify(...).
    """
    n = len(points)
    if n <= 2:
        return list(range(n))

    sq_tolerance = _sq_tolerance(tolerance)

    if highest_quality:
        idx = douglas_peucker_indices(points, sq_tolerance)
    else:
        pre = radial_keep_indices(points, sq_tolerance)
        logger.debug("radial prefilter: %d -> %d points", n, len(pre))
        sub = douglas_peucker_indices([points[i] for i in pre], sq_tolerance)
        idx = [pre[k] for k in sub]

    logger.debug("simplify: %d -> %d points (highest_quality=%s)", n, len(idx), highest_quality)
    return idx


def simplify(
    points: Sequence,
    tolerance=DEFAULT_TOLERANCE,
    highest_quality: bool = DEFAULT_HIGHEST_QUALITY,
) -> list:
    """
    Simplify a polyline within `tolerance`.

    highest_quality=True  -> Douglas-Peucker on the full input
    highest_quality=False -> radial-distance prefilter, then Douglas-Peucker
                             (faster on dense input, may drop points RDP alone keeps)

    Returns a new list holding the surviving input points themselves, in input
    order. Inputs with 0, 1 or 2 points come back unchanged.
    """
    return [points[i] for i in simplify_indices(points, tolerance, highest_quality)]


def simplify_array(
    points_xy: np.ndarray,
    tolerance: float = DEFAULT_TOLERANCE,
    highest_quality: bool = DEFAULT_HIGHEST_QUALITY,
) -> np.ndarray:
    """
    numpy path of simplify(...).
    points_xy: (N,2) int/float
    returns the kept rows, (M,2) with M <= N, same dtype
    """
    pts = np.asarray(points_xy)
    if pts.ndim != 2 or pts.shape[1] != 2:
        raise ValueError("points_xy must be (N,2)")

    n = pts.shape[0]
    if n <= 2:
        return pts.copy()

    sq_tolerance = float(_sq_tolerance(tolerance))

    if highest_quality:
        keep = rdp_mask(pts, sq_tolerance)
    else:
        pre = np.flatnonzero(radial_mask(pts, sq_tolerance))
        logger.debug("radial prefilter: %d -> %d points", n, pre.size)
        keep = np.zeros(n, dtype=bool)
        keep[pre[rdp_mask(pts[pre], sq_tolerance)]] = True

    out = pts[keep]
    logger.debug("simplify_array: %d -> %d points (highest_quality=%s)", n, out.shape[0], highest_quality)
    return out
