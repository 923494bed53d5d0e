from __future__ import annotations
import numpy as np

from polysimplify.points import coords


def get_sq_dist(p1, p2):
    """Squared distance between two points."""
    x1, y1 = coords(p1)
    x2, y2 = coords(p2)
    dx = x1 - x2
    dy = y1 - y2
    return dx * dx + dy * dy


def get_sq_seg_dist(p, p1, p2):
    """
    Squared distance from p to the segment [p1, p2] (not the infinite line).
      t <= 0      -> nearest is p1
      0 < t <= 1  -> nearest is p1 + t*(p2 - p1)
      t > 1       -> nearest is p2
    Zero-length segment -> nearest is p1 (no division).
    """
    px, py = coords(p)
    x, y = coords(p1)
    x2, y2 = coords(p2)
    dx = x2 - x
    dy = y2 - y

    if dx != 0 or dy != 0:
        t = ((px - x) * dx + (py - y) * dy) / (dx * dx + dy * dy)

        if t > 1:
            x = x2
            y = y2
        elif t > 0:
            x = x + dx * t
            y = y + dy * t

    dx = px - x
    dy = py - y
    return dx * dx + dy * dy


def sq_seg_dist_array(pts: np.ndarray, a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """
    Vectorized get_sq_seg_dist over many points.
    pts: (M,2) float, a, b: (2,) float
    returns (M,) squared distances
    """
    pts = np.asarray(pts, dtype=float)
    x, y = float(a[0]), float(a[1])
    dx = float(b[0]) - x
    dy = float(b[1]) - y

    nx = np.full(pts.shape[0], x)
    ny = np.full(pts.shape[0], y)

    if dx != 0.0 or dy != 0.0:
        t = ((pts[:, 0] - x) * dx + (pts[:, 1] - y) * dy) / (dx * dx + dy * dy)

        far = t > 1
        mid = (t > 0) & ~far
        nx[far] = float(b[0])
        ny[far] = float(b[1])
        nx[mid] = x + dx * t[mid]
        ny[mid] = y + dy * t[mid]

    ex = pts[:, 0] - nx
    ey = pts[:, 1] - ny
    return ex * ex + ey * ey
