from __future__ import annotations
import numpy as np
import cv2


def noisy_track(n: int = 2000, seed: int = 0, *, step: float = 1.0, noise: float = 0.35) -> np.ndarray:
    """
    GPS-like track: smoothly turning heading with jitter on every fix.
    Returns (n,2) float.
    """
    rng = np.random.default_rng(seed)
    turn = np.cumsum(rng.normal(0.0, 0.04, size=n))
    k = min(25, n)
    heading = np.convolve(turn, np.ones(k) / k, mode="same")
    steps = np.stack([np.cos(heading), np.sin(heading)], axis=1) * step
    xy = np.cumsum(steps, axis=0)
    xy -= xy[0]
    xy += rng.normal(0.0, noise, size=xy.shape)
    return xy.astype(float)


def spiral(n: int = 1000, turns: float = 4.0, *, growth: float = 1.0) -> np.ndarray:
    """
    Archimedean spiral r = growth * theta, densely sampled.
    Returns (n,2) float.
    """
    theta = np.linspace(0.0, 2.0 * np.pi * turns, n)
    r = growth * theta
    return np.stack([r * np.cos(theta), r * np.sin(theta)], axis=1)


def diverging_zigzag(n: int) -> np.ndarray:
    """
    Worst case for Douglas-Peucker depth: point i is (i, (-1)^i * i).
    For any range [0, m] the farthest interior point from the chord is m-1,
    so every split peels off one point and a recursive form would nest n deep.
    Returns (n,2) float.
    """
    i = np.arange(n, dtype=float)
    sign = np.where(np.arange(n) % 2 == 0, 1.0, -1.0)
    return np.stack([i, sign * i], axis=1)


def blob_contour(w: int = 400, h: int = 300, seed: int = 0) -> np.ndarray:
    """
    Dense pixel contour of a random blob drawn with OpenCV.
    One point per boundary pixel (CHAIN_APPROX_NONE), open polyline.
    Returns (N,2) float in pixel coords [x,y].
    """
    rng = np.random.default_rng(seed)
    mask = np.zeros((h, w), dtype=np.uint8)

    cx, cy = w // 2, h // 2
    ang = np.linspace(0.0, 2.0 * np.pi, 9, endpoint=False)
    rad = rng.uniform(0.25, 0.45, size=ang.size) * min(w, h)
    poly = np.stack([cx + rad * np.cos(ang), cy + rad * np.sin(ang)], axis=1).astype(np.int32)
    cv2.fillPoly(mask, [poly], 255)
    mask = cv2.GaussianBlur(mask, (31, 31), 0)
    mask = (mask > 127).astype(np.uint8) * 255

    contours, _ = cv2.findContours(mask, cv2.RETR_EXTERNAL, cv2.CHAIN_APPROX_NONE)
    if not contours:
        raise ValueError("blob mask produced no contour")
    c = max(contours, key=cv2.contourArea)
    return c.reshape(-1, 2).astype(float)
