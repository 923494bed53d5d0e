from __future__ import annotations
import argparse
import os
import time
import cv2
import numpy as np
import matplotlib.pyplot as plt

from polysimplify import config
from polysimplify.log_utils import setup_logging
from polysimplify.metrics import max_deviation, compression_ratio
from polysimplify.simplify import simplify_indices
from polysimplify.synthetic import noisy_track, spiral, blob_contour, diverging_zigzag


def make_source(name: str, n: int, seed: int) -> np.ndarray:
    if name == "track":
        return noisy_track(n, seed=seed)
    if name == "spiral":
        return spiral(n, turns=6.0)
    if name == "contour":
        return blob_contour(seed=seed)
    if name == "zigzag":
        return diverging_zigzag(n)
    raise SystemExit(f"Unknown source: {name}")


def main(argv=None):
    ap = argparse.ArgumentParser()
    ap.add_argument("--source", type=str, default="track", choices=list(config.DEMO_SOURCES))
    ap.add_argument("--n", type=int, default=config.DEMO_POINTS,
                    help="number of points for track, spiral and zigzag; contour length is set by the blob outline")
    ap.add_argument("--seed", type=int, default=config.DEMO_SEED)
    ap.add_argument("--tolerance", type=float, default=config.DEFAULT_TOLERANCE)
    ap.add_argument("--out", type=str, default=config.DEMO_OUT)
    ap.add_argument("--log_level", type=str, default=config.DEFAULT_LOG_LEVEL)
    args = ap.parse_args(argv)

    if args.n < 1:
        raise SystemExit("--n must be >= 1")

    log = setup_logging(args.log_level)
    os.makedirs(os.path.dirname(args.out) or ".", exist_ok=True)

    pts = make_source(args.source, args.n, args.seed)
    # generic path on plain tuples; the array path is simplify_array
    seq = [tuple(p) for p in pts.tolist()]

    results = {}
    for hq in (True, False):
        t0 = time.perf_counter()
        idx = simplify_indices(seq, tolerance=args.tolerance, highest_quality=hq)
        dt = time.perf_counter() - t0
        dev = max_deviation(seq, idx)
        results[hq] = idx
        log.info(
            "highest_quality=%s: %d -> %d points (ratio %.3f), max deviation %.3f, %.1f ms",
            hq, len(seq), len(idx), compression_ratio(len(seq), len(idx)), dev, dt * 1e3,
        )

    if args.source == "contour":
        ref = cv2.approxPolyDP(pts.astype(np.float32).reshape(-1, 1, 2), args.tolerance, False)
        log.info("cv2.approxPolyDP reference: %d points", ref.shape[0])

    hq_pts = pts[results[True]]
    fast_pts = pts[results[False]]
    print(f"raw={pts.shape[0]}  highest_quality={hq_pts.shape[0]}  fast={fast_pts.shape[0]}")

    fig, axes = plt.subplots(1, 2, figsize=(12, 5), sharex=True, sharey=True)
    for ax, sp, title in (
        (axes[0], hq_pts, f"RDP only ({hq_pts.shape[0]} pts)"),
        (axes[1], fast_pts, f"radial + RDP ({fast_pts.shape[0]} pts)"),
    ):
        ax.plot(pts[:, 0], pts[:, 1], linewidth=1, alpha=0.35, label=f"raw ({pts.shape[0]} pts)")
        ax.plot(sp[:, 0], sp[:, 1], linewidth=1.5, marker="o", markersize=2.5, label="simplified")
        ax.set_title(title)
        ax.set_aspect("equal")
        ax.legend(loc="lower left")
    fig.suptitle(f"{args.source}, tolerance={args.tolerance:g}")
    fig.tight_layout()
    fig.savefig(args.out, dpi=150)
    plt.close(fig)


if __name__ == "__main__":
    main()
