import numpy as np

from polysimplify.radial import radial_keep_indices, simplify_radial_dist, radial_mask
from polysimplify.synthetic import noisy_track


def test_short_inputs_unchanged():
    assert simplify_radial_dist([], 1.0) == []
    assert simplify_radial_dist([(1, 1)], 1.0) == [(1, 1)]
    assert simplify_radial_dist([(0, 0), (0.1, 0)], 100.0) == [(0, 0), (0.1, 0)]


def test_compares_to_previously_kept_point():
    pts = [(0, 0), (0.6, 0), (1.2, 0), (1.8, 0), (2.4, 0)]
    # consecutive gaps are 0.6 < 1, but (1.2, 0) is 1.2 away from the last kept point
    assert simplify_radial_dist(pts, 1.0) == [(0, 0), (1.2, 0), (2.4, 0)]


def test_last_point_always_kept():
    pts = [(0, 0), (5, 0), (5.1, 0)]
    assert radial_keep_indices(pts, 1.0) == [0, 1, 2]
    pts = [(0, 0), (0.1, 0), (0.2, 0)]
    assert radial_keep_indices(pts, 1.0) == [0, 2]


def test_returns_input_objects():
    pts = [(0.0, 0.0), (3.0, 0.0), (3.1, 0.0), (6.0, 0.0)]
    out = simplify_radial_dist(pts, 1.0)
    assert out[1] is pts[1]


def test_mask_matches_indices():
    P = noisy_track(800, seed=4)
    for sq_tol in (0.25, 1.0, 9.0):
        idx = radial_keep_indices(P.tolist(), sq_tol)
        keep = radial_mask(P, sq_tol)
        assert np.flatnonzero(keep).tolist() == idx
