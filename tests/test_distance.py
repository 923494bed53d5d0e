from fractions import Fraction

import numpy as np

from polysimplify.distance import get_sq_dist, get_sq_seg_dist, sq_seg_dist_array


def test_sq_dist_is_squared_euclidean():
    assert get_sq_dist((0, 0), (3, 4)) == 25
    assert get_sq_dist((3, 4), (0, 0)) == 25
    assert get_sq_dist((1.5, -2.0), (1.5, -2.0)) == 0.0


def test_seg_dist_interior_projection():
    # t = 0.5 -> nearest is (1, 0)
    assert get_sq_seg_dist((1, 1), (0, 0), (2, 0)) == 1.0


def test_seg_dist_before_near_end_clamps_to_p1():
    # t = -1.5
    assert get_sq_seg_dist((-3, 4), (0, 0), (2, 0)) == 25


def test_seg_dist_beyond_far_end_clamps_to_p2():
    # t = 2.5, the infinite line would give 16
    assert get_sq_seg_dist((5, 4), (0, 0), (2, 0)) == 25


def test_seg_dist_zero_length_segment_uses_p1():
    assert get_sq_seg_dist((3, 4), (1, 1), (1, 1)) == 13


def test_seg_dist_endpoint_is_zero():
    assert get_sq_seg_dist((2, 0), (0, 0), (2, 0)) == 0
    assert get_sq_seg_dist((0, 0), (0, 0), (2, 0)) == 0


def test_seg_dist_keeps_exact_scalar_type():
    d = get_sq_seg_dist((Fraction(1, 3), Fraction(1)), (Fraction(0), Fraction(0)), (Fraction(1), Fraction(0)))
    assert isinstance(d, Fraction)
    assert d == 1


def test_array_seg_dist_matches_scalar():
    rng = np.random.default_rng(3)
    pts = rng.uniform(-10, 10, size=(200, 2))
    for a, b in [((0.0, 0.0), (4.0, 1.0)), ((-2.0, 3.0), (5.0, -7.0)), ((1.0, 1.0), (1.0, 1.0))]:
        got = sq_seg_dist_array(pts, np.array(a), np.array(b))
        want = np.array([get_sq_seg_dist(tuple(p), a, b) for p in pts.tolist()])
        np.testing.assert_allclose(got, want, rtol=0, atol=1e-12)
