import unittest

from polysimplify.metrics import max_deviation, compression_ratio, path_length
from polysimplify.points import Point


class TestMetrics(unittest.TestCase):
    def test_max_deviation_of_dropped_apex(self):
        pts = [(0, 0), (1, 1), (2, 0)]
        self.assertAlmostEqual(max_deviation(pts, [0, 2]), 1.0, places=12)
        self.assertEqual(max_deviation(pts, [0, 1, 2]), 0.0)

    def test_max_deviation_uses_segment_not_line(self):
        # (5,0) is on the chord's line (0,0)-(2,0) but 3 past its far end
        pts = [(0, 0), (5, 0), (2, 0), (3, 1)]
        self.assertAlmostEqual(max_deviation(pts, [0, 2, 3]), 3.0, places=12)

    def test_max_deviation_degenerate(self):
        self.assertEqual(max_deviation([], []), 0.0)
        self.assertEqual(max_deviation([(1, 1)], [0]), 0.0)
        with self.assertRaises(ValueError):
            max_deviation([(0, 0), (1, 1), (2, 2)], [2, 0])

    def test_compression_ratio(self):
        self.assertEqual(compression_ratio(0, 0), 1.0)
        self.assertAlmostEqual(compression_ratio(10, 4), 0.4, places=12)

    def test_path_length(self):
        self.assertAlmostEqual(path_length([(0, 0), (3, 4), (3, 5)]), 6.0, places=12)
        self.assertAlmostEqual(path_length([Point(0, 0), Point(0, 2)]), 2.0, places=12)
        self.assertEqual(path_length([(1, 1)]), 0.0)


if __name__ == "__main__":
    unittest.main()
