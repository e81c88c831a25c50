import os
import unittest
import sys

pwd = os.path.dirname(os.path.realpath(__file__))
sys.path.append(os.path.join(pwd, "..", "src"))
import tile_coverage as tc  # noqa: E402
from RkrGst import Match, rkr_gst  # noqa: E402


class testTileCoverage(unittest.TestCase):
    def test_tile_stats(self):
        matches = rkr_gst(b"lowerlow", b"yellow lowlow", 3, 2)
        self.assertEqual(tc.tiled_length(matches), 6)
        self.assertEqual(tc.longest_tile(matches), 3)
        self.assertAlmostEqual(tc.coverage(matches, 8, 13), 12 / 21)
        self.assertEqual(tc.matched_segments(matches, b"lowerlow"), [b"low", b"low"])

    def test_no_tiles(self):
        self.assertEqual(tc.tiled_length([]), 0)
        self.assertEqual(tc.longest_tile([]), 0)
        self.assertEqual(tc.coverage([], 0, 0), 0.0)
        self.assertEqual(tc.coverage([], 4, 5), 0.0)

    def test_segments_of_tokens(self):
        pattern = "int x = a + b ;".split()
        matches = [Match(2, 0, 3), Match(0, 4, 1)]
        self.assertEqual(
            tc.matched_segments(matches, pattern), [["=", "a", "+"], ["int"]]
        )

    def test_edit_similarity(self):
        self.assertAlmostEqual(tc.edit_similarity(b"kitten", b"sitting"), 4 / 7)
        self.assertEqual(tc.edit_similarity(b"", b""), 1.0)
        self.assertEqual(tc.edit_similarity(b"", b"abc"), 0.0)
        self.assertEqual(tc.edit_similarity(b"same", b"same"), 1.0)

    def test_gst_similarity(self):
        self.assertAlmostEqual(tc.gst_similarity(b"lower", b"yellow", 3, 2), 6 / 11)
        self.assertEqual(tc.gst_similarity(b"abc", b"abc", 3, 1), 1.0)
        self.assertEqual(tc.gst_similarity(b"", b"", 3, 1), 0.0)

    def test_combined_similarity(self):
        combined = tc.combined_similarity(b"lower", b"yellow", 3, 2)
        self.assertAlmostEqual(
            combined, max(tc.edit_similarity(b"lower", b"yellow"), 3 / 5)
        )
        self.assertEqual(tc.combined_similarity(b"", b"abc", 3, 2), 0.0)
        self.assertEqual(tc.combined_similarity(b"abcdef", b"abcdef", 4, 2), 1.0)


if __name__ == "__main__":
    unittest.main()
