import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "renderer"))

from asciitype_renderer.classify import classify_pixel, glyph_index


def widen(v):
    return v * 257


class ClassifyTests(unittest.TestCase):
    def test_black_and_white_hit_ramp_ends(self):
        self.assertEqual(glyph_index(0, 0, 0), 0)
        self.assertEqual(glyph_index(0xFFFF, 0xFFFF, 0xFFFF), 7)

    def test_mid_grey(self):
        g = widen(128)
        self.assertEqual(glyph_index(g, g, g), 3)

    def test_grey_levels_follow_weighted_luma(self):
        for v in range(256):
            g = widen(v)
            self.assertEqual(glyph_index(g, g, g), v * 7 // 255)

    def test_monotonic_over_grey_levels(self):
        previous = 0
        for v in range(256):
            index = glyph_index(widen(v), widen(v), widen(v))
            self.assertGreaterEqual(index, previous)
            previous = index

    def test_monotonic_per_channel(self):
        for channel in range(3):
            previous = 0
            for v in range(0, 256, 5):
                rgb = [widen(40), widen(90), widen(200)]
                rgb[channel] = widen(v)
                index = glyph_index(*rgb)
                self.assertGreaterEqual(index, previous)
                previous = index

    def test_index_clamped_for_malformed_input(self):
        self.assertEqual(glyph_index(-5000, -1, -70000), 0)
        self.assertEqual(glyph_index(10**9, 10**9, 10**9), 7)

    def test_native_rgb_is_high_byte(self):
        index, native = classify_pixel(widen(255), widen(16), widen(0))
        self.assertEqual(native, (255, 16, 0))
        self.assertIn(index, range(8))

    def test_pure_function(self):
        self.assertEqual(classify_pixel(1234, 40000, 999), classify_pixel(1234, 40000, 999))


if __name__ == "__main__":
    unittest.main()
