import random
import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "renderer"))

from asciitype_renderer.colour import (
    colour_for,
    generate_random_colour_map,
    posterize_channel,
    posterize_pixel,
    rgb_escape,
)
from asciitype_renderer.models import ColourMode, RandomColourMap


class PosterizeTests(unittest.TestCase):
    def test_two_levels(self):
        self.assertEqual(posterize_channel(0), 0)
        self.assertEqual(posterize_channel(127), 0)
        self.assertEqual(posterize_channel(128), 255)
        self.assertEqual(posterize_channel(255), 255)

    def test_idempotent(self):
        for v in range(256):
            once = posterize_channel(v)
            self.assertEqual(posterize_channel(once), once)

    def test_eight_possible_colours(self):
        seen = {posterize_pixel((r, g, b)) for r in range(0, 256, 15) for g in range(0, 256, 15) for b in range(0, 256, 15)}
        self.assertEqual(len(seen), 8)


class RandomMapTests(unittest.TestCase):
    def test_has_eight_entries(self):
        cmap = generate_random_colour_map(random.Random(1))
        self.assertEqual(len(cmap), 8)
        for entry in cmap.entries:
            self.assertTrue(all(0 <= c <= 255 for c in entry))

    def test_regeneration_changes_entries(self):
        rng = random.Random(7)
        first = generate_random_colour_map(rng)
        second = generate_random_colour_map(rng)
        self.assertNotEqual(first.entries, second.entries)

    def test_length_enforced(self):
        with self.assertRaises(ValueError):
            RandomColourMap(entries=((0, 0, 0),) * 7)


class ColourPolicyTests(unittest.TestCase):
    def test_modes(self):
        cmap = RandomColourMap(entries=tuple((i, i, i) for i in range(8)))
        native = (200, 100, 20)
        self.assertIsNone(colour_for(ColourMode.MONOCHROME, 3, native))
        self.assertEqual(colour_for(ColourMode.POSTERIZED, 3, native), (255, 0, 0))
        self.assertEqual(colour_for(ColourMode.COLOURFUL, 3, native), native)
        self.assertEqual(colour_for(ColourMode.RANDOM, 3, native, cmap), (3, 3, 3))

    def test_random_requires_map(self):
        with self.assertRaises(ValueError):
            colour_for(ColourMode.RANDOM, 0, (0, 0, 0))

    def test_escape_format(self):
        self.assertEqual(rgb_escape(1, 22, 255), "\x1b[38;2;1;22;255m")


if __name__ == "__main__":
    unittest.main()
