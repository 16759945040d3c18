import json
import sys
import tempfile
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "renderer"))
sys.path.insert(0, str(ROOT / "packages" / "core"))

from asciitype_core.config import AppConfig, load_config, save_config, to_render_config
from asciitype_renderer.models import ColourMode, MirrorMode


class ConfigTests(unittest.TestCase):
    def test_load_default_when_missing(self):
        with tempfile.TemporaryDirectory() as tmp:
            cfg = load_config(Path(tmp) / "missing.json")
            self.assertIsInstance(cfg, AppConfig)
            self.assertEqual(cfg.width, 80)
            self.assertEqual(cfg.colour_mode, "posterized")
            self.assertEqual(cfg.print_speed, 1000)
            self.assertFalse(cfg.loop)

    def test_save_and_reload(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "nested" / "config.json"
            cfg = load_config(path)
            cfg.width = 120
            cfg.mirror_mode = "xy"
            save_config(cfg, path)
            reloaded = load_config(path)
            self.assertEqual(reloaded.width, 120)
            self.assertEqual(reloaded.mirror_mode, "xy")

    def test_out_of_range_values_are_clamped(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "config.json"
            raw = {"width": -5, "print_speed": 0, "colour_mode": "neon", "mirror_mode": "z", "unknown": 1}
            path.write_text(json.dumps(raw), encoding="utf-8")
            cfg = load_config(path)
            self.assertEqual(cfg.width, 1)
            self.assertEqual(cfg.print_speed, 1)
            self.assertEqual(cfg.colour_mode, "posterized")
            self.assertEqual(cfg.mirror_mode, "none")
            self.assertFalse(hasattr(cfg, "unknown"))

    def test_overflowing_and_unhashable_values_fall_back(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "config.json"
            path.write_text(
                '{"width": 1e999, "print_speed": -1e999, "colour_mode": [], "mirror_mode": {"x": 1}}',
                encoding="utf-8",
            )
            cfg = load_config(path)
            self.assertEqual(cfg.width, 80)
            self.assertEqual(cfg.print_speed, 1000)
            self.assertEqual(cfg.colour_mode, "posterized")
            self.assertEqual(cfg.mirror_mode, "none")

    def test_loop_must_be_a_real_bool(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "config.json"
            for value in ("false", "true", 1, None):
                path.write_text(json.dumps({"loop": value}), encoding="utf-8")
                self.assertFalse(load_config(path).loop, value)
            path.write_text(json.dumps({"loop": True}), encoding="utf-8")
            self.assertTrue(load_config(path).loop)

    def test_corrupt_file_falls_back(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "config.json"
            path.write_text("{not json", encoding="utf-8")
            self.assertEqual(load_config(path), AppConfig())

    def test_render_config(self):
        cfg = AppConfig(width=0, colour_mode="random", mirror_mode="x", print_speed=-3, loop=True)
        render = to_render_config(cfg)
        self.assertEqual(render.colour_mode, ColourMode.RANDOM)
        self.assertEqual(render.mirror_mode, MirrorMode.X)
        self.assertEqual(render.width, 1)
        self.assertEqual(render.print_speed, 1)
        self.assertTrue(render.loop)
        self.assertEqual(len(render.ramp), 8)


if __name__ == "__main__":
    unittest.main()
