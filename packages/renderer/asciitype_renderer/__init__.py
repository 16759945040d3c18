"""Renderer package for image-to-glyph frame composition."""

from .classify import classify_pixel, glyph_index
from .colour import RESET, colour_for, generate_random_colour_map, posterize_channel, posterize_pixel, rgb_escape
from .frame import render_frame
from .geometry import mirror_grid, resize_grid, target_height
from .models import GLYPH_RAMP, ColourMode, Frame, MirrorMode, PixelGrid, RandomColourMap, RenderConfig

__all__ = [
    "GLYPH_RAMP",
    "RESET",
    "ColourMode",
    "Frame",
    "MirrorMode",
    "PixelGrid",
    "RandomColourMap",
    "RenderConfig",
    "classify_pixel",
    "colour_for",
    "generate_random_colour_map",
    "glyph_index",
    "mirror_grid",
    "posterize_channel",
    "posterize_pixel",
    "render_frame",
    "resize_grid",
    "rgb_escape",
    "target_height",
]
