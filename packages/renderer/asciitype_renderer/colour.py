"""Colour policies and ANSI truecolour escapes."""

from __future__ import annotations

import random

from .models import RAMP_LENGTH, RGB, ColourMode, RandomColourMap

RESET = "\x1b[0m"

POSTER_LEVELS = 2


def rgb_escape(r: int, g: int, b: int) -> str:
    return f"\x1b[38;2;{r};{g};{b}m"


def posterize_channel(value: int, levels: int = POSTER_LEVELS) -> int:
    step = 255 // (levels - 1)
    return (value // (256 // levels)) * step


def posterize_pixel(rgb: RGB) -> RGB:
    r, g, b = rgb
    return posterize_channel(r), posterize_channel(g), posterize_channel(b)


def generate_random_colour_map(rng: random.Random | None = None) -> RandomColourMap:
    rng = rng or random.Random()
    return RandomColourMap(
        entries=tuple(
            (rng.randint(0, 255), rng.randint(0, 255), rng.randint(0, 255)) for _ in range(RAMP_LENGTH)
        )
    )


def colour_for(
    mode: ColourMode,
    glyph_index: int,
    native: RGB,
    colour_map: RandomColourMap | None = None,
) -> RGB | None:
    """Display colour for one classified pixel, or ``None`` for uncoloured output."""
    if mode == ColourMode.MONOCHROME:
        return None
    if mode == ColourMode.POSTERIZED:
        return posterize_pixel(native)
    if mode == ColourMode.COLOURFUL:
        return native
    if mode == ColourMode.RANDOM:
        if colour_map is None:
            raise ValueError("Random colour mode requires a colour map")
        return colour_map[glyph_index]
    raise ValueError(f"Unknown colour mode: {mode}")
