"""Luminance classification of 16-bit RGB samples into glyph indices."""

from __future__ import annotations

from .models import RAMP_LENGTH, RGB

CHANNEL_MAX = 0xFFFF

# ITU-R BT.601 luma weights, in thousandths.
_WEIGHT_R = 299
_WEIGHT_G = 587
_WEIGHT_B = 114
_WEIGHT_SUM = _WEIGHT_R + _WEIGHT_G + _WEIGHT_B


def glyph_index(r: int, g: int, b: int, ramp_length: int = RAMP_LENGTH) -> int:
    """floor(L * (ramp_length - 1)) with L = (0.299 R + 0.587 G + 0.114 B) / 65535, clamped to the ramp."""
    # Integer weights keep full white exactly on the last glyph.
    weighted = _WEIGHT_R * r + _WEIGHT_G * g + _WEIGHT_B * b
    index = (weighted * (ramp_length - 1)) // (_WEIGHT_SUM * CHANNEL_MAX)
    return max(0, min(ramp_length - 1, index))


def to_native(r: int, g: int, b: int) -> RGB:
    return (max(0, r) >> 8) & 0xFF, (max(0, g) >> 8) & 0xFF, (max(0, b) >> 8) & 0xFF


def classify_pixel(r: int, g: int, b: int, ramp_length: int = RAMP_LENGTH) -> tuple[int, RGB]:
    """Return ``(glyph_index, native_rgb)`` for a 16-bit-per-channel sample."""
    return glyph_index(r, g, b, ramp_length), to_native(r, g, b)
