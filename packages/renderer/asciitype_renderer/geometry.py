"""Aspect-correcting resize and mirror transforms for pixel grids."""

from __future__ import annotations

import numpy as np
from PIL import Image

from .models import MirrorMode, PixelGrid


def target_height(source_width: int, source_height: int, width: int) -> int:
    """Rows needed for ``width`` columns; terminal cells are about twice as tall as wide."""
    if source_width <= 0 or source_height <= 0:
        return 0
    return (source_height * width) // source_width // 2


def resize_grid(grid: PixelGrid, width: int) -> PixelGrid:
    if width <= 0:
        raise ValueError("Target width must be positive")
    height = target_height(grid.width, grid.height, width)
    if height <= 0:
        return PixelGrid.empty(width)

    resized = grid.to_image().resize((width, height), resample=Image.Resampling.LANCZOS)
    return PixelGrid.from_image(resized)


def mirror_grid(grid: PixelGrid, mode: MirrorMode) -> PixelGrid:
    if mode == MirrorMode.NONE:
        return grid

    pixels = grid.pixels
    if mode in (MirrorMode.X, MirrorMode.XY):
        pixels = pixels[:, ::-1]
    if mode in (MirrorMode.Y, MirrorMode.XY):
        pixels = pixels[::-1, :]
    # PixelGrid copies, so the flipped view never shares storage with the input.
    return PixelGrid(np.ascontiguousarray(pixels))
