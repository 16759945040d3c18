"""Frame assembly: classified, coloured glyph cells in row-major order."""

from __future__ import annotations

from .classify import classify_pixel
from .colour import RESET, colour_for, rgb_escape
from .models import GLYPH_RAMP, ColourMode, Frame, PixelGrid, RandomColourMap


def render_frame(
    grid: PixelGrid,
    mode: ColourMode,
    colour_map: RandomColourMap | None = None,
    ramp: str = GLYPH_RAMP,
) -> Frame:
    """Render ``grid`` into a frame of cells.

    Every coloured glyph carries its own reset, so a frame cut short at any
    cell boundary leaves the terminal in its default colour.
    """
    if mode == ColourMode.RANDOM and colour_map is None:
        raise ValueError("Random colour mode requires a colour map")
    if grid.is_empty:
        return Frame(cells=(), width=grid.width, height=0)

    cells: list[str] = []
    for y in range(grid.height):
        for x in range(grid.width):
            r, g, b, _ = grid.rgba16(x, y)
            index, native = classify_pixel(r, g, b, len(ramp))
            glyph = ramp[index]

            colour = colour_for(mode, index, native, colour_map)
            if colour is None:
                cells.append(glyph)
                continue
            cells.append(rgb_escape(*colour) + glyph + RESET)
        cells.append("\n")

    return Frame(cells=tuple(cells), width=grid.width, height=grid.height)
