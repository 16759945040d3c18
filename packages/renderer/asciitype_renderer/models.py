"""Typed renderer models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

import numpy as np
from PIL import Image


GLYPH_RAMP = " .:-=+*#"
RAMP_LENGTH = 8

RGB = tuple[int, int, int]


class ColourMode(str, Enum):
    MONOCHROME = "monochrome"
    POSTERIZED = "posterized"
    COLOURFUL = "colourful"
    RANDOM = "random"


class MirrorMode(str, Enum):
    NONE = "none"
    X = "x"
    Y = "y"
    XY = "xy"


@dataclass(frozen=True)
class RenderConfig:
    colour_mode: ColourMode = ColourMode.POSTERIZED
    mirror_mode: MirrorMode = MirrorMode.NONE
    width: int = 80
    print_speed: int = 1000
    loop: bool = False
    ramp: str = GLYPH_RAMP

    def __post_init__(self) -> None:
        if len(self.ramp) != RAMP_LENGTH:
            raise ValueError(f"Glyph ramp must have exactly {RAMP_LENGTH} characters")


@dataclass(frozen=True)
class RandomColourMap:
    entries: tuple[RGB, ...]

    def __post_init__(self) -> None:
        if len(self.entries) != RAMP_LENGTH:
            raise ValueError(f"Colour map must have exactly {RAMP_LENGTH} entries")

    def __getitem__(self, glyph_index: int) -> RGB:
        return self.entries[glyph_index]

    def __len__(self) -> int:
        return len(self.entries)


class PixelGrid:
    """Read-only width x height RGB samples backed by a uint8 array."""

    def __init__(self, pixels: np.ndarray) -> None:
        if pixels.ndim != 3 or pixels.shape[2] != 3:
            raise ValueError("Pixel array must have shape (height, width, 3)")
        data = np.array(pixels, dtype=np.uint8, copy=True)
        data.flags.writeable = False
        self._pixels = data

    @classmethod
    def empty(cls, width: int = 0) -> "PixelGrid":
        return cls(np.zeros((0, max(width, 0), 3), dtype=np.uint8))

    @classmethod
    def from_rows(cls, rows: list[list[RGB]]) -> "PixelGrid":
        if not rows:
            return cls.empty()
        return cls(np.asarray(rows, dtype=np.uint8).reshape((len(rows), len(rows[0]), 3)))

    @classmethod
    def from_image(cls, image: Image.Image) -> "PixelGrid":
        if image.mode != "RGB":
            image = image.convert("RGB")
        width, height = image.size
        return cls(np.asarray(image, dtype=np.uint8).reshape((height, width, 3)))

    def to_image(self) -> Image.Image:
        return Image.fromarray(np.array(self._pixels, copy=True))

    @property
    def width(self) -> int:
        return int(self._pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self._pixels.shape[0])

    @property
    def pixels(self) -> np.ndarray:
        return self._pixels

    @property
    def is_empty(self) -> bool:
        return self.width == 0 or self.height == 0

    def rgb(self, x: int, y: int) -> RGB:
        r, g, b = self._pixels[y, x]
        return int(r), int(g), int(b)

    def rgba16(self, x: int, y: int) -> tuple[int, int, int, int]:
        r, g, b = self.rgb(x, y)
        return r * 257, g * 257, b * 257, 0xFFFF

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PixelGrid):
            return NotImplemented
        return self._pixels.shape == other._pixels.shape and bool(np.array_equal(self._pixels, other._pixels))

    def __repr__(self) -> str:
        return f"PixelGrid(width={self.width}, height={self.height})"


@dataclass(frozen=True)
class Frame:
    cells: tuple[str, ...]
    width: int
    height: int

    @property
    def text(self) -> str:
        return "".join(self.cells)

    @property
    def is_empty(self) -> bool:
        return not self.cells

    def __len__(self) -> int:
        return len(self.cells)
