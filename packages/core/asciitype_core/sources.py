"""Image sources: file decoding, folder listing, and the built-in default image."""

from __future__ import annotations

from pathlib import Path

import numpy as np
from PIL import Image, UnidentifiedImageError

from asciitype_renderer.models import PixelGrid

from .logging_setup import get_logger

DEFAULT_SOURCE = "default"
IMAGE_EXTENSIONS = (".jpg", ".jpeg", ".png")

_DEFAULT_SIZE = (320, 320)


class ImageSourceError(RuntimeError):
    """An image could not be opened or decoded."""


def default_grid(width: int = _DEFAULT_SIZE[0], height: int = _DEFAULT_SIZE[1]) -> PixelGrid:
    """Colour quadrants faded by a radial gradient, bright at the centre."""
    ys, xs = np.mgrid[0:height, 0:width]
    cx = (width - 1) / 2
    cy = (height - 1) / 2
    dist = np.sqrt(((xs - cx) / max(cx, 1)) ** 2 + ((ys - cy) / max(cy, 1)) ** 2)
    fade = np.clip(1.0 - dist / np.sqrt(2), 0.0, 1.0)

    base = np.zeros((height, width, 3), dtype=np.float64)
    left = xs < width // 2
    top = ys < height // 2
    base[left & top] = (255, 64, 64)
    base[~left & top] = (64, 255, 64)
    base[left & ~top] = (64, 64, 255)
    base[~left & ~top] = (255, 255, 255)

    pixels = (base * fade[..., None]).round().astype(np.uint8)
    return PixelGrid(pixels)


def load_grid(source: str | Path) -> PixelGrid:
    if str(source) in ("", DEFAULT_SOURCE):
        return default_grid()

    path = Path(source)
    try:
        with Image.open(path) as image:
            image.load()
            return PixelGrid.from_image(image.convert("RGB"))
    except (OSError, UnidentifiedImageError, Image.DecompressionBombError, ValueError) as exc:
        raise ImageSourceError(f"Cannot load image {path}: {exc}") from exc


def list_images(folder: str | Path) -> list[Path]:
    folder = Path(folder)
    try:
        entries = sorted(folder.iterdir(), key=lambda p: p.name)
    except OSError as exc:
        get_logger().warning(f"cannot read folder {folder}: {exc}", extra={"event": "folder_unreadable"})
        return []

    return [p for p in entries if not p.is_dir() and p.suffix.lower() in IMAGE_EXTENSIONS]
