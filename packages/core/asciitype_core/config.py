"""Persistent user defaults and RenderConfig construction."""

from __future__ import annotations

import json
import os
import platform
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any

from asciitype_renderer.models import ColourMode, MirrorMode, RenderConfig


CONFIG_VERSION = 1

MIN_WIDTH = 1
MAX_WIDTH = 1000
MIN_PRINT_SPEED = 1

_COLOUR_MODES = tuple(m.value for m in ColourMode)
_MIRROR_MODES = tuple(m.value for m in MirrorMode)


@dataclass
class AppConfig:
    config_version: int = CONFIG_VERSION
    width: int = 80
    colour_mode: str = ColourMode.POSTERIZED.value
    mirror_mode: str = MirrorMode.NONE.value
    print_speed: int = 1000
    loop: bool = False


def config_root() -> Path:
    system = platform.system()
    if system == "Windows":
        base = Path(os.environ.get("APPDATA", Path.home() / "AppData" / "Roaming"))
        return base / "asciitype"
    if system == "Darwin":
        return Path.home() / "Library" / "Application Support" / "asciitype"
    return Path.home() / ".config" / "asciitype"


def config_path() -> Path:
    return config_root() / "config.json"


def _merge(raw: dict[str, Any]) -> AppConfig:
    defaults = AppConfig()
    for k, v in raw.items():
        if hasattr(defaults, k):
            setattr(defaults, k, v)
    return defaults


def _as_int(value: Any, fallback: int) -> int:
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        return fallback


def normalize(cfg: AppConfig) -> AppConfig:
    cfg.width = max(MIN_WIDTH, min(MAX_WIDTH, _as_int(cfg.width, AppConfig.width)))
    cfg.print_speed = max(MIN_PRINT_SPEED, _as_int(cfg.print_speed, AppConfig.print_speed))
    if not isinstance(cfg.colour_mode, str) or cfg.colour_mode not in _COLOUR_MODES:
        cfg.colour_mode = AppConfig.colour_mode
    if not isinstance(cfg.mirror_mode, str) or cfg.mirror_mode not in _MIRROR_MODES:
        cfg.mirror_mode = AppConfig.mirror_mode
    if not isinstance(cfg.loop, bool):
        cfg.loop = AppConfig.loop
    return cfg


def load_config(path: Path | None = None) -> AppConfig:
    path = path or config_path()
    if not path.exists():
        return AppConfig()

    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except Exception:
        return AppConfig()
    if not isinstance(raw, dict):
        return AppConfig()

    cfg = _merge(raw)
    cfg.config_version = CONFIG_VERSION
    return normalize(cfg)


def save_config(cfg: AppConfig, path: Path | None = None) -> Path:
    cfg.config_version = CONFIG_VERSION
    path = path or config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(asdict(cfg), indent=2, sort_keys=True), encoding="utf-8")
    return path


def to_render_config(cfg: AppConfig) -> RenderConfig:
    cfg = normalize(cfg)
    return RenderConfig(
        colour_mode=ColourMode(cfg.colour_mode),
        mirror_mode=MirrorMode(cfg.mirror_mode),
        width=cfg.width,
        print_speed=cfg.print_speed,
        loop=cfg.loop,
    )
