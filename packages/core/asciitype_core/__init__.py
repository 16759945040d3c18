"""Core services for settings, image sources, logging, and paced output."""

from .config import AppConfig, load_config, save_config, to_render_config
from .scheduler import OutputScheduler, SchedulerStatus, Typewriter, char_delay
from .sources import ImageSourceError, default_grid, list_images, load_grid

__all__ = [
    "AppConfig",
    "ImageSourceError",
    "OutputScheduler",
    "SchedulerStatus",
    "Typewriter",
    "char_delay",
    "default_grid",
    "list_images",
    "load_config",
    "load_grid",
    "save_config",
    "to_render_config",
]
