"""CLI entrypoint: render images as coloured text art typed to the terminal."""

from __future__ import annotations

import argparse
from pathlib import Path

from asciitype_core import (
    AppConfig,
    OutputScheduler,
    list_images,
    load_config,
    save_config,
    to_render_config,
)
from asciitype_core.config import normalize
from asciitype_core.logging_setup import configure_logging, get_logger, log_dir
from asciitype_core.sources import DEFAULT_SOURCE
from asciitype_display import TerminalSink
from asciitype_renderer import GLYPH_RAMP, ColourMode, MirrorMode


EXIT_OK = 0
EXIT_SOURCE_ERROR = 1
EXIT_INTERRUPTED = 130


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="asciitype",
        description="Converts images (PNG/JPEG) to coloured ASCII art using 8 ASCII characters.",
        epilog=f"ASCII characters used: {GLYPH_RAMP!r}",
    )

    source = parser.add_argument_group("input")
    source.add_argument("-i", "--image", default=DEFAULT_SOURCE, help="Image file to convert (default: built-in image)")
    source.add_argument("-f", "--folder", default=None, help="Print every PNG/JPEG image in the given folder")

    colours = parser.add_argument_group("colour modes").add_mutually_exclusive_group()
    colours.add_argument(
        "-m", "--monochrome", dest="colour_mode", action="store_const", const=ColourMode.MONOCHROME.value,
        help="Black and white ASCII art",
    )
    colours.add_argument(
        "-p", "--posterized", dest="colour_mode", action="store_const", const=ColourMode.POSTERIZED.value,
        help="8-colour posterized ASCII art (default)",
    )
    colours.add_argument(
        "-c", "--colourful", dest="colour_mode", action="store_const", const=ColourMode.COLOURFUL.value,
        help="Full-colour ASCII art",
    )
    colours.add_argument(
        "-r", "--random", dest="colour_mode", action="store_const", const=ColourMode.RANDOM.value,
        help="Random colour per glyph, new every frame",
    )

    options = parser.add_argument_group("options")
    options.add_argument("-w", "--width", type=int, default=None, help="Width of the output in characters (default: 80)")
    options.add_argument("-s", "--speed", type=int, default=None, help="Printing speed in chars per second (default: 1000)")
    options.add_argument("-l", "--loop", action="store_true", default=None, help="Print the image(s) forever")
    options.add_argument(
        "-mr", "--mirror", default=None, choices=[m.value for m in MirrorMode], help="Mirror the image (default: none)"
    )
    options.add_argument("--config", default=None, help="Path to a JSON defaults file")
    options.add_argument("--save-defaults", action="store_true", help="Store the effective options as new defaults")
    options.add_argument("-v", "--verbose", action="store_true", help="Also log to stderr")
    return parser


def apply_overrides(cfg: AppConfig, args: argparse.Namespace) -> AppConfig:
    if args.colour_mode is not None:
        cfg.colour_mode = args.colour_mode
    if args.mirror is not None:
        cfg.mirror_mode = args.mirror
    if args.width is not None:
        cfg.width = args.width
    if args.speed is not None:
        cfg.print_speed = args.speed
    if args.loop is not None:
        cfg.loop = args.loop
    return cfg


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    config_file = Path(args.config).expanduser() if args.config else None
    # An explicit config file keeps its logs beside it.
    logs = log_dir(config_file.parent) if config_file else None
    configure_logging(console=args.verbose, directory=logs)
    logger = get_logger()

    cfg = normalize(apply_overrides(load_config(config_file), args))
    if args.save_defaults:
        saved = save_config(cfg, config_file)
        logger.info(f"defaults saved to {saved}", extra={"event": "defaults_saved"})

    sink = TerminalSink()
    scheduler = OutputScheduler(to_render_config(cfg), sink)
    try:
        if args.folder:
            scheduler.run_sequence(list_images(args.folder))
            return EXIT_OK
        return EXIT_OK if scheduler.run_single(args.image) else EXIT_SOURCE_ERROR
    except KeyboardInterrupt:
        scheduler.stop()
        sink.reset()
        logger.info("interrupted", extra={"event": "interrupted"})
        return EXIT_INTERRUPTED


if __name__ == "__main__":
    raise SystemExit(main())
