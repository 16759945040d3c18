"""Paced frame output: typewriter pacing, looping, and image sequences."""

from __future__ import annotations

import logging
import random
import threading
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable

from asciitype_display import DisplaySink
from asciitype_renderer import (
    ColourMode,
    Frame,
    PixelGrid,
    RandomColourMap,
    RenderConfig,
    generate_random_colour_map,
    mirror_grid,
    render_frame,
    resize_grid,
)

from .logging_setup import get_logger
from .sources import ImageSourceError, load_grid


MIN_CHAR_DELAY_S = 0.001
FRAME_PAUSE_S = 1.0
SEPARATOR = "\n"

Source = str | Path


def char_delay(chars_per_second: float) -> float:
    """Seconds between cells; non-positive rates mean no delay at all."""
    if chars_per_second <= 0:
        return 0.0
    return max(1.0 / chars_per_second, MIN_CHAR_DELAY_S)


class Typewriter:
    """Writes frame cells one at a time at a fixed rate.

    Pacing follows an absolute deadline so sleep overshoot does not add up
    across a frame. The stop event is checked before every cell.
    """

    def __init__(
        self,
        sink: DisplaySink,
        chars_per_second: float,
        stop_event: threading.Event | None = None,
        clock: Callable[[], float] = time.perf_counter,
        sleep: Callable[[float], object] | None = None,
    ) -> None:
        self.sink = sink
        self.delay = char_delay(chars_per_second)
        self._stop = stop_event or threading.Event()
        self._clock = clock
        self._sleep = sleep

    def _wait(self, seconds: float) -> None:
        if self._sleep is not None:
            self._sleep(seconds)
        else:
            self._stop.wait(seconds)

    def type(self, frame: Frame | str) -> int:
        cells = frame.cells if isinstance(frame, Frame) else tuple(frame)
        written = 0
        next_at = self._clock()
        for cell in cells:
            if self._stop.is_set():
                break
            self.sink.write(cell)
            written += 1
            if self.delay <= 0:
                continue
            next_at += self.delay
            remaining = next_at - self._clock()
            if remaining > 0:
                self._wait(remaining)
        self.sink.flush()
        return written


@dataclass
class SchedulerStatus:
    frames_played: int = 0
    cells_written: int = 0
    sources_skipped: int = 0
    last_error: str | None = None
    stopped: bool = False


class OutputScheduler:
    def __init__(
        self,
        config: RenderConfig,
        sink: DisplaySink,
        stop_event: threading.Event | None = None,
        loader: Callable[[Source], PixelGrid] = load_grid,
        rng: random.Random | None = None,
        clock: Callable[[], float] = time.perf_counter,
        sleep: Callable[[float], object] | None = None,
        frame_pause_s: float = FRAME_PAUSE_S,
    ) -> None:
        self.config = config
        self.sink = sink
        self.frame_pause_s = frame_pause_s

        self._stop = stop_event or threading.Event()
        self._loader = loader
        self._rng = rng or random.Random()
        self._sleep = sleep
        self._typewriter = Typewriter(sink, config.print_speed, self._stop, clock=clock, sleep=sleep)
        self._colour_map: RandomColourMap | None = None
        self._status = SchedulerStatus()
        self._logger = get_logger()

    @property
    def status(self) -> SchedulerStatus:
        return self._status

    @property
    def colour_map(self) -> RandomColourMap | None:
        return self._colour_map

    @property
    def stopped(self) -> bool:
        return self._stop.is_set()

    def stop(self) -> None:
        self._stop.set()

    def _log_event(self, event: str, message: str, level: int = logging.INFO, **fields: object) -> None:
        self._logger.log(level, message, extra={"event": event, **fields})

    def prepare(self, grid: PixelGrid) -> PixelGrid:
        return resize_grid(grid, self.config.width)

    def render(self, grid: PixelGrid) -> Frame:
        if self.config.colour_mode == ColourMode.RANDOM:
            self._colour_map = generate_random_colour_map(self._rng)
        mirrored = mirror_grid(grid, self.config.mirror_mode)
        return render_frame(mirrored, self.config.colour_mode, self._colour_map, ramp=self.config.ramp)

    def play_once(self, grid: PixelGrid) -> Frame:
        frame = self.render(grid)
        written = self._typewriter.type(frame)
        self._status.frames_played += 1
        self._status.cells_written += written
        self._log_event("frame_played", "frame played", cells=written, rows=frame.height)
        return frame

    def _pause(self) -> None:
        if self._sleep is not None:
            self._sleep(self.frame_pause_s)
        else:
            self._stop.wait(self.frame_pause_s)

    def _separate(self) -> None:
        self.sink.write(SEPARATOR)
        self.sink.flush()
        self._pause()

    def _load(self, source: Source) -> PixelGrid | None:
        try:
            return self._loader(source)
        except ImageSourceError as exc:
            self._status.sources_skipped += 1
            self._status.last_error = str(exc)
            self._log_event("source_skipped", f"skipping source: {exc}", level=logging.WARNING, source=str(source))
            return None

    def run_single(self, source: Source) -> bool:
        """Play one source once, or forever in loop mode. False if it fails to load."""
        grid = self._load(source)
        if grid is None:
            return False
        resized = self.prepare(grid)

        if not self.config.loop:
            self.play_once(resized)
            return True

        while not self.stopped:
            self.play_once(resized)
            if self.stopped:
                break
            self._separate()
        self._mark_stopped()
        return True

    def _play_pass(self, sources: list[Source]) -> int:
        played = 0
        for source in sources:
            if self.stopped:
                break
            grid = self._load(source)
            if grid is None:
                continue
            self.play_once(self.prepare(grid))
            played += 1
            if self.stopped:
                break
            self._separate()
        return played

    def run_sequence(self, sources: Iterable[Source]) -> int:
        """Play each source in turn; in loop mode restart from the first until stopped."""
        sources = list(sources)
        total = 0
        while not self.stopped:
            played = self._play_pass(sources)
            total += played
            if not self.config.loop:
                break
            if played == 0 and not self.stopped:
                self._log_event("sequence_empty", "no playable sources, retrying after pause", level=logging.WARNING)
                self._pause()
        if self.stopped:
            self._mark_stopped()
        return total

    def _mark_stopped(self) -> None:
        self._status.stopped = True
        self._log_event("scheduler_stopped", "scheduler stopped", frames=self._status.frames_played)
