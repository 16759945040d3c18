"""Text sinks that accept rendered glyph cells."""

from __future__ import annotations

import sys
from typing import Protocol, TextIO

RESET_SEQUENCE = "\x1b[0m"


class DisplaySink(Protocol):
    def write(self, text: str) -> int: ...

    def flush(self) -> None: ...


class TerminalSink:
    """Thin wrapper over a text stream; every write is flushed so pacing stays visible."""

    def __init__(self, stream: TextIO | None = None, autoflush: bool = True) -> None:
        self._stream = stream if stream is not None else sys.stdout
        self.autoflush = autoflush
        self.chars_written = 0

    @property
    def stream(self) -> TextIO:
        return self._stream

    @property
    def is_tty(self) -> bool:
        isatty = getattr(self._stream, "isatty", None)
        return bool(isatty and isatty())

    def write(self, text: str) -> int:
        written = self._stream.write(text)
        self.chars_written += len(text)
        if self.autoflush:
            self._stream.flush()
        return int(written if written is not None else len(text))

    def flush(self) -> None:
        self._stream.flush()

    def reset(self) -> None:
        """Restore default colours and end the current line."""
        self._stream.write(RESET_SEQUENCE + "\n")
        self._stream.flush()


class BufferSink:
    """In-memory sink that records each write as one chunk."""

    def __init__(self) -> None:
        self.chunks: list[str] = []
        self.flushes = 0

    def write(self, text: str) -> int:
        self.chunks.append(text)
        return len(text)

    def flush(self) -> None:
        self.flushes += 1

    def getvalue(self) -> str:
        return "".join(self.chunks)
