"""Display sink package for paced terminal output."""

from .sink import RESET_SEQUENCE, BufferSink, DisplaySink, TerminalSink

__all__ = [
    "RESET_SEQUENCE",
    "BufferSink",
    "DisplaySink",
    "TerminalSink",
]
