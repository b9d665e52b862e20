"""Shared plumbing for handlers writing one line per record to a text sink."""

import os
import sys
from typing import Optional, TextIO

from ..types import LogRecord


def is_a_tty(stream) -> bool:
    """Return True if the stream is a TTY-like object."""
    try:
        return stream.isatty()
    except (AttributeError, ValueError):
        return False


def supports_color(stream, force: Optional[bool] = None) -> bool:
    """
    Decide whether to emit ANSI colors on `stream`.
    Honors NO_COLOR, and FORCE_COLOR=1/true/yes when `force` is not given.
    """
    if force is not None:
        return bool(force)
    if os.getenv("NO_COLOR"):
        return False
    if os.getenv("FORCE_COLOR", "").lower() in ("1", "true", "yes"):
        return True
    return is_a_tty(stream)


class StreamHandler:
    """Base class for handlers rendering a record to one line of text.

    :param stream: object with a `write(str)` method; None means the
        `sys.stdout` current at write time
    """

    def __init__(self, stream: Optional[TextIO] = None):
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def __call__(self, record: LogRecord) -> None:
        self.write(self.format(record))

    def format(self, record: LogRecord) -> str:
        raise NotImplementedError("Subclasses must implement this method")

    def write(self, line: str) -> None:
        stream = self.stream
        stream.write(line + "\n")
        flush = getattr(stream, "flush", None)
        if flush is not None:
            flush()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(stream={self._stream!r})"
