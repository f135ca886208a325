"""A countdown timer and a context manager that reports elapsed time."""

from __future__ import annotations

import sys
import time
from datetime import timedelta
from typing import TextIO


def _to_milliseconds(duration: timedelta | float) -> int:
    if isinstance(duration, timedelta):
        return duration // timedelta(milliseconds=1)
    return int(duration * 1000)


def _elapsed_ms(start: float) -> int:
    return int((time.monotonic() - start) * 1000)


class Timer:
    """Expires once ``duration`` (a timedelta or seconds) has passed since creation."""

    def __init__(self, duration: timedelta | float) -> None:
        self._start = time.monotonic()
        self._limit_ms = _to_milliseconds(duration)

    def expired(self) -> bool:
        """True once the whole duration, in whole milliseconds, has elapsed."""
        return _elapsed_ms(self._start) >= self._limit_ms


class TimeMeasurer:
    """Writes ``Elapsed time: <ms>`` to a stream when its block ends."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream
        self._start = time.monotonic()

    def __enter__(self) -> TimeMeasurer:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        stream = self._stream if self._stream is not None else sys.stdout
        stream.write(f"Elapsed time: {_elapsed_ms(self._start)}\n")