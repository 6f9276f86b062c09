"""
Line-oriented output for statistics logs.

Fields are written one at a time, separated by single spaces, and a line is
closed with :meth:`StatisticsSink.end_line`. A line may be built across
several hooks (the generation number is written long before the fitness
columns), so the sink keeps track of whether the current line has started.
"""

from __future__ import annotations

import gzip as gzip_lib
import logging
import math
import sys
from pathlib import Path
from typing import IO

import numpy as np

from moostats.foundation.exceptions import SinkOpenError


def _logger() -> logging.Logger:
    return logging.getLogger(__name__)


def format_field(value: object) -> str:
    """Render one numeric column; undefined values become ``nan``."""
    if value is None:
        return "nan"
    if isinstance(value, (bool, np.bool_)):
        raise TypeError("Boolean values are not valid statistics columns.")
    if isinstance(value, (int, np.integer)):
        return str(int(value))
    number = float(value)
    if math.isnan(number):
        return "nan"
    return repr(number)


class StatisticsSink:
    """
    Destination for statistics lines: a file (optionally gzip-compressed) or stdout.

    Opening happens in the constructor so a bad destination fails at setup,
    before any generation runs.
    """

    def __init__(
        self,
        path: str | Path | None = None,
        *,
        compress: bool = False,
        stream: IO[str] | None = None,
    ) -> None:
        self._owns_stream = False
        self._line_started = False
        self.path: Path | None = None
        if stream is not None:
            self._stream = stream
        elif path is None:
            self._stream = sys.stdout
        else:
            target = Path(path).expanduser()
            if compress and target.suffix != ".gz":
                target = target.with_name(target.name + ".gz")
            try:
                if compress:
                    self._stream = gzip_lib.open(target, "wt", encoding="utf-8")
                else:
                    self._stream = target.open("w", encoding="utf-8")
            except OSError as exc:
                raise SinkOpenError(str(target), str(exc)) from exc
            self._owns_stream = True
            self.path = target
            _logger().debug("Opened statistics log %s (compressed=%s)", target, compress)

    def write_field(self, value: object) -> None:
        text = format_field(value)
        if self._line_started:
            self._stream.write(" ")
        self._stream.write(text)
        self._line_started = True

    def write_fields(self, *values: object) -> None:
        for value in values:
            self.write_field(value)

    def end_line(self) -> None:
        self._stream.write("\n")
        self._stream.flush()
        self._line_started = False

    @property
    def line_started(self) -> bool:
        return self._line_started

    def close(self) -> None:
        if self._line_started:
            self.end_line()
        if self._owns_stream:
            self._stream.close()
            self._owns_stream = False
            _logger().debug("Closed statistics log %s", self.path)

    def __enter__(self) -> "StatisticsSink":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


__all__ = ["StatisticsSink", "format_field"]
