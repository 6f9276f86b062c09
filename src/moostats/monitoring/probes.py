"""
Clock and memory probes used for timing/memory instrumentation.

Both are narrow protocols so statistics can be driven by fakes in tests.
Memory readings are process-wide and approximate: a delta can be negative
when memory is returned to the OS between two readings.
"""

from __future__ import annotations

import time
from typing import Protocol, runtime_checkable

import psutil


@runtime_checkable
class Clock(Protocol):
    def now_ms(self) -> int: ...


@runtime_checkable
class UsageProbe(Protocol):
    def used_bytes(self) -> int: ...


class SystemClock:
    """Monotonic wall-clock in whole milliseconds."""

    def now_ms(self) -> int:
        return time.monotonic_ns() // 1_000_000


class ProcessUsageProbe:
    """Resident set size of the current process, via psutil."""

    def __init__(self) -> None:
        self._process = psutil.Process()

    def used_bytes(self) -> int:
        return int(self._process.memory_info().rss)


__all__ = ["Clock", "UsageProbe", "SystemClock", "ProcessUsageProbe"]
