"""Clock sources for duration math and log timestamps."""

from __future__ import annotations

import time
from datetime import datetime
from typing import Protocol


class Clock(Protocol):
    def monotonic_ns(self) -> int: ...

    def wall(self) -> datetime: ...


class SystemClock:
    """Monotonic nanoseconds for durations, local wall time for the log."""

    def monotonic_ns(self) -> int:
        return time.monotonic_ns()

    def wall(self) -> datetime:
        return datetime.now()


SYSTEM_CLOCK = SystemClock()

__all__ = ["Clock", "SystemClock", "SYSTEM_CLOCK"]
