"""Producers feeding the merged event queue."""

from __future__ import annotations

import queue
import threading
import time
from typing import Optional

from .events import StreamEvent, tick


class TickSource:
    """Put a tick on ``events`` every ``interval`` seconds from a daemon thread."""

    def __init__(self, events: "queue.Queue[StreamEvent]", interval: float = 0.03) -> None:
        self.events = events
        self._interval = max(0.005, float(interval))
        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def interval(self) -> float:
        return self._interval

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def start(self) -> None:
        if self._thread and self._thread.is_alive():  # already running
            return
        self._stop_event.clear()
        self._thread = threading.Thread(target=self._run, name="stopwatch-tick", daemon=True)
        self._thread.start()

    def stop(self) -> None:
        """Ask the thread to finish; it is not joined."""

        self._stop_event.set()

    def _run(self) -> None:
        while not self._stop_event.is_set():
            start = time.monotonic()
            self.events.put(tick())
            wait_for = self._interval - (time.monotonic() - start)
            if wait_for > 0:
                self._stop_event.wait(wait_for)


__all__ = ["TickSource"]
