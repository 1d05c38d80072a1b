"""Keyboard producer for the merged event queue."""

from __future__ import annotations

import os
import queue
import select
import sys
import threading
from contextlib import contextmanager
from typing import IO, Iterator, Optional

from core.events import StreamEvent, key_input

try:  # Windows console input
    import msvcrt  # type: ignore
except ImportError:  # pragma: no cover - platform dependent
    msvcrt = None  # type: ignore[assignment]


class KeyReader:
    """Read single keys from ``stream`` on a daemon thread.

    While :meth:`paused` is held nothing is read, so a line prompt on the
    consumer thread gets every character the user types.
    """

    def __init__(
        self,
        events: "queue.Queue[StreamEvent]",
        stream: Optional[IO[str]] = None,
        *,
        poll_interval: float = 0.03,
    ) -> None:
        self.events = events
        self.stream = stream or sys.stdin
        self._poll_interval = max(0.005, poll_interval)

        self._stop_event = threading.Event()
        self._lock = threading.Lock()
        self._thread: Optional[threading.Thread] = None

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def start(self) -> None:
        if self._thread and self._thread.is_alive():  # already running
            return
        self._stop_event.clear()
        self._thread = threading.Thread(target=self._run, name="stopwatch-keys", daemon=True)
        self._thread.start()

    def stop(self) -> None:
        """Ask the thread to finish; it is not joined."""
        self._stop_event.set()

    @contextmanager
    def paused(self) -> Iterator[None]:
        with self._lock:
            yield

    # ------------------------------------------------------------------
    # Reading
    # ------------------------------------------------------------------
    def _run(self) -> None:
        while not self._stop_event.is_set():
            if not self._ready(self._poll_interval):
                continue
            with self._lock:
                # A prompt may have consumed the input while we waited.
                if self._stop_event.is_set() or not self._ready(0):
                    continue
                key = self._read_key()
            if key is None:
                self._stop_event.set()
                break
            if key:
                self.events.put(key_input(key))

    def _ready(self, timeout: float) -> bool:
        if msvcrt is not None and self.stream is sys.stdin:
            if msvcrt.kbhit():
                return True
            self._stop_event.wait(timeout)
            return False
        readable, _, _ = select.select([self.stream], [], [], timeout)
        return bool(readable)

    def _read_key(self) -> Optional[str]:
        """One key, ``""`` for undecodable input and ``None`` at end of input."""
        if msvcrt is not None and self.stream is sys.stdin:
            return msvcrt.getwch()
        data = os.read(self.stream.fileno(), 1)
        if not data:
            return None
        return data.decode("utf-8", errors="ignore")


__all__ = ["KeyReader"]
