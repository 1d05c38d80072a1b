"""Append-only JSONL journal of one stopwatch run."""

from __future__ import annotations

import json
from pathlib import Path
from threading import Lock
from typing import IO, Any, Dict, Optional

from core.events import Event, event_dump, new_event_id


class SessionJournal:
    """
    Writes :class:`Event` records, one JSON object per line.

    Every record carries the journal's ``session`` id. Safe to share between
    threads of one process.
    """

    def __init__(self, path: Path, session: Optional[str] = None, flush_every: int = 1):
        ensure_dir(path.parent)
        self.path = path
        self.session = session or new_event_id()
        self._f: IO[str] = path.open("a", encoding="utf-8")
        self._written = 0
        self._flush_every = max(1, flush_every)
        self._lock = Lock()

    def record(self, kind: str, data: Optional[Dict[str, Any]] = None) -> Event:
        event = Event(kind=kind, session=self.session, data=data or {})
        self.write(event)
        return event

    def write(self, event: Event) -> None:
        line = json.dumps(event_dump(event), ensure_ascii=False)
        with self._lock:
            self._f.write(line + "\n")
            self._written += 1
            if self._written % self._flush_every == 0:
                self._f.flush()

    @property
    def closed(self) -> bool:
        return self._f.closed

    def close(self) -> None:
        with self._lock:
            if self._f.closed:
                return
            try:
                self._f.flush()
            finally:
                self._f.close()


def ensure_dir(p: Path) -> None:
    p.mkdir(parents=True, exist_ok=True)
