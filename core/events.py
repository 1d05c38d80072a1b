"""Event models shared across the project.

``StreamEvent`` is what the tick and key producers put on the queue;
``Event`` is the journal record written to ``journal.jsonl``.
"""

from __future__ import annotations

from typing import Any, Dict, Literal, Optional

import time

import ulid
from pydantic import BaseModel, ConfigDict, Field


def now_ts_ms() -> int:
    """Return the current timestamp in milliseconds."""

    return int(time.time() * 1000)


def new_event_id() -> str:
    """Generate a ULID based identifier for events."""

    return str(ulid.new())


class StreamEvent(BaseModel):
    """One item of the merged tick/input stream."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["tick", "input"]
    key: Optional[str] = None
    monotonic_ns: int = Field(default_factory=time.monotonic_ns)

    @property
    def is_tick(self) -> bool:
        return self.kind == "tick"


def tick() -> StreamEvent:
    return StreamEvent(kind="tick")


def key_input(key: str) -> StreamEvent:
    return StreamEvent(kind="input", key=key)


class Event(BaseModel):
    """Journal entry describing something the stopwatch did."""

    model_config = ConfigDict(extra="allow")

    id: str = Field(default_factory=new_event_id)
    ts_ms: int = Field(default_factory=now_ts_ms)
    kind: Literal["meta", "command", "session", "split", "io"]
    session: str
    data: Dict[str, Any] = Field(default_factory=dict)


class SessionMeta(BaseModel):
    """Describes one run of the program."""

    log_path: str
    created_ts_ms: int = Field(default_factory=now_ts_ms)
    tick_interval_ms: int
    max_splits: int


def event_dump(event: BaseModel) -> Dict[str, Any]:
    """Return a JSON-ready ``dict`` for ``event``."""

    return event.model_dump(mode="json")


__all__ = [
    "Event",
    "SessionMeta",
    "StreamEvent",
    "event_dump",
    "key_input",
    "new_event_id",
    "now_ts_ms",
    "tick",
]
