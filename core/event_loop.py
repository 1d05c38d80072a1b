"""Single consumer of the merged tick/input queue.

Every mutation of the :class:`Stopwatch` happens on the thread that calls
:meth:`EventLoop.run`. Rendering errors propagate out of ``run``; failures to
save the session log are recorded in the journal and otherwise ignored.
"""

from __future__ import annotations

import contextlib
import queue
from typing import Any, Dict, Iterable, List, Optional, Protocol

from .dispatcher import Dispatcher, Effect, PersistLog, Prompt, Record, Render, Terminate
from .errors import IoFailure
from .events import StreamEvent
from .exporter import LogRecord
from .render_model import DrawModel
from .stopwatch import Stopwatch


class Renderer(Protocol):
    def draw(self, model: DrawModel) -> None: ...

    def refresh(self, model: DrawModel) -> None: ...


class LineReader(Protocol):
    def read(self, prompt: str) -> str: ...


class LogSink(Protocol):
    def append(self, records: Iterable[LogRecord]) -> int: ...


class Journal(Protocol):
    def record(self, kind: str, data: Optional[Dict[str, Any]] = None) -> Any: ...


class EventLoop:
    def __init__(
        self,
        stopwatch: Stopwatch,
        events: "queue.Queue[StreamEvent]",
        renderer: Renderer,
        line_reader: LineReader,
        log_sink: LogSink,
        *,
        journal: Optional[Journal] = None,
        dispatcher: Optional[Dispatcher] = None,
    ) -> None:
        self.stopwatch = stopwatch
        self.events = events
        self.renderer = renderer
        self.line_reader = line_reader
        self.log_sink = log_sink
        self.journal = journal
        self.dispatcher = dispatcher or Dispatcher(stopwatch)

        self._running = False
        self._pending: Optional[StreamEvent] = None

    @property
    def running(self) -> bool:
        return self._running

    # ------------------------------------------------------------------
    # Main loop
    # ------------------------------------------------------------------
    def run(self) -> None:
        self._running = True
        self.renderer.draw(self.stopwatch.draw_model())
        while self._running:
            self.handle(self._next_event())

    def handle(self, event: StreamEvent) -> None:
        effects = self.dispatcher.dispatch(event)
        if not event.is_tick:
            self.record("command", {"key": event.key, "applied": bool(effects)})
        self._apply(effects)

    def _next_event(self) -> StreamEvent:
        """Next event in arrival order, with runs of ticks folded into one."""

        if self._pending is not None:
            event, self._pending = self._pending, None
            return event
        event = self.events.get()
        while event.is_tick:
            try:
                following = self.events.get_nowait()
            except queue.Empty:
                break
            if not following.is_tick:
                self._pending = following
                break
            event = following
        return event

    # ------------------------------------------------------------------
    # Effects
    # ------------------------------------------------------------------
    def _apply(self, effects: List[Effect]) -> None:
        for effect in effects:
            if isinstance(effect, Render):
                model = self.stopwatch.draw_model()
                if effect.full:
                    self.renderer.draw(model)
                else:
                    self.renderer.refresh(model)
            elif isinstance(effect, Prompt):
                text = self.line_reader.read(effect.message)
                self._discard_typed_ahead()
                self._apply(effect.then(self.stopwatch, text))
            elif isinstance(effect, PersistLog):
                self._persist(effect.records)
            elif isinstance(effect, Record):
                self.record(effect.kind, effect.data)
            elif isinstance(effect, Terminate):
                self._running = False
                return

    def _discard_typed_ahead(self) -> None:
        """Drop keys queued before the prompt took over the terminal."""

        dropped = 0
        if self._pending is not None and not self._pending.is_tick:
            dropped += 1
        self._pending = None
        while True:
            try:
                event = self.events.get_nowait()
            except queue.Empty:
                break
            if not event.is_tick:
                dropped += 1
        if dropped:
            self.record("command", {"discarded": dropped})

    def _persist(self, records: List[LogRecord]) -> None:
        try:
            written = self.log_sink.append(records)
        except IoFailure as exc:
            self.record("io", {"action": "save", "ok": False, "path": str(exc.path), "error": exc.reason})
            return
        self.record("io", {"action": "save", "ok": True, "records": len(records), "bytes": written})

    def record(self, kind: str, data: Dict[str, Any]) -> None:
        if self.journal is None:
            return
        with contextlib.suppress(OSError, ValueError):
            self.journal.record(kind, data)


__all__ = ["EventLoop", "Journal", "LineReader", "LogSink", "Renderer"]
