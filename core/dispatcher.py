"""Key commands and the handlers behind them.

Handlers take the :class:`Stopwatch`, mutate it, and return the side
effects the event loop should perform. A command whose precondition does not
hold returns no effects at all; there is no error path for the user to see.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Union

from .events import StreamEvent
from .exporter import LogRecord, export_session
from .stopwatch import Stopwatch


class Command(str, Enum):
    START_STOP = "s"
    RESUME = "c"
    RESET = "r"
    OPEN_SPLIT = "g"
    OPEN_NESTED = "n"
    CLOSE_SPLIT = "h"
    ASCEND = "u"
    REDRAW = "d"
    SAVE_LOG = "t"
    QUIT = "q"

    @classmethod
    def from_key(cls, key: Optional[str]) -> Optional["Command"]:
        try:
            return cls(key)
        except ValueError:
            return None


# ---------------------------------------------------------------------------
# Effects
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Render:
    full: bool = True


@dataclass(frozen=True)
class Prompt:
    """Ask for a line of text, then hand it to ``then``."""

    message: str
    then: Callable[[Stopwatch, str], List["Effect"]]


@dataclass(frozen=True)
class PersistLog:
    records: List[LogRecord]


@dataclass(frozen=True)
class Terminate:
    pass


@dataclass(frozen=True)
class Record:
    """Journal entry; ``kind`` matches :class:`core.events.Event`."""

    kind: str
    data: Dict[str, Any] = field(default_factory=dict)


Effect = Union[Render, Prompt, PersistLog, Terminate, Record]
Handler = Callable[[Stopwatch], List[Effect]]


# ---------------------------------------------------------------------------
# Session handlers
# ---------------------------------------------------------------------------


def _begin_session(sw: Stopwatch, goal: str) -> List[Effect]:
    sw.timer.start(goal)
    sw.tree.clear()
    return [Record("session", {"action": "start", "goal": goal}), Render()]


def start_stop(sw: Stopwatch) -> List[Effect]:
    # Starting while paused discards the paused session.
    if not sw.timer.running:
        return [Prompt("Enter main goal: ", _begin_session)]
    sw.timer.stop()
    return [
        Record("session", {"action": "stop", "elapsed_ns": sw.timer.elapsed_ns}),
        Render(),
    ]


def resume(sw: Stopwatch) -> List[Effect]:
    if sw.timer.running or sw.timer.goal is None:
        return []
    sw.timer.resume()
    return [Record("session", {"action": "resume"}), Render()]


def reset(sw: Stopwatch) -> List[Effect]:
    sw.timer.reset()
    sw.tree.clear()
    return [Record("session", {"action": "reset"}), Render()]


# ---------------------------------------------------------------------------
# Split handlers
# ---------------------------------------------------------------------------


def _opener(nested: bool) -> Callable[[Stopwatch, str], List[Effect]]:
    def _open(sw: Stopwatch, name: str) -> List[Effect]:
        index = sw.tree.open_split(name, nested=nested)
        split = sw.tree[index]
        return [
            Record(
                "split",
                {"action": "open", "index": index, "name": name, "level": split.level},
            ),
            Render(),
        ]

    return _open


def open_split(sw: Stopwatch) -> List[Effect]:
    if not sw.timer.running or sw.tree.full:
        return []
    return [Prompt("Enter subgoal name: ", _opener(nested=False))]


def open_nested(sw: Stopwatch) -> List[Effect]:
    if not sw.timer.running or sw.tree.full or sw.tree.active is None:
        return []
    return [Prompt("Enter nested subgoal name: ", _opener(nested=True))]


def close_split(sw: Stopwatch) -> List[Effect]:
    index = sw.tree.close_active()
    if index is None:
        return []
    split = sw.tree[index]
    return [
        Record(
            "split",
            {
                "action": "close",
                "index": index,
                "duration_ns": split.duration_ns(split.end_offset_ns or 0),
            },
        ),
        Render(),
    ]


def ascend(sw: Stopwatch) -> List[Effect]:
    if sw.tree.active is None:
        return []
    left = sw.tree.active
    sw.tree.ascend()
    return [Record("split", {"action": "ascend", "from": left, "to": sw.tree.active}), Render()]


# ---------------------------------------------------------------------------
# Misc
# ---------------------------------------------------------------------------


def redraw(sw: Stopwatch) -> List[Effect]:
    return [Render()]


def save_log(sw: Stopwatch) -> List[Effect]:
    if sw.timer.running or sw.timer.goal is None:
        return []
    return [PersistLog(export_session(sw.timer, sw.tree))]


def quit_(sw: Stopwatch) -> List[Effect]:
    return [Terminate()]


HANDLERS: Dict[Command, Handler] = {
    Command.START_STOP: start_stop,
    Command.RESUME: resume,
    Command.RESET: reset,
    Command.OPEN_SPLIT: open_split,
    Command.OPEN_NESTED: open_nested,
    Command.CLOSE_SPLIT: close_split,
    Command.ASCEND: ascend,
    Command.REDRAW: redraw,
    Command.SAVE_LOG: save_log,
    Command.QUIT: quit_,
}


class Dispatcher:
    """Routes stream events to handlers."""

    def __init__(self, stopwatch: Stopwatch, handlers: Optional[Dict[Command, Handler]] = None) -> None:
        self.stopwatch = stopwatch
        self.handlers = dict(HANDLERS if handlers is None else handlers)

    def dispatch(self, event: StreamEvent) -> List[Effect]:
        if event.is_tick:
            return [Render(full=False)] if self.stopwatch.timer.running else []
        command = Command.from_key(event.key)
        if command is None:
            return []
        handler = self.handlers.get(command)
        return [] if handler is None else handler(self.stopwatch)


__all__ = [
    "Command",
    "Dispatcher",
    "Effect",
    "HANDLERS",
    "PersistLog",
    "Prompt",
    "Record",
    "Render",
    "Terminate",
]
