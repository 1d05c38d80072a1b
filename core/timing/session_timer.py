
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional

from .clock import SYSTEM_CLOCK, Clock


class SessionState(str, Enum):
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"


@dataclass
class SessionTimer:
    """Run state of the main goal.

    ``elapsed_ns`` holds the total of all finished running segments; the
    current segment is added on the fly while ``running``.
    """

    clock: Clock = field(default=SYSTEM_CLOCK, repr=False)
    goal: Optional[str] = None
    running: bool = False
    elapsed_ns: int = 0
    segment_start_ns: int = 0
    started_wall: Optional[datetime] = None

    def start(self, goal: str):
        self.goal = goal
        self.elapsed_ns = 0
        self.segment_start_ns = self.clock.monotonic_ns()
        self.started_wall = self.clock.wall()
        self.running = True

    def stop(self):
        if not self.running:
            return
        now = self.clock.monotonic_ns()
        self.elapsed_ns += max(0, now - self.segment_start_ns)
        self.running = False

    def resume(self):
        if self.running:
            return
        self.segment_start_ns = self.clock.monotonic_ns()
        self.running = True

    def reset(self):
        self.goal = None
        self.elapsed_ns = 0
        self.running = False
        self.started_wall = None

    def total_elapsed(self, now_ns: Optional[int] = None) -> int:
        if not self.running:
            return self.elapsed_ns
        now = self.clock.monotonic_ns() if now_ns is None else now_ns
        return self.elapsed_ns + max(0, now - self.segment_start_ns)

    @property
    def state(self) -> SessionState:
        if self.running:
            return SessionState.RUNNING
        if self.goal is None:
            return SessionState.IDLE
        return SessionState.PAUSED
