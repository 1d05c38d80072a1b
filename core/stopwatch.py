from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .render_model import DrawModel, build_draw_model
from .splits import MAX_SPLITS, SplitTree
from .timing.clock import SYSTEM_CLOCK, Clock
from .timing.session_timer import SessionTimer


@dataclass
class Stopwatch:
    """Session timer plus its split tree; only the event loop mutates it."""

    timer: SessionTimer
    tree: SplitTree

    @classmethod
    def create(cls, clock: Clock = SYSTEM_CLOCK, max_splits: int = MAX_SPLITS) -> "Stopwatch":
        timer = SessionTimer(clock=clock)
        return cls(timer=timer, tree=SplitTree(timer, capacity=max_splits))

    def draw_model(self, now_ns: Optional[int] = None) -> DrawModel:
        total = self.timer.total_elapsed(now_ns)
        return build_draw_model(
            self.timer.goal,
            total,
            self.tree.snapshot(total),
            self.tree.active,
        )


__all__ = ["Stopwatch"]
