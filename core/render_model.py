"""Drawable snapshot of the stopwatch, independent of any terminal."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence

from .splits import SplitRow
from .timing.formatting import format_duration

TITLE = "=== Enhanced Stopwatch ==="
CONTROLS = (
    "Controls: s/start-stop c/continue r/reset g/subgoal n/nested-subgoal "
    "h/stop-subgoal u/up d/redraw t/save-log q/quit"
)
NO_GOAL = "(none)"


@dataclass(frozen=True)
class DrawRow:
    level: int
    text: str
    live: bool
    active: bool = False

    @property
    def indent(self) -> int:
        return self.level * 2


@dataclass(frozen=True)
class DrawModel:
    title: str
    goal_line: str
    time_line: str
    splits_header: str
    rows: List[DrawRow]
    controls: str

    @property
    def live_rows(self) -> List[int]:
        """Positions in ``rows`` whose values change while the timer runs."""

        return [i for i, row in enumerate(self.rows) if row.live]


def format_row(row: SplitRow) -> str:
    return (
        f"{row.index + 1:2d}) {format_duration(row.start_ns)} -> "
        f"{format_duration(row.end_ns)} = {format_duration(row.duration_ns)} {row.name}"
    )


def build_draw_model(
    goal: Optional[str],
    total_ns: int,
    rows: Sequence[SplitRow],
    active: Optional[int] = None,
) -> DrawModel:
    return DrawModel(
        title=TITLE,
        goal_line=f"Goal  : {NO_GOAL if goal is None else goal}",
        time_line=f"Time  : {format_duration(total_ns)}",
        splits_header=f"Subgoals ({len(rows)}):",
        rows=[
            DrawRow(
                level=row.level,
                text=format_row(row),
                live=row.open,
                active=row.index == active,
            )
            for row in rows
        ],
        controls=CONTROLS,
    )


__all__ = ["CONTROLS", "DrawModel", "DrawRow", "NO_GOAL", "TITLE", "build_draw_model", "format_row"]
