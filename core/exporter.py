"""Turn a paused session into outline log records."""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel

from .splits import SplitTree
from .timing.session_timer import SessionTimer

SESSION_CLOCK_FORMAT = "%Y-%m-%d %H:%M"
SPLIT_CLOCK_FORMAT = "%Y-%m-%d %H:%M:%S"


class LogRecord(BaseModel):
    """One outline heading with its clock line.

    ``depth`` is the number of heading stars; the session record sits at
    depth 1 and a split at ``level + 2``.
    """

    depth: int
    title: str
    clock_start: str
    clock_end: str
    duration_ns: int
    start_offset_ns: Optional[int] = None
    end_offset_ns: Optional[int] = None


def export_session(
    timer: SessionTimer,
    tree: SplitTree,
    now_wall: Optional[datetime] = None,
) -> List[LogRecord]:
    """Build the records for ``timer``'s goal followed by its closed splits.

    Splits still open at export time are left out. Nothing is remembered
    between calls, so exporting twice yields the same records twice.
    """

    if timer.goal is None:
        return []
    end_wall = now_wall or timer.clock.wall()
    start_wall = timer.started_wall or end_wall
    records = [
        LogRecord(
            depth=1,
            title=timer.goal,
            clock_start=start_wall.strftime(SESSION_CLOCK_FORMAT),
            clock_end=end_wall.strftime(SESSION_CLOCK_FORMAT),
            duration_ns=timer.total_elapsed(),
        )
    ]
    for split in tree.splits:
        # Open splits have no end yet.
        if split.end_offset_ns is None or split.end_wall is None:
            continue
        records.append(
            LogRecord(
                depth=split.level + 2,
                title=split.name,
                clock_start=split.start_wall.strftime(SPLIT_CLOCK_FORMAT),
                clock_end=split.end_wall.strftime(SPLIT_CLOCK_FORMAT),
                duration_ns=split.duration_ns(split.end_offset_ns),
                start_offset_ns=split.start_offset_ns,
                end_offset_ns=split.end_offset_ns,
            )
        )
    return records


__all__ = ["LogRecord", "SESSION_CLOCK_FORMAT", "SPLIT_CLOCK_FORMAT", "export_session"]
