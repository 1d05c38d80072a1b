"""Append-only forest of timed splits and the active-split pointer.

Split times are offsets into the session's pause-aware elapsed total rather
than raw monotonic instants, so a split that stays open while the session is
paused does not accumulate the paused time.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional

from .errors import CapacityExceeded, NoActiveSplit
from .timing.session_timer import SessionTimer

MAX_SPLITS = 100


@dataclass
class Split:
    name: str
    start_offset_ns: int
    start_wall: datetime
    parent: Optional[int] = None
    level: int = 0
    end_offset_ns: Optional[int] = None
    end_wall: Optional[datetime] = None

    @property
    def is_open(self) -> bool:
        return self.end_offset_ns is None

    def duration_ns(self, now_total_ns: int) -> int:
        end = now_total_ns if self.end_offset_ns is None else self.end_offset_ns
        return max(0, end - self.start_offset_ns)


@dataclass(frozen=True)
class SplitRow:
    """Display values for one split at a given instant."""

    index: int
    name: str
    level: int
    start_ns: int
    end_ns: int
    duration_ns: int
    open: bool
    active: bool


class SplitTree:
    """Splits of the current session, measured against ``timer``.

    Indices handed out by :meth:`open_split` stay valid until :meth:`clear`
    starts a new session.
    """

    def __init__(self, timer: SessionTimer, capacity: int = MAX_SPLITS) -> None:
        self.timer = timer
        self.capacity = capacity
        self.splits: List[Split] = []
        self.active: Optional[int] = None

    def __len__(self) -> int:
        return len(self.splits)

    def __getitem__(self, index: int) -> Split:
        return self.splits[index]

    @property
    def full(self) -> bool:
        return len(self.splits) >= self.capacity

    # ------------------------------------------------------------------
    # Mutators
    # ------------------------------------------------------------------
    def open_split(self, name: str, nested: bool = False) -> int:
        """Open a split beneath the active one and make it active.

        With ``nested`` the caller insists on a parent; without an active
        split that raises :class:`NoActiveSplit` instead of opening a
        top-level split.
        """

        if self.full:
            raise CapacityExceeded(self.capacity)
        parent = self.active
        if nested and parent is None:
            raise NoActiveSplit("open nested split")
        level = 0 if parent is None else self.splits[parent].level + 1
        self.splits.append(
            Split(
                name=name,
                start_offset_ns=self.timer.total_elapsed(),
                start_wall=self.timer.clock.wall(),
                parent=parent,
                level=level,
            )
        )
        self.active = len(self.splits) - 1
        return self.active

    def close_active(self) -> Optional[int]:
        if self.active is None:
            return None
        index = self.active
        split = self.splits[index]
        split.end_offset_ns = max(split.start_offset_ns, self.timer.total_elapsed())
        split.end_wall = self.timer.clock.wall()
        self.active = split.parent
        return index

    def ascend(self) -> Optional[int]:
        """Move focus to the active split's parent, leaving it running."""

        if self.active is None:
            return None
        self.active = self.splits[self.active].parent
        return self.active

    def clear(self) -> None:
        self.splits = []
        self.active = None

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def closed(self) -> List[Split]:
        return [s for s in self.splits if not s.is_open]

    def snapshot(self, now_total_ns: int) -> List[SplitRow]:
        rows: List[SplitRow] = []
        for idx, split in enumerate(self.splits):
            end = split.end_offset_ns
            if end is None:
                end = max(split.start_offset_ns, now_total_ns)
            rows.append(
                SplitRow(
                    index=idx,
                    name=split.name,
                    level=split.level,
                    start_ns=split.start_offset_ns,
                    end_ns=end,
                    duration_ns=end - split.start_offset_ns,
                    open=split.is_open,
                    active=idx == self.active,
                )
            )
        return rows


__all__ = ["MAX_SPLITS", "Split", "SplitRow", "SplitTree"]
