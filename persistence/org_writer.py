"""Append session records to an org-mode outline file."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List

from core.errors import IoFailure
from core.exporter import LogRecord
from core.timing.formatting import format_duration

from .journal import ensure_dir


def format_record(record: LogRecord) -> str:
    """Render one heading plus its ``:LOGBOOK:`` drawer."""

    lines: List[str] = [
        f"{'*' * record.depth} {record.title}",
        "  :LOGBOOK:",
        f"  CLOCK: [{record.clock_start}]--[{record.clock_end}] => "
        f"{format_duration(record.duration_ns)}",
        "  :END:",
        "",
    ]
    return "\n".join(lines) + "\n"


class OrgLogWriter:
    """Appends records to ``path``; the file is created on first save.

    Writers in other processes are not coordinated with.
    """

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def append(self, records: Iterable[LogRecord]) -> int:
        text = "".join(format_record(r) for r in records)
        if not text:
            return 0
        try:
            ensure_dir(self.path.parent)
            with self.path.open("a", encoding="utf-8") as fh:
                fh.write(text)
        except OSError as exc:
            raise IoFailure(self.path, exc.strerror or str(exc)) from exc
        return len(text)


__all__ = ["OrgLogWriter", "format_record"]
