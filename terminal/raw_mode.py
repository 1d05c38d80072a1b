"""Scoped cbreak mode for the controlling terminal."""

from __future__ import annotations

import sys
from contextlib import contextmanager
from typing import IO, Any, Iterator, List, Optional

try:  # POSIX only; Windows consoles deliver keys through msvcrt without a mode switch
    import termios
    import tty
except ImportError:  # pragma: no cover - platform dependent
    termios = None  # type: ignore[assignment]
    tty = None  # type: ignore[assignment]


class RawTerminal:
    """Switch ``stream`` to cbreak mode for the lifetime of a ``with`` block.

    Single keys become readable without Enter while signals (Ctrl+C) still
    work. The saved attributes are restored on every exit path. Streams that
    are not a TTY are left alone.
    """

    def __init__(self, stream: Optional[IO[str]] = None) -> None:
        self.stream = stream or sys.stdin
        self._saved: Optional[List[Any]] = None

    @property
    def active(self) -> bool:
        return self._saved is not None

    def _fd(self) -> int:
        return self.stream.fileno()

    def enter(self) -> None:
        if self._saved is not None or termios is None or not self.stream.isatty():
            return
        fd = self._fd()
        self._saved = termios.tcgetattr(fd)
        tty.setcbreak(fd)

    def restore(self) -> None:
        if self._saved is None:
            return
        saved, self._saved = self._saved, None
        termios.tcsetattr(self._fd(), termios.TCSADRAIN, saved)

    def __enter__(self) -> "RawTerminal":
        self.enter()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.restore()

    @contextmanager
    def cooked(self) -> Iterator[None]:
        """Temporarily give the terminal back its line discipline."""
        if self._saved is None:
            yield
            return
        fd = self._fd()
        termios.tcsetattr(fd, termios.TCSADRAIN, self._saved)
        try:
            yield
        finally:
            tty.setcbreak(fd)


__all__ = ["RawTerminal"]
