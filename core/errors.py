"""Exceptions raised by the split tracker and its collaborators."""

from __future__ import annotations

from pathlib import Path


class StopwatchError(Exception):
    """Base class for all splitwatch errors."""


class CapacityExceeded(StopwatchError):
    """Raised when opening a split would exceed the collection limit."""

    def __init__(self, capacity: int) -> None:
        self.capacity = capacity
        super().__init__(f"split limit reached ({capacity})")


class NoActiveSplit(StopwatchError):
    """Raised when a nested split is requested with nothing active."""

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"{operation} requires an active split")


class IoFailure(StopwatchError):
    """Raised when the session log cannot be written."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"failed to write {path}: {reason}")


__all__ = ["StopwatchError", "CapacityExceeded", "NoActiveSplit", "IoFailure"]
