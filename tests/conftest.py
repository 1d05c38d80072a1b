from datetime import datetime, timedelta

import pytest

from core.stopwatch import Stopwatch

NS_PER_S = 1_000_000_000


class ManualClock:
    """Clock that only moves when told to; wall time follows monotonic time."""

    def __init__(self, wall_origin: datetime = datetime(2024, 3, 1, 9, 0, 0)) -> None:
        self.now_ns = 0
        self.wall_origin = wall_origin

    def monotonic_ns(self) -> int:
        return self.now_ns

    def wall(self) -> datetime:
        return self.wall_origin + timedelta(microseconds=self.now_ns // 1000)

    def advance(self, seconds: float) -> None:
        self.now_ns += int(seconds * NS_PER_S)


@pytest.fixture
def clock():
    return ManualClock()


@pytest.fixture
def stopwatch(clock):
    return Stopwatch.create(clock=clock)
