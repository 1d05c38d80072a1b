from .clock import SYSTEM_CLOCK, Clock, SystemClock
from .formatting import NS_PER_MS, format_duration
from .session_timer import SessionState, SessionTimer

__all__ = [
    "Clock",
    "NS_PER_MS",
    "SYSTEM_CLOCK",
    "SessionState",
    "SessionTimer",
    "SystemClock",
    "format_duration",
]
