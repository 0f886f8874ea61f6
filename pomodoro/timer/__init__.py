"""Timer package."""

from .engine import Mode, TimerState, format_time
from .driver import CountdownDriver, TICK_INTERVAL_MS

__all__ = [
    "Mode",
    "TimerState",
    "format_time",
    "CountdownDriver",
    "TICK_INTERVAL_MS",
]
