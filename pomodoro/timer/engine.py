"""Countdown state machine for Pomodoro.

States
------
STOPPED   ``is_running`` is False — the display shows ``remaining_seconds``.
RUNNING   ``is_running`` is True — a driver calls ``tick()`` once a second.

The running flag is orthogonal to the selected ``Mode``.

Transitions
-----------
any      → STOPPED   (select_mode — always resets to the mode's duration)
STOPPED  → RUNNING   (toggle_start)
RUNNING  → STOPPED   (toggle_start — remaining time is kept)
RUNNING  → STOPPED   (tick that exhausts the countdown — auto-reset)

This module is pure: no Qt, no clock.  Whoever owns the one-second
cadence (see ``driver.CountdownDriver``) calls ``tick()``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


# ── modes ─────────────────────────────────────────────────────────────────


class Mode(Enum):
    """The three countdown presets.

    Each member's value is ``(duration_seconds, color_token, label)``.
    The colour token is opaque here; ``ui.styles`` resolves it.
    """

    WORK = (1500, "light_yellow", "Pomodoro")
    SHORT_BREAK = (30, "light_green", "Short Break")
    LONG_BREAK = (60, "light_pink", "Long Break")

    def __init__(self, duration: int, color: str, label: str) -> None:
        self.duration = duration
        self.color = color
        self.label = label


# ── formatting ────────────────────────────────────────────────────────────


def format_time(seconds: int) -> str:
    """Return *seconds* as zero-padded ``MM:SS``."""
    if seconds < 0:
        raise ValueError(f"cannot format negative time: {seconds}")
    minutes, secs = divmod(seconds, 60)
    return f"{minutes:02d}:{secs:02d}"


# ── state ─────────────────────────────────────────────────────────────────


@dataclass
class TimerState:
    """The single mutable timer entity.

    Mutate it only through ``select_mode``, ``toggle_start`` and
    ``tick``; ``remaining_seconds`` stays within ``1..mode.duration``.
    The tick that would reach zero resets instead, so 0 (and "00:00")
    is never observable.
    """

    mode: Mode = Mode.WORK
    remaining_seconds: int = Mode.WORK.duration
    is_running: bool = False

    @property
    def color(self) -> str:
        return self.mode.color

    def select_mode(self, mode: Mode) -> None:
        """Switch to *mode*, reset the countdown and stop."""
        if not isinstance(mode, Mode):
            raise TypeError(f"expected Mode, got {type(mode).__name__}")
        self.mode = mode
        self.remaining_seconds = mode.duration
        self.is_running = False

    def toggle_start(self) -> bool:
        """Flip the running flag and return the new value.

        Stopping keeps ``remaining_seconds``; only ``select_mode``
        restores the full duration.
        """
        self.is_running = not self.is_running
        return self.is_running

    def tick(self) -> bool:
        """Advance the countdown by one second.

        Returns True when this tick exhausted the countdown, in which
        case the state has already been reset to the mode's full
        duration and stopped.
        """
        self.remaining_seconds -= 1
        if self.remaining_seconds <= 0:
            self.is_running = False
            self.remaining_seconds = self.mode.duration
            return True
        return False

    def format_remaining(self) -> str:
        return format_time(self.remaining_seconds)
