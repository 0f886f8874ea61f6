"""Qt scheduler that drives a ``TimerState`` once per second."""

from __future__ import annotations

import logging

from PyQt6.QtCore import QObject, QTimer, pyqtSignal

from .engine import Mode, TimerState

logger = logging.getLogger(__name__)

TICK_INTERVAL_MS = 1000


class CountdownDriver(QObject):
    """Owns the timer state and the one-second ``QTimer`` that ticks it.

    All calls arrive on the Qt event loop thread, so mode selection,
    start/stop and ticks never interleave.

    Signals
    -------
    tick(remaining_seconds: int)
        Emitted after every applied tick.
    state_changed(state: TimerState)
        Emitted after a mode switch, a start/stop, or an auto-reset.
    countdown_finished(mode: Mode)
        Emitted when a countdown runs out and the state auto-resets.
    """

    tick = pyqtSignal(int)
    state_changed = pyqtSignal(object)
    countdown_finished = pyqtSignal(object)

    def __init__(
        self,
        parent: QObject | None = None,
        *,
        state: TimerState | None = None,
    ) -> None:
        super().__init__(parent)
        self._state = state if state is not None else TimerState()

        self._qt_timer = QTimer(self)
        self._qt_timer.setInterval(TICK_INTERVAL_MS)
        self._qt_timer.timeout.connect(self._on_tick)

    # ── observation ───────────────────────────────────────────────────

    @property
    def state(self) -> TimerState:
        return self._state

    @property
    def mode(self) -> Mode:
        return self._state.mode

    @property
    def remaining(self) -> int:
        return self._state.remaining_seconds

    @property
    def is_running(self) -> bool:
        return self._state.is_running

    @property
    def time_text(self) -> str:
        return self._state.format_remaining()

    @property
    def color(self) -> str:
        return self._state.color

    # ── controls ──────────────────────────────────────────────────────

    def select_mode(self, mode: Mode) -> None:
        """Switch mode; any running countdown stops immediately."""
        self._qt_timer.stop()
        self._state.select_mode(mode)
        logger.debug("mode -> %s (%s)", mode.name, self.time_text)
        self.state_changed.emit(self._state)

    def toggle_start(self) -> None:
        """Start a stopped countdown or stop a running one."""
        if self._state.toggle_start():
            # Restart from a clean second boundary; never two sources.
            self._qt_timer.start()
            logger.debug("started %s at %s", self.mode.name, self.time_text)
        else:
            self._qt_timer.stop()
            logger.debug("stopped %s at %s", self.mode.name, self.time_text)
        self.state_changed.emit(self._state)

    def stop(self) -> None:
        """Stop without toggling back on; no-op when already stopped."""
        if self._state.is_running:
            self.toggle_start()

    # ── timer mechanics ───────────────────────────────────────────────

    def _on_tick(self) -> None:
        # A timeout may already be queued when the user stops.
        if not self._state.is_running:
            self._qt_timer.stop()
            return

        finished = self._state.tick()
        self.tick.emit(self._state.remaining_seconds)

        if finished:
            self._qt_timer.stop()
            logger.debug("%s countdown finished, reset", self.mode.name)
            self.state_changed.emit(self._state)
            self.countdown_finished.emit(self._state.mode)
