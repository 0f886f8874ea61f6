"""The single timer screen.

Layout (top → bottom):
    - Mode selector row (Pomodoro / Short Break / Long Break)
    - Large MM:SS countdown
    - START / STOP button
"""

from __future__ import annotations

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton,
)

from ..timer.driver import CountdownDriver
from ..timer.engine import Mode, TimerState, format_time

START_TEXT = "START"
STOP_TEXT = "STOP"


class TimerWidget(QWidget):
    """Renders a ``CountdownDriver`` and forwards clicks to it."""

    start_stop_clicked = pyqtSignal()

    def __init__(
        self, driver: CountdownDriver, parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._driver = driver
        self._selectors: dict[Mode, QPushButton] = {}
        self._build_ui()
        self._connect_signals()
        self._on_state_changed(driver.state)

    # ── build ─────────────────────────────────────────────────────────────

    def _build_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(24, 32, 24, 40)
        layout.setSpacing(0)

        selector_row = QHBoxLayout()
        selector_row.setSpacing(8)
        selector_row.setAlignment(Qt.AlignmentFlag.AlignCenter)
        for mode in Mode:
            btn = QPushButton(mode.label, self)
            btn.setObjectName("modeSelector")
            btn.setCursor(Qt.CursorShape.PointingHandCursor)
            btn.setFlat(True)
            btn.setFocusPolicy(Qt.FocusPolicy.NoFocus)
            self._selectors[mode] = btn
            selector_row.addWidget(btn)
        layout.addLayout(selector_row)

        layout.addStretch(1)

        self._time_label = QLabel(self._driver.time_text, self)
        self._time_label.setObjectName("timeLabel")
        self._time_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._time_label)

        layout.addStretch(1)

        btn_row = QHBoxLayout()
        btn_row.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._start_stop_btn = QPushButton(START_TEXT, self)
        self._start_stop_btn.setObjectName("startStopButton")
        # Space belongs to the window shortcut, not a focused button
        self._start_stop_btn.setFocusPolicy(Qt.FocusPolicy.NoFocus)
        btn_row.addWidget(self._start_stop_btn)
        layout.addLayout(btn_row)

    # ── signals ───────────────────────────────────────────────────────────

    def _connect_signals(self) -> None:
        for mode, btn in self._selectors.items():
            btn.clicked.connect(
                lambda _checked=False, m=mode: self._driver.select_mode(m)
            )
        self._start_stop_btn.clicked.connect(self._on_start_stop)

        self._driver.tick.connect(self._refresh_time)
        self._driver.state_changed.connect(self._on_state_changed)

    # ── slots ─────────────────────────────────────────────────────────────

    def _on_start_stop(self) -> None:
        self.start_stop_clicked.emit()
        self._driver.toggle_start()

    def _on_state_changed(self, state: TimerState) -> None:
        self._start_stop_btn.setText(STOP_TEXT if state.is_running else START_TEXT)

        for mode, btn in self._selectors.items():
            btn.setProperty("selected", mode is state.mode)
            # Re-evaluate the [selected="true"] rule
            btn.style().unpolish(btn)
            btn.style().polish(btn)

        self._refresh_time(state.remaining_seconds)

    def _refresh_time(self, remaining: int) -> None:
        self._time_label.setText(format_time(remaining))

    # ── read-only view (used by the window and tests) ─────────────────────

    @property
    def time_text(self) -> str:
        return self._time_label.text()

    @property
    def button_text(self) -> str:
        return self._start_stop_btn.text()

    def selected_mode(self) -> Mode | None:
        for mode, btn in self._selectors.items():
            if btn.property("selected"):
                return mode
        return None

    def selector(self, mode: Mode) -> QPushButton:
        return self._selectors[mode]

    @property
    def start_stop_button(self) -> QPushButton:
        return self._start_stop_btn
