"""Main application window for Pomodoro."""

from __future__ import annotations

import logging

from PyQt6.QtCore import QByteArray, Qt
from PyQt6.QtGui import QAction
from PyQt6.QtWidgets import QMainWindow, QStatusBar

from .timer.driver import CountdownDriver
from .timer.engine import Mode, TimerState
from .ui.timer_widget import TimerWidget
from .ui.styles import build_stylesheet, get_palette
from .settings import Settings, load_settings, save_settings
from .audio.sounds import ClickSound

logger = logging.getLogger(__name__)

MODE_SHORTCUTS: dict[Qt.Key, Mode] = {
    Qt.Key.Key_1: Mode.WORK,
    Qt.Key.Key_2: Mode.SHORT_BREAK,
    Qt.Key.Key_3: Mode.LONG_BREAK,
}


class PomodoroWindow(QMainWindow):
    """The one screen: mode selectors, countdown, START/STOP.

    The window only wires things together; all timer behaviour lives in
    ``CountdownDriver``.  The mode colour repaints the whole window on
    every ``state_changed``.
    """

    def __init__(self) -> None:
        super().__init__()
        self.setWindowTitle("Pomodoro")
        self.setMinimumSize(320, 480)
        self.resize(360, 560)

        self._settings: Settings = load_settings()

        self._driver = CountdownDriver(self)
        self._click = ClickSound(self)
        self._click.set_volume(self._settings.sound_volume)
        self._click.set_enabled(self._settings.sound_enabled)

        self._timer_widget = TimerWidget(self._driver, self)
        self.setCentralWidget(self._timer_widget)
        self.setStatusBar(QStatusBar(self))

        sound_action = QAction("Sound", self)
        sound_action.setCheckable(True)
        sound_action.setChecked(self._settings.sound_enabled)
        sound_action.toggled.connect(self._set_sound_enabled)
        self.menuBar().addMenu("&View").addAction(sound_action)
        self._sound_action = sound_action

        self._timer_widget.start_stop_clicked.connect(self._click.play)
        self._driver.state_changed.connect(self._on_state_changed)
        self._driver.countdown_finished.connect(self._on_countdown_finished)

        self._apply_theme(self._driver.mode)
        if self._settings.window_geometry:
            self.restoreGeometry(
                QByteArray.fromBase64(self._settings.window_geometry.encode("ascii"))
            )

    @property
    def driver(self) -> CountdownDriver:
        return self._driver

    @property
    def timer_widget(self) -> TimerWidget:
        return self._timer_widget

    @property
    def click_sound(self) -> ClickSound:
        return self._click

    @property
    def sound_action(self) -> QAction:
        return self._sound_action

    # ── driver signals ────────────────────────────────────────────────

    def _on_state_changed(self, state: TimerState) -> None:
        self._apply_theme(state.mode)
        if state.is_running:
            self.statusBar().showMessage(f"{state.mode.label} running")
        else:
            self.statusBar().clearMessage()

    def _on_countdown_finished(self, mode: Mode) -> None:
        logger.info("%s finished", mode.label)
        self.statusBar().showMessage(f"{mode.label} finished")

    def _apply_theme(self, mode: Mode) -> None:
        self.setStyleSheet(build_stylesheet(get_palette(mode)))

    # ── preferences ───────────────────────────────────────────────────

    def _set_sound_enabled(self, enabled: bool) -> None:
        self._click.set_enabled(enabled)
        self._settings.sound_enabled = enabled
        save_settings(self._settings)

    # ── events ────────────────────────────────────────────────────────

    def closeEvent(self, event) -> None:  # type: ignore[override]
        self._driver.stop()
        self._settings.window_geometry = bytes(
            self.saveGeometry().toBase64()
        ).decode("ascii")
        save_settings(self._settings)
        event.accept()

    def keyPressEvent(self, event) -> None:  # type: ignore[override]
        """Space toggles start/stop (with the click); 1/2/3 select a mode."""
        key = event.key()
        if not event.modifiers():
            if key == Qt.Key.Key_Space:
                self._click.play()
                self._driver.toggle_start()
                event.accept()
                return
            for shortcut, mode in MODE_SHORTCUTS.items():
                if key == shortcut:
                    self._driver.select_mode(mode)
                    event.accept()
                    return
        super().keyPressEvent(event)
