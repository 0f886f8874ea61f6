"""Tests for the timer screen and main window.

Covers:
- Colour tokens, palettes and the stylesheet
- TimerWidget labels, selector highlight and click forwarding
- PomodoroWindow theming, click sound, shortcuts, Sound toggle, close
"""

from __future__ import annotations

import pytest
from PyQt6.QtCore import QByteArray, QEvent, Qt
from PyQt6.QtGui import QCloseEvent, QKeyEvent

from pomodoro.app import PomodoroWindow
from pomodoro.settings import Settings, load_settings, save_settings
from pomodoro.timer.engine import Mode, format_time
from pomodoro.ui.styles import (
    COLOR_TOKENS, build_stylesheet, get_palette, resolve_color,
)
from pomodoro.ui.timer_widget import TimerWidget, START_TEXT, STOP_TEXT

from helpers import SignalCollector, run_ticks


def press(window: PomodoroWindow, key: Qt.Key) -> None:
    event = QKeyEvent(QEvent.Type.KeyPress, key.value, Qt.KeyboardModifier.NoModifier)
    window.keyPressEvent(event)


# ═══════════════════════════════════════════════════════════════════════
#  STYLES
# ═══════════════════════════════════════════════════════════════════════


class TestStyles:
    def test_every_mode_has_a_colour(self):
        for mode in Mode:
            assert mode.color in COLOR_TOKENS

    def test_unknown_token_falls_back(self):
        assert resolve_color("nope") == "#FFFFFF"

    def test_palette_background_follows_mode(self):
        for mode in Mode:
            assert get_palette(mode)["bg"] == COLOR_TOKENS[mode.color]

    def test_stylesheet_uses_background(self):
        qss = build_stylesheet(get_palette(Mode.LONG_BREAK))
        assert COLOR_TOKENS["light_pink"] in qss
        assert "#modeSelector" in qss
        assert "#startStopButton" in qss


# ═══════════════════════════════════════════════════════════════════════
#  TIMER WIDGET
# ═══════════════════════════════════════════════════════════════════════


class TestTimerWidget:
    def test_initial_render(self, driver):
        w = TimerWidget(driver)
        assert w.time_text == "25:00"
        assert w.button_text == START_TEXT
        assert w.selected_mode() is Mode.WORK

    def test_selector_click_switches_mode(self, driver):
        w = TimerWidget(driver)
        w.selector(Mode.SHORT_BREAK).click()
        assert driver.mode is Mode.SHORT_BREAK
        assert w.time_text == "00:30"
        assert w.selected_mode() is Mode.SHORT_BREAK
        assert w.selector(Mode.WORK).property("selected") is False

    def test_start_stop_label(self, driver):
        w = TimerWidget(driver)
        w.start_stop_button.click()
        assert driver.is_running is True
        assert w.button_text == STOP_TEXT
        w.start_stop_button.click()
        assert driver.is_running is False
        assert w.button_text == START_TEXT

    def test_start_stop_emits_click(self, driver):
        w = TimerWidget(driver)
        c = SignalCollector()
        w.start_stop_clicked.connect(c)
        w.start_stop_button.click()
        assert len(c) == 1

    def test_tick_updates_label(self, driver):
        w = TimerWidget(driver)
        driver.toggle_start()
        run_ticks(driver, 61)
        assert w.time_text == "23:59"

    def test_auto_reset_restores_label(self, driver):
        w = TimerWidget(driver)
        w.selector(Mode.LONG_BREAK).click()
        w.start_stop_button.click()
        run_ticks(driver, 60)
        assert w.time_text == "01:00"
        assert w.button_text == START_TEXT

    def test_stopped_value_stays_on_screen(self, driver):
        w = TimerWidget(driver)
        w.start_stop_button.click()
        run_ticks(driver, 10)
        w.start_stop_button.click()
        assert w.time_text == "24:50"


# ═══════════════════════════════════════════════════════════════════════
#  MAIN WINDOW
# ═══════════════════════════════════════════════════════════════════════


@pytest.fixture
def window(qapp):
    w = PomodoroWindow()
    yield w
    w.driver.stop()
    w.deleteLater()


class TestWindow:
    def test_initial_theme(self, window):
        assert COLOR_TOKENS["light_yellow"] in window.styleSheet()

    def test_theme_follows_mode(self, window):
        window.driver.select_mode(Mode.SHORT_BREAK)
        assert COLOR_TOKENS["light_green"] in window.styleSheet()
        assert COLOR_TOKENS["light_yellow"] not in window.styleSheet()

    def test_space_toggles(self, window):
        press(window, Qt.Key.Key_Space)
        assert window.driver.is_running is True
        assert window.timer_widget.button_text == STOP_TEXT
        press(window, Qt.Key.Key_Space)
        assert window.driver.is_running is False

    @pytest.mark.parametrize("key, mode", [
        (Qt.Key.Key_1, Mode.WORK),
        (Qt.Key.Key_2, Mode.SHORT_BREAK),
        (Qt.Key.Key_3, Mode.LONG_BREAK),
    ])
    def test_number_keys_select_mode(self, window, key, mode):
        window.driver.toggle_start()
        press(window, key)
        assert window.driver.mode is mode
        assert window.driver.is_running is False
        assert window.timer_widget.time_text == format_time(mode.duration)

    def test_click_plays_sound(self, window, monkeypatch):
        played = []
        monkeypatch.setattr(window.click_sound._effect, "play", lambda: played.append(1))
        window.timer_widget.start_stop_button.click()
        assert played == [1]

    def test_space_plays_sound(self, window, monkeypatch):
        played = []
        monkeypatch.setattr(window.click_sound._effect, "play", lambda: played.append(1))
        press(window, Qt.Key.Key_Space)
        assert played == [1]

    def test_mode_switch_is_silent(self, window, monkeypatch):
        played = []
        monkeypatch.setattr(window.click_sound._effect, "play", lambda: played.append(1))
        window.timer_widget.selector(Mode.LONG_BREAK).click()
        press(window, Qt.Key.Key_2)
        assert played == []

    def test_finished_message(self, window):
        window.driver.select_mode(Mode.SHORT_BREAK)
        window.driver.toggle_start()
        run_ticks(window.driver, 30)
        assert window.statusBar().currentMessage() == "Short Break finished"

    def test_sound_toggle_persists(self, window, monkeypatch):
        played = []
        monkeypatch.setattr(window.click_sound._effect, "play", lambda: played.append(1))
        window.sound_action.trigger()
        assert window.sound_action.isChecked() is False
        assert window.click_sound.enabled is False
        assert load_settings().sound_enabled is False
        window.timer_widget.start_stop_button.click()
        assert played == []

    def test_loads_saved_settings(self, qapp):
        save_settings(Settings(sound_enabled=False, sound_volume=20))
        w = PomodoroWindow()
        assert w.click_sound.enabled is False
        assert w.click_sound.volume == 20
        assert w.sound_action.isChecked() is False

    def test_wrong_typed_settings_still_start(self, qapp, app_dir):
        (app_dir / "settings.json").write_text(
            '{"sound_volume": "loud", "sound_enabled": "yes"}', encoding="utf-8",
        )
        w = PomodoroWindow()
        assert w.click_sound.volume == 100
        assert w.click_sound.enabled is True

    def test_close_stops_countdown(self, window):
        window.driver.toggle_start()
        window.closeEvent(QCloseEvent())
        assert window.driver.is_running is False

    def test_close_saves_geometry(self, window):
        window.closeEvent(QCloseEvent())
        saved = load_settings().window_geometry
        assert saved
        assert QByteArray.fromBase64(saved.encode("ascii")) == window.saveGeometry()
