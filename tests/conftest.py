"""Shared pytest fixtures for Pomodoro tests."""

import os
import sys

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtWidgets import QApplication

from pomodoro.timer.driver import CountdownDriver
from pomodoro.timer.engine import TimerState


@pytest.fixture(scope="session")
def qapp():
    """A single QApplication instance shared across the entire test run."""
    app = QApplication.instance() or QApplication(sys.argv)
    yield app


@pytest.fixture(autouse=True)
def app_dir(tmp_path, monkeypatch):
    """Keep settings and cached sounds out of the real home directory."""
    monkeypatch.setattr("pomodoro.settings.APP_DIR", tmp_path)
    monkeypatch.setattr("pomodoro.settings.SETTINGS_PATH", tmp_path / "settings.json")
    monkeypatch.setattr("pomodoro.audio.sounds.SOUNDS_DIR", tmp_path / "sounds")
    yield tmp_path


@pytest.fixture
def state():
    """Fresh pure state machine (WORK, 1500 s, stopped)."""
    return TimerState()


@pytest.fixture
def driver(qapp):
    """Fresh CountdownDriver with its own state."""
    d = CountdownDriver(parent=None)
    yield d
    d.stop()
