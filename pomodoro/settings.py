"""Application settings with JSON persistence.

Settings are stored at:
    ~/.config/pomodoro/settings.json

Usage::

    settings = load_settings()
    settings.sound_volume = 50
    save_settings(settings)
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, asdict, fields
from pathlib import Path

logger = logging.getLogger(__name__)

APP_DIR = Path.home() / ".config" / "pomodoro"
SETTINGS_PATH = APP_DIR / "settings.json"


@dataclass
class Settings:
    """User preferences.  Countdown durations are fixed on ``Mode``."""

    sound_enabled: bool = True
    sound_volume: int = 100                # 0-100
    window_geometry: str | None = None     # base64 QWidget.saveGeometry()


# Accepted JSON types per field; bool is excluded from int on purpose
_FIELD_TYPES: dict[str, tuple[type, ...]] = {
    "sound_enabled": (bool,),
    "sound_volume": (int,),
    "window_geometry": (str, type(None)),
}


def _valid(name: str, value: object) -> bool:
    allowed = _FIELD_TYPES[name]
    if isinstance(value, bool) and bool not in allowed:
        return False
    return isinstance(value, allowed)


def load_settings() -> Settings:
    """Load settings from disk, falling back to defaults.

    Unknown keys are ignored; a value of the wrong type keeps that
    field's default.
    """
    if not SETTINGS_PATH.exists():
        return Settings()
    try:
        data = json.loads(SETTINGS_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        logger.warning("ignoring unreadable settings %s: %s", SETTINGS_PATH, exc)
        return Settings()
    if not isinstance(data, dict):
        logger.warning("ignoring settings %s: not a JSON object", SETTINGS_PATH)
        return Settings()

    kwargs = {}
    for f in fields(Settings):
        if f.name not in data:
            continue
        value = data[f.name]
        if _valid(f.name, value):
            kwargs[f.name] = value
        else:
            logger.warning("settings: bad value for %s: %r", f.name, value)
    return Settings(**kwargs)


def save_settings(settings: Settings) -> None:
    """Write settings to disk as JSON."""
    APP_DIR.mkdir(parents=True, exist_ok=True)
    SETTINGS_PATH.write_text(
        json.dumps(asdict(settings), indent=2) + "\n",
        encoding="utf-8",
    )
