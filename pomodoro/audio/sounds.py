"""The START/STOP click: synthesised with numpy, played via QSoundEffect.

The click is a 20 ms sine burst with a one-shot exponential decay.  It
is rendered to WAV once, cached under ``SOUNDS_DIR`` and reused on later
launches.
"""

from __future__ import annotations

import io
import logging
import wave
from pathlib import Path

import numpy as np

from PyQt6.QtCore import QObject, QUrl
from PyQt6.QtMultimedia import QSoundEffect

from ..settings import APP_DIR

logger = logging.getLogger(__name__)

SOUNDS_DIR = APP_DIR / "sounds"
CLICK_FILENAME = "click.wav"

SAMPLE_RATE = 44100
CLICK_FREQ = 1500.0      # Hz
CLICK_LENGTH = 0.02      # seconds of tone
CLICK_TAIL = 0.03        # seconds of trailing silence
CLICK_DECAY = 250.0      # 1/s; amplitude falls to ~0.7% by the end


def synthesize_click() -> bytes:
    """Return the click as mono 16-bit PCM WAV bytes."""
    t = np.arange(int(SAMPLE_RATE * CLICK_LENGTH)) / SAMPLE_RATE
    tone = np.sin(2 * np.pi * CLICK_FREQ * t) * np.exp(-CLICK_DECAY * t)
    # Some backends clip very short effects without a bit of silence
    samples = np.concatenate([tone * 0.35, np.zeros(int(SAMPLE_RATE * CLICK_TAIL))])
    pcm = (samples * 32767).astype("<i2")

    buf = io.BytesIO()
    with wave.open(buf, "wb") as wf:
        wf.setnchannels(1)
        wf.setsampwidth(2)
        wf.setframerate(SAMPLE_RATE)
        wf.writeframes(pcm.tobytes())
    return buf.getvalue()


class ClickSound(QObject):
    """One ``QSoundEffect`` for the button click, with mute and volume."""

    def __init__(
        self,
        parent: QObject | None = None,
        *,
        sounds_dir: Path | None = None,
    ) -> None:
        super().__init__(parent)
        self._enabled = True
        self._volume = 100
        self._path = (sounds_dir or SOUNDS_DIR) / CLICK_FILENAME
        if not self._path.exists():
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_bytes(synthesize_click())
            logger.debug("wrote %s", self._path)

        self._effect = QSoundEffect(self)
        self._effect.setSource(QUrl.fromLocalFile(str(self._path)))
        self._effect.setVolume(self._volume / 100.0)

    @property
    def path(self) -> Path:
        return self._path

    @property
    def enabled(self) -> bool:
        return self._enabled

    def set_enabled(self, enabled: bool) -> None:
        self._enabled = enabled

    @property
    def volume(self) -> int:
        """Volume as 0-100."""
        return self._volume

    def set_volume(self, level: int) -> None:
        self._volume = max(0, min(level, 100))
        self._effect.setVolume(self._volume / 100.0)

    def play(self) -> None:
        if self._enabled:
            self._effect.play()
