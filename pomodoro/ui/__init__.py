"""UI package."""

from .timer_widget import TimerWidget
from .styles import build_stylesheet, get_palette, resolve_color

__all__ = [
    "TimerWidget",
    "build_stylesheet",
    "get_palette",
    "resolve_color",
]
