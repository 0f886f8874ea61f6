"""Audio package."""

from .sounds import ClickSound, synthesize_click

__all__ = ["ClickSound", "synthesize_click"]
