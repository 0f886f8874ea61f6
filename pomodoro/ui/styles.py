"""QSS stylesheet and mode colours for Pomodoro."""

from __future__ import annotations

from ..timer.engine import Mode

# ── colour tokens → hex ──────────────────────────────────────────────────

COLOR_TOKENS: dict[str, str] = {
    "light_yellow": "#FFE8A3",
    "light_green":  "#BDEBC6",
    "light_pink":   "#F7C6D3",
}

_FALLBACK_BG = "#FFFFFF"

# ── shared palette (everything but the background) ───────────────────────

_BASE_PALETTE: dict[str, str] = {
    "text":        "#2B2B2B",
    "text_muted":  "#5E5E5E",
    "button_bg":   "#2B2B2B",
    "button_text": "#FFFFFF",
    "border":      "#2B2B2B",
}


def resolve_color(token: str) -> str:
    """Hex colour for *token*; white for unknown tokens."""
    return COLOR_TOKENS.get(token, _FALLBACK_BG)


def get_palette(mode: Mode) -> dict[str, str]:
    palette = dict(_BASE_PALETTE)
    palette["bg"] = resolve_color(mode.color)
    return palette


# ── QSS builder ───────────────────────────────────────────────────────


def build_stylesheet(palette: dict[str, str]) -> str:
    p = palette
    return f"""
    /* ── global ─────────────────────────────────── */
    QWidget {{
        background-color: {p['bg']};
        color: {p['text']};
        font-size: 14px;
    }}

    QMainWindow {{
        background-color: {p['bg']};
    }}

    /* ── mode selectors ──────────────────────────── */
    QPushButton#modeSelector {{
        background-color: transparent;
        color: {p['text_muted']};
        border: 2px solid transparent;
        border-radius: 14px;
        padding: 6px 12px;
        font-size: 14px;
        font-weight: 600;
    }}

    QPushButton#modeSelector[selected="true"] {{
        color: {p['text']};
        border-color: {p['border']};
    }}

    /* ── countdown ───────────────────────────────── */
    QLabel#timeLabel {{
        color: {p['text']};
        font-size: 72px;
        font-weight: 700;
    }}

    /* ── start / stop ────────────────────────────── */
    QPushButton#startStopButton {{
        background-color: {p['button_bg']};
        color: {p['button_text']};
        border: none;
        border-radius: 12px;
        padding: 14px 48px;
        font-size: 17px;
        font-weight: 700;
    }}

    QPushButton#startStopButton:pressed {{
        background-color: {p['text_muted']};
    }}

    /* ── status bar ──────────────────────────────── */
    QStatusBar {{
        background-color: {p['bg']};
        color: {p['text_muted']};
        font-size: 12px;
    }}
    """
