"""QSS stylesheet and colour palette for FocusTimer."""

from __future__ import annotations

PALETTE: dict[str, str] = {
    "bg":          "#F5F5F5",
    "card":        "#FFFFFF",
    "accent":      "#2196F3",
    "text":        "#333333",
    "text_muted":  "#666666",
    "text_faint":  "#888888",
    "dot":         "#DDDDDD",
    "border":      "#E4E4E4",
}


def build_stylesheet(palette: dict[str, str] | None = None) -> str:
    p = palette or PALETTE
    return f"""
    /* ── global ─────────────────────────────────── */
    QWidget {{
        background-color: {p['bg']};
        color: {p['text']};
        font-family: "Helvetica Neue", Arial;
        font-size: 14px;
    }}

    QLabel#header {{
        font-size: 24px;
        font-weight: bold;
        color: {p['text']};
    }}

    /* ── preset cards ───────────────────────────── */
    QFrame#presetCard {{
        background-color: {p['card']};
        border: 1px solid {p['border']};
        border-radius: 15px;
    }}

    QFrame#presetCard:hover {{
        border-color: {p['accent']};
    }}

    QFrame#presetCard QLabel {{
        background-color: transparent;
    }}

    QLabel#presetTitle {{
        font-size: 20px;
        font-weight: bold;
        color: {p['text']};
    }}

    QLabel#presetTime {{
        font-size: 16px;
        color: {p['text_muted']};
    }}

    QLabel#presetDescription {{
        font-size: 14px;
        color: {p['text_faint']};
    }}

    /* ── active session ─────────────────────────── */
    QLabel#timerStatus {{
        font-size: 24px;
        font-weight: bold;
        color: {p['text']};
    }}

    QLabel#timerText {{
        font-size: 72px;
        font-weight: bold;
        color: {p['accent']};
    }}

    QLabel#timerAction {{
        font-size: 16px;
        color: {p['text_muted']};
    }}

    QLabel#timerHint {{
        font-size: 14px;
        color: {p['text_faint']};
    }}
    """
