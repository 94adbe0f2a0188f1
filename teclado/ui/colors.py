"""Keyboard palette and key style sheets."""

from __future__ import annotations

from typing import Optional, Tuple


class KeyboardColors:
    """Light palette for the keyboard panel and demo window."""

    WINDOW_BG = "#EEF6F6"
    PANEL_BG = "#D9E6E8"

    KEY_BG = "#FDFEFE"
    KEY_BORDER = "#B0BEC5"
    KEY_TEXT = "#1F2933"
    SPECIAL_KEY_BG = "#E3EDEF"

    # Caps Lock / Shift while latched
    HIGHLIGHT = "#FFA500"

    FIELD_BORDER = "#78909C"
    FIELD_FOCUS = "#00838F"


def _rgb(color: str) -> Optional[Tuple[int, int, int]]:
    c = color.strip()
    if len(c) != 7 or not c.startswith("#"):
        return None
    try:
        return int(c[1:3], 16), int(c[3:5], 16), int(c[5:7], 16)
    except ValueError:
        return None


def blend_hex(a: str, b: str, t: float) -> str:
    """Mix two #RRGGBB colors; t=0 gives *a*, t=1 gives *b*. Malformed input returns *a*."""
    first, second = _rgb(a), _rgb(b)
    if first is None or second is None:
        return a
    t = max(0.0, min(1.0, float(t)))
    mixed = (int(x + (y - x) * t) for x, y in zip(first, second))
    return "#" + "".join(f"{channel:02X}" for channel in mixed)


def key_style(
    font_px: int,
    *,
    special: bool = False,
    highlighted: bool = False,
    highlight_color: str = KeyboardColors.HIGHLIGHT,
) -> str:
    """Style sheet for one keyboard ``QPushButton``."""
    if highlighted:
        bg = highlight_color
    else:
        bg = KeyboardColors.SPECIAL_KEY_BG if special else KeyboardColors.KEY_BG
    pressed = blend_hex(bg, "#000000", 0.18)
    hover = blend_hex(bg, KeyboardColors.FIELD_FOCUS, 0.12)
    weight = 500 if special else 600
    return f"""
        QPushButton {{
            background: {bg};
            color: {KeyboardColors.KEY_TEXT};
            border: 1px solid {KeyboardColors.KEY_BORDER};
            border-radius: 6px;
            padding: 4px 6px;
            font-size: {font_px}px;
            font-weight: {weight};
        }}
        QPushButton:hover {{
            background: {hover};
        }}
        QPushButton:pressed {{
            background: {pressed};
        }}
    """
