"""Theme management for the GUI."""

from __future__ import annotations

import os
from typing import Final

from PySide6.QtWidgets import QApplication

from ct_common.config.env import parse_float_env

_BASE_FONT_SIZE: Final[int] = 13
_TITLE_FONT_SIZE: Final[int] = 18
_PADDING_Y: Final[int] = 6
_PADDING_X: Final[int] = 8

_BADGE_COLORS: Final[dict[str, str]] = {
    "success": "#2e7d32",
    "primary": "#1565c0",
    "warning": "#ef6c00",
    "danger": "#c62828",
    "secondary": "#616161",
}


def get_preferred_scale() -> float:
    """Resolve UI scale from CT_GUI_SCALE, defaulting to 1.0."""
    scale = parse_float_env(os.environ.get("CT_GUI_SCALE"))
    if scale is None:
        return 1.0
    return _clamp_scale(scale)


def apply_theme(app: QApplication, scale: float | None = None) -> float:
    """Apply the stylesheet at the given scale. Returns the applied scale."""
    selected_scale = _clamp_scale(scale if scale is not None else get_preferred_scale())
    app.setStyleSheet(build_stylesheet(selected_scale))
    return selected_scale


def build_stylesheet(scale: float = 1.0) -> str:
    base = _scale_value(_BASE_FONT_SIZE, scale)
    title = _scale_value(_TITLE_FONT_SIZE, scale)
    pad_y = _scale_value(_PADDING_Y, scale)
    pad_x = _scale_value(_PADDING_X, scale)
    badges = "\n".join(
        f'QLabel[role="badge-{name}"] {{ color: white; background: {color};'
        f" border-radius: 4px; padding: 1px 6px; }}"
        for name, color in _BADGE_COLORS.items()
    )
    return f"""
QWidget {{
    font-size: {base}px;
}}
QLabel[role="title"] {{
    font-size: {title}px;
}}
QLabel[role="muted"] {{
    color: #757575;
}}
QLineEdit {{
    padding: {pad_y}px {pad_x}px;
}}
QLabel[role="status-error"] {{
    color: #c62828;
}}
QWidget[role="row-selected"] {{
    background: #e3f2fd;
}}
{badges}
"""


def _clamp_scale(scale: float) -> float:
    if scale < 0.8:
        return 0.8
    if scale > 1.8:
        return 1.8
    return scale


def _scale_value(value: int, scale: float) -> int:
    return max(1, int(round(value * scale)))


__all__ = [
    "apply_theme",
    "build_stylesheet",
    "get_preferred_scale",
]
