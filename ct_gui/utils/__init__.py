"""Qt utilities and helpers."""

from ct_gui.utils.qt import clear_layout, set_widget_role
from ct_gui.utils.formatters import format_cell, format_selected_count

__all__ = [
    "clear_layout",
    "set_widget_role",
    "format_cell",
    "format_selected_count",
]
