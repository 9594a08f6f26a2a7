"""Formatting helpers for GUI display."""

from __future__ import annotations

from typing import Any

from ct_app.table.paths import stringify


def format_cell(value: Any) -> str:
    """Text shown for a plain cell value; None renders as an empty cell."""
    return stringify(value)


def format_selected_count(count: int) -> str:
    return f"{count} selected"
