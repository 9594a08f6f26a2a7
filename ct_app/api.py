"""Public API surface for ct_app."""

from ct_app.cache import SnapshotCache
from ct_app.presets import PRESETS, StatusBadge, TablePreset, get_preset
from ct_app.table import (
    ColumnSpec,
    HeaderCell,
    RenderedRow,
    SelectAllState,
    Selection,
    SortDirection,
    SortState,
    TableController,
    TableSettings,
    TableSnapshot,
    VirtualWindow,
)

__all__ = [
    "SnapshotCache",
    "PRESETS",
    "StatusBadge",
    "TablePreset",
    "get_preset",
    "ColumnSpec",
    "HeaderCell",
    "RenderedRow",
    "SelectAllState",
    "Selection",
    "SortDirection",
    "SortState",
    "TableController",
    "TableSettings",
    "TableSnapshot",
    "VirtualWindow",
]
