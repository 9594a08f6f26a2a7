"""Table engine: filtering, sorting, selection and windowing (UI-agnostic)."""

from ct_app.table.columns import ColumnSpec, SortDirection, SortState
from ct_app.table.controller import TableController, TableSnapshot
from ct_app.table.paths import resolve_path
from ct_app.table.pipeline import ViewPipeline, filter_rows, sort_rows
from ct_app.table.presentation import HeaderCell, RenderedRow, result_count_message, row_label
from ct_app.table.selection import SelectAllState, Selection, reconcile, select_all_state
from ct_app.table.settings import TableSettings
from ct_app.table.windowing import VirtualItem, VirtualWindow, WindowCalculator, compute_window

__all__ = [
    "ColumnSpec",
    "SortDirection",
    "SortState",
    "TableController",
    "TableSnapshot",
    "resolve_path",
    "ViewPipeline",
    "filter_rows",
    "sort_rows",
    "HeaderCell",
    "RenderedRow",
    "result_count_message",
    "row_label",
    "SelectAllState",
    "Selection",
    "reconcile",
    "select_all_state",
    "TableSettings",
    "VirtualItem",
    "VirtualWindow",
    "WindowCalculator",
    "compute_window",
]
