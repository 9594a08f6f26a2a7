"""Render-surface helpers: header cells, row labels and status text."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Hashable, Sequence

from ct_app.table.columns import ColumnSpec, SortDirection, SortState
from ct_app.table.paths import resolve_path

ROW_LABEL_FIELDS = ("name", "title", "description", "invoice_number", "client_name")
DEFAULT_EMPTY_MESSAGE = "No results found"
LOADING_MESSAGE = "Loading data..."

SORT_ASCENDING = "ascending"
SORT_DESCENDING = "descending"
SORT_NONE = "none"

INDICATOR_ASC = "▲"
INDICATOR_DESC = "▼"
INDICATOR_NEUTRAL = "⇅"


@dataclass(frozen=True)
class HeaderCell:
    key: str
    label: str
    sortable: bool
    aria_sort: str | None
    indicator: str


@dataclass(frozen=True)
class RenderedRow:
    index: int
    row_id: Hashable
    row: Any
    cells: tuple[Any, ...]
    selected: bool
    label: str
    offset: int | None = None


def row_label(row: Any) -> str:
    """Accessible label for a row checkbox."""
    for field in ROW_LABEL_FIELDS:
        value = resolve_path(row, field)
        if value:
            return f"Select {value}"
    return "Select row"


def result_count_message(shown: int, total: int) -> str:
    return f"Showing {shown} of {total} results"


def header_cells(
    columns: Sequence[ColumnSpec], sort: SortState
) -> tuple[HeaderCell, ...]:
    cells = []
    for column in columns:
        aria_sort: str | None = None
        indicator = ""
        if column.sortable:
            if sort.key == column.key:
                ascending = sort.direction is SortDirection.ASC
                aria_sort = SORT_ASCENDING if ascending else SORT_DESCENDING
                indicator = INDICATOR_ASC if ascending else INDICATOR_DESC
            else:
                aria_sort = SORT_NONE
                indicator = INDICATOR_NEUTRAL
        cells.append(
            HeaderCell(
                key=column.key,
                label=column.label,
                sortable=column.sortable,
                aria_sort=aria_sort,
                indicator=indicator,
            )
        )
    return tuple(cells)


def render_cells(row: Any, columns: Sequence[ColumnSpec]) -> tuple[Any, ...]:
    return tuple(
        column.render(row) if column.render else resolve_path(row, column.key)
        for column in columns
    )
