"""Table controller: owns search, sort, selection and scroll state (UI-agnostic)."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Hashable, Iterable, Sequence

from ct_app.table.columns import ColumnSpec, SortState, find_column, normalize_columns
from ct_app.table.paths import resolve_path
from ct_app.table.pipeline import ViewPipeline
from ct_app.table.presentation import (
    DEFAULT_EMPTY_MESSAGE,
    HeaderCell,
    RenderedRow,
    header_cells,
    render_cells,
    result_count_message,
    row_label,
)
from ct_app.table.selection import (
    SelectAllState,
    Selection,
    reconcile,
    select_all_state,
    view_ids,
)
from ct_app.table.settings import TableSettings
from ct_app.table.windowing import VirtualWindow, WindowCalculator
from ct_common.errors import TableConfigError

logger = logging.getLogger(__name__)

SelectionCallback = Callable[[list[Hashable]], None]


@dataclass(frozen=True)
class TableSnapshot:
    """Everything a render surface needs to draw the table once."""

    loading: bool
    search_term: str
    search_placeholder: str
    sort: SortState
    header: tuple[HeaderCell, ...]
    select_all: SelectAllState | None
    rows: tuple[RenderedRow, ...]
    virtualized: bool
    total_height: int | None
    view_count: int
    total_count: int
    status_message: str | None
    is_empty: bool
    empty_message: str
    selected_count: int
    show_bulk_actions: bool


class TableController:
    """Derive the visible table from caller-supplied rows and user interactions.

    Rows and columns are read-only snapshots; replacing the rows sequence is
    how new data arrives. Whenever the filtered and sorted view changes, the
    selection is shrunk to the identifiers still in the view and
    ``on_selection_change`` is told.
    """

    def __init__(
        self,
        columns: Iterable[ColumnSpec] | None = None,
        *,
        rows: Sequence[Any] | None = None,
        selectable: bool = True,
        search_fields: Sequence[str] | None = None,
        search_placeholder: str = "Search...",
        empty_message: str | None = None,
        has_actions: bool = False,
        loading: bool = False,
        settings: TableSettings | None = None,
        on_selection_change: SelectionCallback | None = None,
    ) -> None:
        self._settings = settings or TableSettings()
        self._columns = normalize_columns(columns)
        self._rows: Sequence[Any] = rows if rows is not None else ()
        self._selectable = selectable
        self._search_fields = tuple(search_fields or ())
        self._search_placeholder = search_placeholder
        self._empty_message = empty_message or DEFAULT_EMPTY_MESSAGE
        self._has_actions = has_actions
        self._loading = loading
        self._on_selection_change = on_selection_change

        # State
        self._search_term = ""
        self._sort = SortState()
        self._selection = Selection()
        self._scroll_offset: float = 0
        self._row_height = self._settings.estimated_row_height
        self._viewport_height = self._settings.viewport_height

        self._pipeline = ViewPipeline()
        self._windows = WindowCalculator()
        self._view: list[Any] = []
        self._view_ids: list[Hashable] = []
        self._virtualized = False
        self._refresh_view()

    # Read-only state

    @property
    def settings(self) -> TableSettings:
        return self._settings

    @property
    def columns(self) -> tuple[ColumnSpec, ...]:
        return self._columns

    @property
    def rows(self) -> Sequence[Any]:
        return self._rows

    @property
    def view(self) -> list[Any]:
        """Filtered and sorted rows."""
        return self._view

    @property
    def search_term(self) -> str:
        return self._search_term

    @property
    def sort(self) -> SortState:
        return self._sort

    @property
    def selection(self) -> Selection:
        return self._selection

    @property
    def selected_ids(self) -> list[Hashable]:
        return list(self._selection.ids)

    @property
    def loading(self) -> bool:
        return self._loading

    @property
    def selectable(self) -> bool:
        return self._selectable

    @property
    def is_virtualized(self) -> bool:
        return self._virtualized

    @property
    def scroll_offset(self) -> float:
        return self._scroll_offset

    @property
    def row_height(self) -> int:
        return self._row_height

    # Inputs from the caller

    def set_rows(self, rows: Sequence[Any] | None) -> None:
        """Replace the row snapshot."""
        self._rows = rows if rows is not None else ()
        self._refresh_view()

    def set_columns(self, columns: Iterable[ColumnSpec] | None) -> None:
        """Replace the column set; a sort on a column that is gone is dropped."""
        self._columns = normalize_columns(columns)
        if self._sort.key is None:
            return
        column = find_column(self._columns, self._sort.key)
        if column is None or not column.sortable:
            logger.debug("Dropping sort on removed column %s", self._sort.key)
            self._sort = SortState()
            self._refresh_view()

    def set_loading(self, loading: bool) -> None:
        self._loading = bool(loading)

    def set_has_actions(self, has_actions: bool) -> None:
        self._has_actions = bool(has_actions)

    def set_selection_callback(self, callback: SelectionCallback | None) -> None:
        self._on_selection_change = callback

    # User interactions

    def set_search(self, term: str | None) -> None:
        term = term or ""
        if term == self._search_term:
            return
        self._search_term = term
        self._refresh_view()

    def clear_search(self) -> None:
        self.set_search("")

    def toggle_sort(self, key: str) -> None:
        """Header click: ascending first, then descending on the same column."""
        column = find_column(self._columns, key)
        if column is None or not column.sortable:
            logger.debug("Ignoring sort on non-sortable column %s", key)
            return
        self._sort = self._sort.toggled(key)
        logger.debug("Sort changed to %s %s", self._sort.key, self._sort.direction.value)
        self._refresh_view()

    def toggle_row(self, row_id: Hashable) -> None:
        """Row checkbox: add or remove one identifier."""
        if not self._selectable:
            return
        if row_id not in self._selection and row_id not in self._view_ids:
            logger.debug("Ignoring selection of row %r outside the view", row_id)
            return
        self._set_selection(self._selection.toggled(row_id))

    def set_all_selected(self, checked: bool) -> None:
        """Select-all checkbox.

        Checking selects every row of the current view; unchecking clears the
        whole selection.
        """
        if not self._selectable:
            return
        if checked:
            self._set_selection(Selection.of(self._view_ids))
        else:
            self._set_selection(Selection())

    def scroll_to(self, offset: float) -> None:
        self._scroll_offset = max(float(offset), 0.0)

    def set_viewport_height(self, height: int) -> None:
        if height <= 0:
            raise TableConfigError(
                "Viewport height must be positive", context={"height": height}
            )
        self._viewport_height = int(height)

    def set_row_height(self, height: int) -> None:
        """Update the estimated row height used for positioning."""
        if height <= 0:
            raise TableConfigError(
                "Row height must be positive", context={"height": height}
            )
        self._row_height = int(height)

    # Derived state

    def window(self) -> VirtualWindow | None:
        """Rows to materialize, or None when every row is rendered."""
        if not self._virtualized:
            return None
        return self._windows.window(
            len(self._view),
            self._row_height,
            self._viewport_height,
            self._scroll_offset,
            self._settings.overscan,
        )

    def select_all_state(self) -> SelectAllState | None:
        if not self._selectable:
            return None
        return select_all_state(self._selection, self._view_ids)

    def status_message(self) -> str | None:
        if not self._search_term:
            return None
        return result_count_message(len(self._view), len(self._rows))

    def snapshot(self) -> TableSnapshot:
        """Build the render description for the current state."""
        status_message = self.status_message()
        selected_count = len(self._selection)
        show_bulk_actions = self._has_actions and selected_count > 0
        if self._loading:
            return TableSnapshot(
                loading=True,
                search_term=self._search_term,
                search_placeholder=self._search_placeholder,
                sort=self._sort,
                header=(),
                select_all=None,
                rows=(),
                virtualized=False,
                total_height=None,
                view_count=len(self._view),
                total_count=len(self._rows),
                status_message=status_message,
                is_empty=False,
                empty_message=self._empty_message,
                selected_count=selected_count,
                show_bulk_actions=show_bulk_actions,
            )

        is_empty = not self._view
        window = self.window()
        if window is None:
            positions = [(index, None) for index in range(len(self._view))]
            total_height = None
        else:
            positions = [(item.index, item.start) for item in window.items]
            total_height = window.total_height

        rows = tuple(
            self._render_row(index, offset) for index, offset in positions
        )
        return TableSnapshot(
            loading=False,
            search_term=self._search_term,
            search_placeholder=self._search_placeholder,
            sort=self._sort,
            header=() if is_empty else header_cells(self._columns, self._sort),
            select_all=None if is_empty else self.select_all_state(),
            rows=rows,
            virtualized=window is not None,
            total_height=total_height,
            view_count=len(self._view),
            total_count=len(self._rows),
            status_message=status_message,
            is_empty=is_empty,
            empty_message=self._empty_message,
            selected_count=selected_count,
            show_bulk_actions=show_bulk_actions,
        )

    # Internals

    def _render_row(self, index: int, offset: int | None) -> RenderedRow:
        row = self._view[index]
        row_id = self._view_ids[index]
        return RenderedRow(
            index=index,
            row_id=row_id,
            row=row,
            cells=render_cells(row, self._columns),
            selected=self._selectable and row_id in self._selection,
            label=row_label(row),
            offset=offset,
        )

    def _refresh_view(self) -> None:
        view = self._pipeline.derive(
            self._rows, self._search_term, self._search_fields, self._sort
        )
        if view is self._view:
            return
        self._view = view
        self._view_ids = view_ids(view, self._settings.id_field)
        virtualized = len(view) > self._settings.virtualize_threshold
        if virtualized != self._virtualized:
            logger.debug(
                "Virtualization %s for %d rows",
                "enabled" if virtualized else "disabled",
                len(view),
            )
            self._virtualized = virtualized
        self._reconcile()

    def _reconcile(self) -> None:
        reconciled = reconcile(self._selection, self._view_ids)
        if reconciled is self._selection:
            return
        logger.debug(
            "Selection shrunk from %d to %d rows", len(self._selection), len(reconciled)
        )
        self._selection = reconciled
        self._notify()

    def _set_selection(self, selection: Selection) -> None:
        if selection == self._selection:
            return
        self._selection = selection
        self._notify()

    def _notify(self) -> None:
        if self._on_selection_change is not None:
            self._on_selection_change(list(self._selection.ids))

    def row_id(self, row: Any) -> Hashable:
        return resolve_path(row, self._settings.id_field)
