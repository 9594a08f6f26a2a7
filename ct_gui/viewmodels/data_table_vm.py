"""ViewModel for the DataTable widget - wraps ct_app.api.TableController."""

from __future__ import annotations

from typing import Any, Hashable, Sequence

from PySide6.QtCore import QObject, Signal

from ct_app.api import TableController, TableSnapshot
from ct_common.errors import CTError


class DataTableViewModel(QObject):
    """Qt-aware wrapper around ct_app.api.TableController.

    Forwards user interactions to the controller and emits a fresh snapshot
    whenever what the table shows has changed.
    """

    # Signals
    snapshot_changed = Signal(object)  # TableSnapshot
    selection_changed = Signal(list)  # row identifiers
    loading_changed = Signal(bool)
    error_occurred = Signal(str)

    def __init__(
        self,
        controller: TableController | None = None,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._controller = controller or TableController()
        self._controller.set_selection_callback(self._on_selection_change)
        self._snapshot: TableSnapshot = self._controller.snapshot()
        self._window_range: range | None = None

    @property
    def controller(self) -> TableController:
        return self._controller

    @property
    def snapshot(self) -> TableSnapshot:
        """Last published snapshot."""
        return self._snapshot

    @property
    def selected_ids(self) -> list[Hashable]:
        return self._controller.selected_ids

    def refresh(self) -> None:
        """Rebuild and publish the snapshot."""
        window = self._controller.window()
        self._window_range = None if window is None else window.indices
        self._snapshot = self._controller.snapshot()
        self.snapshot_changed.emit(self._snapshot)

    # Data inputs

    def set_rows(self, rows: Sequence[Any] | None) -> None:
        self._controller.set_rows(rows)
        self.refresh()

    def set_loading(self, loading: bool) -> None:
        if loading == self._controller.loading:
            return
        self._controller.set_loading(loading)
        self.loading_changed.emit(loading)
        self.refresh()

    def set_has_actions(self, has_actions: bool) -> None:
        self._controller.set_has_actions(has_actions)
        self.refresh()

    # Methods called by RowsWorker signal handlers

    def on_rows_loaded(self, rows: list) -> None:
        self._controller.set_rows(rows)
        if self._controller.loading:
            self._controller.set_loading(False)
            self.loading_changed.emit(False)
        self.refresh()

    def on_rows_failed(self, message: str) -> None:
        self.set_loading(False)
        self.error_occurred.emit(f"Failed to load rows: {message}")

    # User interactions

    def set_search(self, term: str) -> None:
        if (term or "") == self._controller.search_term:
            return
        self._controller.set_search(term)
        self.refresh()

    def clear_search(self) -> None:
        self.set_search("")

    def toggle_sort(self, key: str) -> None:
        self._controller.toggle_sort(key)
        self.refresh()

    def toggle_row(self, row_id: Hashable) -> None:
        self._controller.toggle_row(row_id)
        self.refresh()

    def set_all_selected(self, checked: bool) -> None:
        self._controller.set_all_selected(checked)
        self.refresh()

    def scroll_to(self, offset: float) -> None:
        """Track the scroll position; republish only if other rows are needed."""
        self._controller.scroll_to(offset)
        self._refresh_if_window_moved()

    def set_viewport_height(self, height: int) -> None:
        try:
            self._controller.set_viewport_height(height)
        except CTError as exc:
            self.error_occurred.emit(str(exc))
            return
        self._refresh_if_window_moved()

    def set_row_height(self, height: int) -> None:
        try:
            self._controller.set_row_height(height)
        except CTError as exc:
            self.error_occurred.emit(str(exc))
            return
        self.refresh()

    def _refresh_if_window_moved(self) -> None:
        window = self._controller.window()
        indices = None if window is None else window.indices
        if indices != self._window_range:
            self.refresh()

    def _on_selection_change(self, ids: list[Hashable]) -> None:
        self.selection_changed.emit(ids)
