"""Records view: one CRM record type shown in a DataTable."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QMessageBox,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from ct_app.api import Selection, TableController, TablePreset, TableSettings
from ct_common.errors import CTError
from ct_gui.utils import set_widget_role
from ct_gui.viewmodels import DataTableViewModel
from ct_gui.widgets import DataTable
from ct_gui.workers import RowsWorker

if TYPE_CHECKING:
    from ct_app.api import SnapshotCache
    from ct_gui.services import RecordSource

logger = logging.getLogger(__name__)


class RecordsView(QWidget):
    """View listing one record type with search, sort and bulk delete."""

    def __init__(
        self,
        preset: TablePreset,
        source: "RecordSource",
        cache: "SnapshotCache",
        settings: TableSettings | None = None,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._preset = preset
        self._source = source
        self._cache = cache
        self._worker: RowsWorker | None = None
        self._in_flight = False
        self._pending_force: bool | None = None

        controller = TableController(
            preset.columns,
            search_fields=preset.search_fields,
            search_placeholder=preset.search_placeholder,
            empty_message=preset.empty_message,
            settings=settings,
        )
        self._vm = DataTableViewModel(controller, parent=self)

        self._setup_ui()
        self._connect_signals()
        self.load()

    @property
    def viewmodel(self) -> DataTableViewModel:
        return self._vm

    @property
    def cache_key(self) -> str:
        return f"/api/{self._preset.name}"

    def _setup_ui(self) -> None:
        """Set up the UI layout."""
        layout = QVBoxLayout(self)
        layout.setContentsMargins(20, 20, 20, 20)
        layout.setSpacing(16)

        # Title
        title = QLabel(self._preset.title)
        set_widget_role(title, "title")
        layout.addWidget(title)

        # Refresh button
        btn_layout = QHBoxLayout()
        self._refresh_btn = QPushButton("Refresh")
        btn_layout.addWidget(self._refresh_btn)
        btn_layout.addStretch()
        layout.addLayout(btn_layout)

        # Bulk actions shown next to the selection count
        self._delete_btn = QPushButton("Delete Selected")
        self._table = DataTable(self._vm, actions=self._delete_btn)
        layout.addWidget(self._table, 1)

        # Status label
        self._status_label = QLabel("")
        set_widget_role(self._status_label, "muted")
        layout.addWidget(self._status_label)

    def _connect_signals(self) -> None:
        """Connect widget and viewmodel signals."""
        self._refresh_btn.clicked.connect(lambda: self.load(force=True))
        self._delete_btn.clicked.connect(self._on_delete_selected)
        self._vm.error_occurred.connect(self._on_error)

    def load(self, force: bool = False) -> None:
        """Fetch rows through the cache in a background thread.

        A request made while a fetch is running is queued and starts once that
        fetch ends; the superseded result is dropped.
        """
        if self._in_flight:
            self._pending_force = bool(self._pending_force) or force
            logger.debug(
                "Queued reload of %s (force=%s)", self._preset.name, self._pending_force
            )
            return
        self._in_flight = True
        self._vm.set_loading(True)
        name = self._preset.name
        worker = RowsWorker(
            self._cache,
            self.cache_key,
            lambda: self._source.fetch(name),
            force=force,
        )
        worker.signals.finished.connect(self._on_rows_loaded)
        worker.signals.failed.connect(self._on_rows_failed)
        self._worker = worker
        worker.start()

    def _start_pending(self) -> bool:
        """Mark the running fetch done and start the queued one, if any."""
        self._in_flight = False
        if self._pending_force is None:
            return False
        force, self._pending_force = self._pending_force, None
        self.load(force=force)
        return True

    def _on_rows_loaded(self, rows: list) -> None:
        if self._start_pending():
            return
        self._vm.on_rows_loaded(rows)
        self._status_label.setText(f"{len(rows)} record(s) loaded")
        set_widget_role(self._status_label, "muted")

    def _on_rows_failed(self, message: str) -> None:
        if self._start_pending():
            return
        self._vm.on_rows_failed(message)

    def _on_delete_selected(self) -> None:
        """Delete the selected rows, updating the cached snapshot first."""
        ids = self._vm.selected_ids
        if not ids:
            return
        reply = QMessageBox.question(
            self,
            "Delete Records",
            f"Are you sure you want to delete {len(ids)} record(s)?",
            QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.No,
            QMessageBox.StandardButton.No,
        )
        if reply != QMessageBox.StandardButton.Yes:
            return
        self.delete_rows(ids)

    def delete_rows(self, ids: list) -> None:
        doomed = Selection(ids)
        controller = self._vm.controller
        remaining = [row for row in controller.rows if controller.row_id(row) not in doomed]
        self._cache.mutate(self.cache_key, remaining, revalidate=True)
        self._vm.set_rows(self._cache.peek(self.cache_key))
        try:
            removed = self._source.delete(self._preset.name, doomed)
        except (CTError, KeyError) as exc:
            logger.warning("Delete failed for %s: %s", self._preset.name, exc)
            self._on_error(f"Failed to delete records: {exc}")
            self.load(force=True)
            return
        self._status_label.setText(f"{removed} record(s) deleted")
        set_widget_role(self._status_label, "muted")
        self.load(force=True)

    def _on_error(self, message: str) -> None:
        """Handle error from viewmodel."""
        self._status_label.setText(message)
        set_widget_role(self._status_label, "status-error")
