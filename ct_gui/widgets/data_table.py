"""DataTable widget: search, bulk actions, sortable header and virtual rows."""

from __future__ import annotations

from typing import TYPE_CHECKING

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QFrame,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QScrollArea,
    QToolButton,
    QVBoxLayout,
    QWidget,
)

from ct_app.api import SelectAllState, TableSnapshot
from ct_app.table.presentation import LOADING_MESSAGE
from ct_gui.utils import format_selected_count, set_widget_role
from ct_gui.widgets.table_rows import RowCanvas, TableHeader

if TYPE_CHECKING:
    from ct_gui.viewmodels.data_table_vm import DataTableViewModel


class DataTable(QWidget):
    """Render surface for a DataTableViewModel.

    The widget keeps no table state of its own; every refresh redraws from
    the latest snapshot.
    """

    def __init__(
        self,
        viewmodel: "DataTableViewModel",
        *,
        actions: QWidget | None = None,
        empty_state: QWidget | None = None,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._vm = viewmodel
        self._actions = actions
        self._custom_empty_state = empty_state

        self._setup_ui()
        self._connect_signals()
        self._vm.set_has_actions(actions is not None)
        self._render(self._vm.snapshot)

    def _setup_ui(self) -> None:
        """Set up the UI layout."""
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(8)

        # Controls: search box and bulk actions
        controls = QHBoxLayout()
        self.search_input = QLineEdit()
        self.search_input.setAccessibleName("Search table")
        self.search_input.setProperty("role", "searchbox")
        controls.addWidget(self.search_input, 1)

        self.clear_button = QToolButton()
        self.clear_button.setText("✕")
        self.clear_button.setAccessibleName("Clear search")
        self.clear_button.setVisible(False)
        controls.addWidget(self.clear_button)

        self.bulk_bar = QWidget()
        bulk_layout = QHBoxLayout(self.bulk_bar)
        bulk_layout.setContentsMargins(0, 0, 0, 0)
        self.selected_count_label = QLabel("")
        bulk_layout.addWidget(self.selected_count_label)
        if self._actions is not None:
            bulk_layout.addWidget(self._actions)
        self.bulk_bar.setVisible(False)
        controls.addWidget(self.bulk_bar)
        layout.addLayout(controls)

        # Search results info
        self.status_label = QLabel("")
        set_widget_role(self.status_label, "muted")
        self.status_label.setVisible(False)
        layout.addWidget(self.status_label)

        self.loading_label = QLabel(LOADING_MESSAGE)
        self.loading_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.loading_label.setVisible(False)
        layout.addWidget(self.loading_label, 1)

        # Table
        self.table_frame = QFrame()
        table_layout = QVBoxLayout(self.table_frame)
        table_layout.setContentsMargins(0, 0, 0, 0)
        table_layout.setSpacing(0)
        self.header = TableHeader()
        table_layout.addWidget(self.header)
        self.scroll_area = QScrollArea()
        self.scroll_area.setWidgetResizable(True)
        self.scroll_area.setHorizontalScrollBarPolicy(
            Qt.ScrollBarPolicy.ScrollBarAlwaysOff
        )
        self.canvas = RowCanvas()
        self.scroll_area.setWidget(self.canvas)
        table_layout.addWidget(self.scroll_area, 1)
        layout.addWidget(self.table_frame, 1)

        # Empty state
        if self._custom_empty_state is not None:
            self.empty_state = self._custom_empty_state
        else:
            self.empty_state = QLabel("")
            self.empty_state.setAlignment(Qt.AlignmentFlag.AlignCenter)
            set_widget_role(self.empty_state, "muted")
        self.empty_state.setVisible(False)
        layout.addWidget(self.empty_state, 1)

    def _connect_signals(self) -> None:
        """Connect widget and viewmodel signals."""
        self.search_input.textChanged.connect(self._vm.set_search)
        self.clear_button.clicked.connect(self._on_clear_search)
        self.header.sort_requested.connect(self._vm.toggle_sort)
        self.header.select_all_clicked.connect(self._on_select_all_clicked)
        self.canvas.row_toggled.connect(self._vm.toggle_row)
        self.scroll_area.verticalScrollBar().valueChanged.connect(self._vm.scroll_to)
        self._vm.snapshot_changed.connect(self._render)

    def resizeEvent(self, event: object) -> None:
        super().resizeEvent(event)
        height = self.scroll_area.viewport().height()
        if height > 0:
            self._vm.set_viewport_height(height)

    def _on_clear_search(self) -> None:
        self.search_input.clear()
        self._vm.clear_search()

    def _on_select_all_clicked(self) -> None:
        checked = self._vm.snapshot.select_all is not SelectAllState.CHECKED
        self._vm.set_all_selected(checked)

    def _render(self, snapshot: TableSnapshot) -> None:
        """Redraw every part of the widget from ``snapshot``."""
        self.search_input.setPlaceholderText(snapshot.search_placeholder)
        if self.search_input.text() != snapshot.search_term:
            self.search_input.blockSignals(True)
            self.search_input.setText(snapshot.search_term)
            self.search_input.blockSignals(False)
        self.clear_button.setVisible(bool(snapshot.search_term))

        self.bulk_bar.setVisible(snapshot.show_bulk_actions)
        self.selected_count_label.setText(format_selected_count(snapshot.selected_count))

        message = snapshot.status_message or ""
        if self.status_label.text() != message:
            self.status_label.setText(message)
            # Accessible name changes are announced to assistive technology
            self.status_label.setAccessibleName(message)
        self.status_label.setVisible(bool(message))

        self.loading_label.setVisible(snapshot.loading)
        show_table = not snapshot.loading and not snapshot.is_empty
        self.table_frame.setVisible(show_table)
        show_empty = not snapshot.loading and snapshot.is_empty
        if isinstance(self.empty_state, QLabel) and self._custom_empty_state is None:
            self.empty_state.setText(snapshot.empty_message)
        self.empty_state.setVisible(show_empty)

        self.header.set_cells(snapshot.header, snapshot.select_all)
        self._render_rows(snapshot)

    def _render_rows(self, snapshot: TableSnapshot) -> None:
        self.canvas.set_rows(
            snapshot.rows,
            row_height=self._vm.controller.row_height,
            total_height=snapshot.total_height,
            view_count=0 if snapshot.loading else snapshot.view_count,
            selectable=self._vm.controller.selectable,
        )
