"""Widget tests for DataTable rendering."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

pytestmark = pytest.mark.unit_gui


def _rows(count: int) -> list[dict]:
    return [
        {"id": index, "name": f"Client {index:03d}", "status": "paid"}
        for index in range(count)
    ]


def _make_table(rows: list, *, actions=None, **controller_kwargs):
    from ct_app.api import ColumnSpec, TableController
    from ct_gui.viewmodels import DataTableViewModel
    from ct_gui.widgets import DataTable

    controller = TableController(
        [ColumnSpec("name", "Name", sortable=True), ColumnSpec("status", "Status")],
        rows=rows,
        search_fields=["name"],
        **controller_kwargs,
    )
    vm = DataTableViewModel(controller)
    return DataTable(vm, actions=actions), vm


class TestDataTable:
    def test_small_table_renders_every_row(self, qapp) -> None:
        table, _ = _make_table(_rows(3))

        assert len(table.canvas.row_widgets) == 3
        assert table.canvas.height() == 150
        assert table.empty_state.isHidden()
        assert table.header.select_all is not None
        assert set(table.header.sort_buttons) == {"name"}

    def test_large_table_renders_a_window(self, qapp) -> None:
        table, _ = _make_table(_rows(101))

        widgets = table.canvas.row_widgets
        assert len(widgets) == 22
        assert table.canvas.height() == 5050
        assert widgets[4].geometry().y() == 200

    def test_search_updates_status_label(self, qapp) -> None:
        table, vm = _make_table(_rows(10))

        table.search_input.setText("client 00")
        vm.set_search("client 001")

        assert table.status_label.text() == "Showing 1 of 10 results"
        assert table.status_label.accessibleName() == "Showing 1 of 10 results"
        assert table.search_input.text() == "client 001"
        assert not table.clear_button.isHidden()

    def test_empty_state(self, qapp) -> None:
        table, vm = _make_table(_rows(3), empty_message="No clients found")

        vm.set_search("nobody")

        assert table.empty_state.text() == "No clients found"
        assert not table.empty_state.isHidden()
        assert table.table_frame.isHidden()

    def test_sort_button_toggles_sort(self, qapp) -> None:
        table, vm = _make_table(_rows(3))

        table.header.sort_buttons["name"].click()
        table.header.sort_buttons["name"].click()

        assert vm.snapshot.sort.key == "name"
        assert vm.snapshot.sort.direction.value == "desc"
        assert table.header.sort_buttons["name"].text() == "Name ▼"

    def test_row_checkbox_and_bulk_bar(self, qapp) -> None:
        from PySide6.QtWidgets import QPushButton

        delete = QPushButton("Delete Selected")
        table, vm = _make_table(_rows(3), actions=delete)
        assert table.bulk_bar.isHidden()

        table.canvas.row_widgets[1].checkbox.click()

        assert vm.selected_ids == [1]
        assert not table.bulk_bar.isHidden()
        assert table.selected_count_label.text() == "1 selected"
        assert table.canvas.row_widgets[1].checkbox.accessibleName() == "Select Client 001"

    def test_select_all_click(self, qapp) -> None:
        table, vm = _make_table(_rows(3))
        listener = MagicMock()
        vm.selection_changed.connect(listener)

        table.header.select_all.click()
        assert vm.selected_ids == [0, 1, 2]

        table.header.select_all.click()
        assert vm.selected_ids == []
        assert listener.call_count == 2

    def test_loading_label(self, qapp) -> None:
        table, vm = _make_table([])

        vm.set_loading(True)
        assert not table.loading_label.isHidden()
        assert table.table_frame.isHidden()

        vm.on_rows_loaded(_rows(2))
        assert table.loading_label.isHidden()
        assert len(table.canvas.row_widgets) == 2

    def test_status_badge_cell(self, qapp) -> None:
        from ct_app.api import StatusBadge
        from ct_gui.widgets.table_rows import make_cell_widget

        label = make_cell_widget(StatusBadge(text="paid", role="success"))

        assert label.text() == "paid"
        assert label.property("role") == "badge-success"
