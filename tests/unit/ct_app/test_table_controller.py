"""Tests for TableController state transitions and snapshots."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from ct_app.table.columns import ColumnSpec, SortDirection
from ct_app.table.controller import TableController
from ct_app.table.selection import SelectAllState
from ct_app.table.settings import TableSettings
from ct_common.errors import TableConfigError

pytestmark = pytest.mark.unit_table


COLUMNS = [
    ColumnSpec("name", "Name", sortable=True),
    ColumnSpec("email", "Email", sortable=True),
    ColumnSpec("phone", "Phone"),
]


def _rows(count: int) -> list[dict]:
    return [
        {"id": index, "name": f"Client {index:03d}", "email": f"c{index}@example.com"}
        for index in range(count)
    ]


def _controller(rows: list | None = None, **kwargs) -> TableController:
    kwargs.setdefault("search_fields", ["name", "email"])
    return TableController(COLUMNS, rows=rows if rows is not None else _rows(10), **kwargs)


class TestSearch:
    def test_status_message_only_while_searching(self) -> None:
        controller = _controller()
        assert controller.status_message() is None

        controller.set_search("client 00")

        assert [row["id"] for row in controller.view] == list(range(10))
        controller.set_search("Client 001")
        assert controller.status_message() == "Showing 1 of 10 results"

    def test_showing_three_of_ten(self) -> None:
        rows = _rows(10)
        for row in rows[:3]:
            row["name"] = f"Smith {row['id']}"
        controller = _controller(rows)

        controller.set_search("smith")

        snapshot = controller.snapshot()
        assert snapshot.view_count == 3
        assert snapshot.status_message == "Showing 3 of 10 results"

    def test_clear_search_restores_view(self) -> None:
        controller = _controller()
        controller.set_search("nobody")
        assert controller.view == []

        controller.clear_search()

        assert len(controller.view) == 10
        assert controller.search_term == ""

    def test_no_search_fields_means_no_filtering(self) -> None:
        controller = TableController(COLUMNS, rows=_rows(4))
        controller.set_search("zzz")
        assert len(controller.view) == 4


class TestSort:
    def test_toggle_sort_cycles_direction(self) -> None:
        controller = _controller()
        controller.toggle_sort("name")
        assert controller.sort.direction is SortDirection.ASC
        assert controller.view[0]["id"] == 0

        controller.toggle_sort("name")
        assert controller.sort.direction is SortDirection.DESC
        assert controller.view[0]["id"] == 9

    def test_non_sortable_column_is_ignored(self) -> None:
        controller = _controller()
        before = controller.view

        controller.toggle_sort("phone")
        controller.toggle_sort("missing")

        assert controller.sort.key is None
        assert controller.view is before

    def test_header_reflects_sort(self) -> None:
        controller = _controller()
        controller.toggle_sort("email")

        header = {cell.key: cell for cell in controller.snapshot().header}

        assert header["email"].aria_sort == "ascending"
        assert header["email"].indicator == "▲"
        assert header["name"].aria_sort == "none"
        assert header["name"].indicator == "⇅"
        assert header["phone"].aria_sort is None
        assert header["phone"].indicator == ""


class TestSelection:
    def test_toggle_row_notifies(self) -> None:
        callback = MagicMock()
        controller = _controller(on_selection_change=callback)

        controller.toggle_row(3)
        controller.toggle_row(5)
        controller.toggle_row(3)

        assert controller.selected_ids == [5]
        assert [c.args[0] for c in callback.call_args_list] == [[3], [3, 5], [5]]

    def test_toggle_row_outside_view_is_ignored(self) -> None:
        callback = MagicMock()
        controller = _controller(on_selection_change=callback)

        controller.toggle_row(99)

        assert controller.selected_ids == []
        callback.assert_not_called()

    def test_search_shrinks_selection_and_notifies(self) -> None:
        rows = [
            {"id": "A", "name": "Alpha"},
            {"id": "B", "name": "Beta"},
            {"id": "C", "name": "Gamma"},
        ]
        callback = MagicMock()
        controller = _controller(rows, on_selection_change=callback)
        controller.toggle_row("A")
        controller.toggle_row("B")
        callback.reset_mock()

        controller.set_search("a")  # Alpha, Beta, Gamma all contain "a"
        callback.assert_not_called()

        controller.set_search("alpha")

        assert controller.selected_ids == ["A"]
        callback.assert_called_once_with(["A"])

    def test_narrowing_all_selected_view_to_one_row(self) -> None:
        rows = [{"id": "A", "name": "Ann"}, {"id": "B", "name": "Bob"}, {"id": "C", "name": "Cy"}]
        callback = MagicMock()
        controller = _controller(rows, on_selection_change=callback)
        controller.set_all_selected(True)
        callback.reset_mock()

        controller.set_search("ann")

        assert controller.selected_ids == ["A"]
        callback.assert_called_once_with(["A"])

    def test_select_all_scope_follows_search(self) -> None:
        rows = [{"id": "A", "name": "Ann"}, {"id": "B", "name": "Anna"}, {"id": "C", "name": "Cy"}]
        controller = _controller(rows)
        controller.set_search("ann")

        controller.set_all_selected(True)
        assert controller.selected_ids == ["A", "B"]

        controller.set_all_selected(False)
        assert controller.selected_ids == []

    def test_selection_is_not_restored_when_search_cleared(self) -> None:
        controller = _controller()
        controller.toggle_row(1)
        controller.toggle_row(2)

        controller.set_search("Client 001")
        controller.clear_search()

        assert controller.selected_ids == [1]

    def test_set_rows_drops_vanished_ids(self) -> None:
        callback = MagicMock()
        rows = _rows(5)
        controller = _controller(rows, on_selection_change=callback)
        controller.set_all_selected(True)
        callback.reset_mock()

        controller.set_rows(rows[:2])

        assert controller.selected_ids == [0, 1]
        callback.assert_called_once_with([0, 1])

    def test_select_all_covers_whole_view(self) -> None:
        controller = _controller(_rows(150))
        controller.set_search("Client 1")  # Client 100 .. Client 149

        controller.set_all_selected(True)

        assert len(controller.selected_ids) == len(controller.view) == 50
        assert controller.select_all_state() is SelectAllState.CHECKED

    def test_unchecking_select_all_clears_everything(self) -> None:
        callback = MagicMock()
        controller = _controller(on_selection_change=callback)
        controller.toggle_row(1)

        controller.set_all_selected(False)

        assert controller.selected_ids == []
        assert callback.call_args_list[-1].args == ([],)

    def test_select_all_state_transitions(self) -> None:
        controller = _controller(_rows(3))
        assert controller.select_all_state() is SelectAllState.UNCHECKED
        controller.toggle_row(0)
        assert controller.select_all_state() is SelectAllState.INDETERMINATE
        controller.toggle_row(1)
        controller.toggle_row(2)
        assert controller.select_all_state() is SelectAllState.CHECKED

    def test_not_selectable(self) -> None:
        controller = _controller(selectable=False)
        controller.toggle_row(1)
        controller.set_all_selected(True)
        assert controller.selected_ids == []
        assert controller.snapshot().select_all is None

    def test_custom_id_field(self) -> None:
        rows = [{"uuid": "x", "name": "X"}, {"uuid": "y", "name": "Y"}]
        controller = _controller(rows, settings=TableSettings(id_field="uuid"))
        controller.set_all_selected(True)
        assert controller.selected_ids == ["x", "y"]


class TestSnapshot:
    def test_empty_view(self) -> None:
        controller = _controller(empty_message="No clients found")
        controller.set_search("nobody")

        snapshot = controller.snapshot()

        assert snapshot.is_empty is True
        assert snapshot.empty_message == "No clients found"
        assert snapshot.rows == ()
        assert snapshot.header == ()
        assert snapshot.select_all is None
        assert snapshot.status_message == "Showing 0 of 10 results"

    def test_default_empty_message(self) -> None:
        snapshot = TableController(COLUMNS).snapshot()
        assert snapshot.is_empty is True
        assert snapshot.empty_message == "No results found"

    def test_loading_hides_rows(self) -> None:
        controller = _controller(loading=True)

        snapshot = controller.snapshot()

        assert snapshot.loading is True
        assert snapshot.rows == ()
        assert snapshot.header == ()
        assert snapshot.is_empty is False

    def test_rows_carry_cells_labels_and_selection(self) -> None:
        columns = COLUMNS + [ColumnSpec("upper", "Upper", render=lambda row: row["name"].upper())]
        controller = TableController(columns, rows=_rows(2))
        controller.toggle_row(1)

        rows = controller.snapshot().rows

        assert rows[0].cells == ("Client 000", "c0@example.com", None, "CLIENT 000")
        assert rows[0].label == "Select Client 000"
        assert rows[0].offset is None
        assert [row.selected for row in rows] == [False, True]

    def test_bulk_actions_need_actions_and_selection(self) -> None:
        controller = _controller(has_actions=True)
        assert controller.snapshot().show_bulk_actions is False
        controller.toggle_row(2)
        snapshot = controller.snapshot()
        assert snapshot.show_bulk_actions is True
        assert snapshot.selected_count == 1

    def test_virtualizes_above_threshold(self) -> None:
        controller = _controller(_rows(101))

        snapshot = controller.snapshot()

        assert snapshot.virtualized is True
        assert snapshot.total_height == 5050
        assert len(snapshot.rows) == 22
        assert snapshot.rows[3].offset == 150

    def test_exactly_threshold_renders_everything(self) -> None:
        snapshot = _controller(_rows(100)).snapshot()
        assert snapshot.virtualized is False
        assert len(snapshot.rows) == 100
        assert snapshot.total_height is None

    def test_scrolling_moves_the_window(self) -> None:
        controller = _controller(_rows(1000))
        controller.scroll_to(5000)
        rows = controller.snapshot().rows
        assert rows[0].index == 90
        assert rows[-1].index == 121

    def test_search_can_turn_virtualization_off(self) -> None:
        controller = _controller(_rows(150))
        assert controller.is_virtualized is True
        controller.set_search("Client 14")
        assert controller.is_virtualized is False


class TestConfiguration:
    def test_duplicate_column_keys_rejected(self) -> None:
        with pytest.raises(TableConfigError):
            TableController([ColumnSpec("a", "A"), ColumnSpec("a", "Again")])

    def test_invalid_heights_rejected(self) -> None:
        controller = _controller()
        with pytest.raises(TableConfigError):
            controller.set_viewport_height(0)
        with pytest.raises(TableConfigError):
            controller.set_row_height(-1)

    def test_row_id(self) -> None:
        controller = _controller()
        assert controller.row_id({"id": 7}) == 7
        assert controller.row_id({}) is None

    def test_set_columns_drops_sort_on_removed_column(self) -> None:
        controller = _controller()
        controller.toggle_sort("name")
        controller.toggle_sort("name")
        assert controller.view[0]["id"] == 9

        controller.set_columns([ColumnSpec("email", "Email", sortable=True)])

        assert controller.sort.key is None
        assert [row["id"] for row in controller.view] == list(range(10))
        assert [cell.key for cell in controller.snapshot().header] == ["email"]

    def test_set_columns_keeps_sort_on_surviving_column(self) -> None:
        controller = _controller()
        controller.toggle_sort("email")
        before = controller.view

        controller.set_columns([ColumnSpec("email", "E-mail", sortable=True)])

        assert controller.sort.key == "email"
        assert controller.view is before


class TestMalformedRows:
    def test_unhashable_id_does_not_break_the_table(self) -> None:
        rows = [{"id": [1, 2], "name": "Broken"}, {"id": 3, "name": "Fine"}]
        callback = MagicMock()
        controller = _controller(rows, on_selection_change=callback)

        controller.toggle_row([1, 2])
        controller.set_all_selected(True)
        snapshot = controller.snapshot()

        assert controller.selected_ids == [3]
        assert [row.selected for row in snapshot.rows] == [False, True]
        assert snapshot.select_all is SelectAllState.INDETERMINATE
        callback.assert_called_once_with([3])
