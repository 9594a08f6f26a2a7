"""Header, row and row-canvas widgets used by the DataTable."""

from __future__ import annotations

from typing import Any, Sequence

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import (
    QCheckBox,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QWidget,
)

from ct_app.api import HeaderCell, RenderedRow, SelectAllState, StatusBadge
from ct_gui.utils import clear_layout, format_cell, set_widget_role

CHECKBOX_COLUMN_WIDTH = 32

_CHECK_STATES = {
    SelectAllState.CHECKED: Qt.CheckState.Checked,
    SelectAllState.UNCHECKED: Qt.CheckState.Unchecked,
    SelectAllState.INDETERMINATE: Qt.CheckState.PartiallyChecked,
}


def make_cell_widget(value: Any) -> QWidget:
    """Widget for one cell: custom widgets pass through, badges get a role."""
    if isinstance(value, QWidget):
        return value
    if isinstance(value, StatusBadge):
        label = QLabel(value.text)
        set_widget_role(label, f"badge-{value.role}")
        return label
    label = QLabel(format_cell(value))
    label.setTextInteractionFlags(Qt.TextInteractionFlag.TextSelectableByMouse)
    return label


class TableHeader(QWidget):
    """Column header row with a tri-state select-all box and sort buttons."""

    sort_requested = Signal(str)  # column key
    select_all_clicked = Signal()

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._layout = QHBoxLayout(self)
        self._layout.setContentsMargins(0, 0, 0, 0)
        self._layout.setSpacing(8)
        self.select_all: QCheckBox | None = None
        self.sort_buttons: dict[str, QPushButton] = {}

    def set_cells(
        self, cells: Sequence[HeaderCell], select_all: SelectAllState | None
    ) -> None:
        """Rebuild the header for the given cells."""
        clear_layout(self._layout)
        self.sort_buttons = {}
        self.select_all = None

        if select_all is not None:
            box = QCheckBox()
            box.setTristate(True)
            box.setCheckState(_CHECK_STATES[select_all])
            box.setAccessibleName("Select all")
            box.setFixedWidth(CHECKBOX_COLUMN_WIDTH)
            box.clicked.connect(lambda _checked: self.select_all_clicked.emit())
            self._layout.addWidget(box)
            self.select_all = box

        for cell in cells:
            if cell.sortable:
                button = QPushButton(f"{cell.label} {cell.indicator}")
                button.setFlat(True)
                button.setProperty("ariaSort", cell.aria_sort)
                button.setAccessibleDescription(f"Sorted: {cell.aria_sort}")
                button.clicked.connect(
                    lambda _checked=False, key=cell.key: self.sort_requested.emit(key)
                )
                self._layout.addWidget(button, 1)
                self.sort_buttons[cell.key] = button
            else:
                label = QLabel(cell.label)
                self._layout.addWidget(label, 1)


class TableRowWidget(QWidget):
    """One materialized row."""

    toggled = Signal(object)  # row identifier

    def __init__(
        self,
        row: RenderedRow,
        *,
        selectable: bool,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.row_id = row.row_id
        self.index = row.index
        self.setAttribute(Qt.WidgetAttribute.WA_StyledBackground, True)
        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(8)

        self.checkbox: QCheckBox | None = None
        if selectable:
            box = QCheckBox()
            box.setChecked(row.selected)
            box.setAccessibleName(row.label)
            box.setFixedWidth(CHECKBOX_COLUMN_WIDTH)
            box.clicked.connect(lambda _checked: self.toggled.emit(self.row_id))
            layout.addWidget(box)
            self.checkbox = box

        for value in row.cells:
            layout.addWidget(make_cell_widget(value), 1)

        set_widget_role(self, "row-selected" if row.selected else None)


class RowCanvas(QWidget):
    """Scroll content that places each row at ``index * row_height``.

    The canvas is as tall as the whole view so the scrollbar reflects every
    row, even when only a window of them exists as widgets.
    """

    row_toggled = Signal(object)

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._row_widgets: list[TableRowWidget] = []

    @property
    def row_widgets(self) -> list[TableRowWidget]:
        return list(self._row_widgets)

    def set_rows(
        self,
        rows: Sequence[RenderedRow],
        *,
        row_height: int,
        total_height: int | None,
        view_count: int,
        selectable: bool,
    ) -> None:
        # Rows may be rebuilt from inside one of their own click handlers
        for widget in self._row_widgets:
            widget.hide()
            widget.deleteLater()
        self._row_widgets = []

        height = total_height if total_height is not None else view_count * row_height
        self.setFixedHeight(max(height, 0))
        width = self.width()
        for row in rows:
            widget = TableRowWidget(row, selectable=selectable, parent=self)
            offset = row.offset if row.offset is not None else row.index * row_height
            widget.setGeometry(0, offset, width, row_height)
            widget.toggled.connect(self.row_toggled.emit)
            widget.show()
            self._row_widgets.append(widget)

    def resizeEvent(self, event: object) -> None:
        super().resizeEvent(event)
        width = event.size().width()  # type: ignore
        for widget in self._row_widgets:
            widget.resize(width, widget.height())
