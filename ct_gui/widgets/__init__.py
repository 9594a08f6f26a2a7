"""Reusable Qt widgets."""

from ct_gui.widgets.data_table import DataTable
from ct_gui.widgets.table_rows import RowCanvas, TableHeader, TableRowWidget

__all__ = [
    "DataTable",
    "RowCanvas",
    "TableHeader",
    "TableRowWidget",
]
