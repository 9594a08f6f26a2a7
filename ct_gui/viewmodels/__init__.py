"""ViewModels exposing Qt signals for views."""

from ct_gui.viewmodels.data_table_vm import DataTableViewModel

__all__ = [
    "DataTableViewModel",
]
