"""Rich presenters for table snapshots."""

from ct_ui.presenters.table import TableModel, build_rich_table, snapshot_to_model

__all__ = ["TableModel", "build_rich_table", "snapshot_to_model"]
