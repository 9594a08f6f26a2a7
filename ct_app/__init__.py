"""Application layer between the render surfaces and the row data."""

from ct_app.api import SnapshotCache, TableController, TableSettings, get_preset

__all__ = ["SnapshotCache", "TableController", "TableSettings", "get_preset"]
