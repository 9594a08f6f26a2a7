"""Application setup and global services."""

from __future__ import annotations

from ct_app.api import SnapshotCache, TableSettings
from ct_gui.services import RecordSource
from ct_gui.windows.main_window import MainWindow


class ServiceContainer:
    """Container for all GUI services (dependency injection)."""

    def __init__(self, invoice_count: int = 250) -> None:
        self._invoice_count = invoice_count
        self._record_source: RecordSource | None = None
        self._cache: SnapshotCache | None = None
        self._table_settings: TableSettings | None = None

    @property
    def record_source(self) -> RecordSource:
        if self._record_source is None:
            self._record_source = RecordSource(invoice_count=self._invoice_count)
        return self._record_source

    @property
    def cache(self) -> SnapshotCache:
        if self._cache is None:
            self._cache = SnapshotCache()
        return self._cache

    @property
    def table_settings(self) -> TableSettings:
        if self._table_settings is None:
            self._table_settings = TableSettings.from_env()
        return self._table_settings


def create_app(invoice_count: int = 250) -> MainWindow:
    """Create and wire up the main application window."""
    services = ServiceContainer(invoice_count=invoice_count)
    window = MainWindow(services)
    return window
