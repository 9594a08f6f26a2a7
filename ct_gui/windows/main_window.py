"""Main application window with sidebar navigation."""

from __future__ import annotations

from typing import TYPE_CHECKING

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QHBoxLayout,
    QListWidget,
    QListWidgetItem,
    QMainWindow,
    QStackedWidget,
    QWidget,
)

from ct_app.api import get_preset

if TYPE_CHECKING:
    from ct_gui.app import ServiceContainer


class MainWindow(QMainWindow):
    """Main application window: one records view per CRM table."""

    # Navigation sections
    SECTIONS = [
        ("Clients", "clients"),
        ("Projects", "projects"),
        ("Invoices", "invoices"),
    ]

    def __init__(self, services: "ServiceContainer", parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.services = services
        self._views: dict[str, QWidget] = {}

        self._setup_ui()
        self._setup_views()
        self._sidebar.currentRowChanged.connect(self._stack.setCurrentIndex)

    @property
    def views(self) -> dict[str, QWidget]:
        return dict(self._views)

    def _setup_ui(self) -> None:
        """Set up the main UI layout."""
        self.setWindowTitle("Contractor CRM")
        self.setMinimumSize(1100, 760)

        central = QWidget()
        central.setObjectName("mainRoot")
        self.setCentralWidget(central)
        main_layout = QHBoxLayout(central)
        main_layout.setContentsMargins(0, 0, 0, 0)
        main_layout.setSpacing(0)

        # Sidebar navigation
        self._sidebar = QListWidget()
        self._sidebar.setObjectName("sidebar")
        self._sidebar.setFixedWidth(180)
        self._sidebar.setSpacing(2)
        for label, _ in self.SECTIONS:
            item = QListWidgetItem(label)
            item.setSizeHint(item.sizeHint().expandedTo(
                self._sidebar.sizeHint().scaled(0, 40, Qt.AspectRatioMode.IgnoreAspectRatio)
            ))
            self._sidebar.addItem(item)

        # Stacked widget for views
        self._stack = QStackedWidget()

        main_layout.addWidget(self._sidebar)
        main_layout.addWidget(self._stack, 1)

    def _setup_views(self) -> None:
        """Create one records view per section."""
        from ct_gui.views import RecordsView

        for _, key in self.SECTIONS:
            preset = get_preset(key)
            if preset is None:
                continue
            view = RecordsView(
                preset,
                self.services.record_source,
                self.services.cache,
                settings=self.services.table_settings,
            )
            self._views[key] = view
            self._stack.addWidget(view)

        # Select first item by default
        self._sidebar.setCurrentRow(0)
