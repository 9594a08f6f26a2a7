"""Console entrypoint for the GUI (ct-table gui)."""

from __future__ import annotations

import sys


def main(invoice_count: int = 250) -> int:
    """Launch the GUI application."""
    # Configure logging before anything else
    from ct_common.api import configure_logging

    configure_logging()

    # Import Qt after logging is configured
    from PySide6.QtWidgets import QApplication

    from ct_gui.app import create_app
    from ct_gui.resources.theme import apply_theme

    app = QApplication.instance() or QApplication(sys.argv)
    app.setApplicationName("Contractor CRM")
    app.setOrganizationName("ct")

    apply_theme(app)

    window = create_app(invoice_count=invoice_count)
    window.show()

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
