"""Views composed from widgets and viewmodels."""

from ct_gui.views.records_view import RecordsView

__all__ = ["RecordsView"]
