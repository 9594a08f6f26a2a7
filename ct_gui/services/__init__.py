"""Service layer used by the GUI."""

from ct_gui.services.record_source import RecordSource

__all__ = ["RecordSource"]
