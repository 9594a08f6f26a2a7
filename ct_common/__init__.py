"""Shared helpers for crm-datatable."""

from ct_common.api import CTError, RowSourceError, TableConfigError, configure_logging

__all__ = ["configure_logging", "CTError", "RowSourceError", "TableConfigError"]
