"""Public API surface for ct_common."""

from ct_common.errors import CTError, RowSourceError, TableConfigError
from ct_common.logging import configure_logging

__all__ = ["configure_logging", "CTError", "RowSourceError", "TableConfigError"]
