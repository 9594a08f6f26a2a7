"""QThread workers for async operations."""

from ct_gui.workers.rows_worker import RowsWorker, RowsWorkerSignals

__all__ = [
    "RowsWorker",
    "RowsWorkerSignals",
]
