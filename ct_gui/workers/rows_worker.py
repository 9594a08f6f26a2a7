"""QThread worker for fetching table rows asynchronously."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Hashable

from PySide6.QtCore import QObject, QThread, Signal

if TYPE_CHECKING:
    from ct_app.api import SnapshotCache


class RowsWorkerSignals(QObject):
    """Signals emitted by RowsWorker."""

    finished = Signal(list)  # rows
    failed = Signal(str)


class RowsWorker(QObject):
    """Worker that fetches a row snapshot through the cache in a separate thread."""

    def __init__(
        self,
        cache: "SnapshotCache",
        key: Hashable,
        fetcher: Callable[[], Any],
        *,
        force: bool = False,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._cache = cache
        self._key = key
        self._fetcher = fetcher
        self._force = force
        self._thread: QThread | None = None

        self.signals = RowsWorkerSignals()

    def start(self) -> None:
        """Start the worker in a new thread."""
        if self._thread is not None:
            return
        self._thread = QThread()
        self.moveToThread(self._thread)
        self._thread.started.connect(self._run)
        self._thread.start()

    def _run(self) -> None:
        """Fetch rows in the worker thread."""
        try:
            if self._force:
                rows = self._cache.revalidate(self._key, self._fetcher)
            else:
                rows = self._cache.get(self._key, self._fetcher)
            self.signals.finished.emit(list(rows or []))
        except Exception as exc:
            self.signals.failed.emit(str(exc))
        finally:
            self._cleanup_thread()

    def _cleanup_thread(self) -> None:
        """Clean up the thread after completion."""
        if self._thread is not None:
            self._thread.quit()
            if QThread.currentThread() is not self._thread:
                self._thread.wait()
            self._thread.deleteLater()
            self._thread = None

    def is_running(self) -> bool:
        """Check if the worker is currently running."""
        return self._thread is not None and self._thread.isRunning()
