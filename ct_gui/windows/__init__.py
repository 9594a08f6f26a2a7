"""Top-level windows."""

from ct_gui.windows.main_window import MainWindow

__all__ = ["MainWindow"]
