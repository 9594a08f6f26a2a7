"""Terminal interface for previewing table views."""
