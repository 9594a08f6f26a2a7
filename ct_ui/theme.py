from __future__ import annotations

RICH_ACCENT = "blue"
RICH_ACCENT_BOLD = f"bold {RICH_ACCENT}"
RICH_BORDER_STYLE = RICH_ACCENT

RICH_BADGE_COLORS: dict[str, str] = {
    "success": "green",
    "primary": "blue",
    "warning": "yellow",
    "danger": "red",
    "secondary": "dim",
}

PRESENTER_TEMPLATES: dict[str, str] = {
    "info": "[blue]ℹ[/blue] {message}",
    "warning": "[yellow]⚠ {message}[/yellow]",
    "error": "[red]✖ {message}[/red]",
}
