from __future__ import annotations

import shutil
from dataclasses import dataclass
from typing import Any

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from ct_app.api import StatusBadge, TableSnapshot
from ct_app.table.paths import stringify
from ct_ui import theme


@dataclass
class TableModel:
    title: str
    columns: list[str]
    rows: list[list[str]]


def _cell_markup(value: Any) -> str:
    if isinstance(value, StatusBadge):
        color = theme.RICH_BADGE_COLORS.get(value.role, "dim")
        return f"[{color}]{escape(value.text)}[/{color}]"
    return escape(stringify(value))


def snapshot_to_model(
    snapshot: TableSnapshot, *, title: str, limit: int | None = None
) -> TableModel:
    """Flatten a snapshot's header and rows into plain strings."""
    columns = []
    for cell in snapshot.header:
        label = escape(cell.label)
        # Only the active sort column carries an arrow in the terminal
        if cell.aria_sort in ("ascending", "descending"):
            label = f"{label} {cell.indicator}"
        columns.append(label)
    rendered = snapshot.rows if limit is None else snapshot.rows[:limit]
    rows = [[_cell_markup(value) for value in row.cells] for row in rendered]
    return TableModel(title=title, columns=columns, rows=rows)


def _console_width(console: Console) -> int | None:
    try:
        width = int(getattr(console.size, "width"))
        if width > 0:
            return width
    except Exception:
        pass
    try:
        width = int(shutil.get_terminal_size(fallback=(100, 24)).columns)
        return width if width > 0 else None
    except Exception:
        return None


def build_rich_table(
    model: TableModel,
    *,
    console: Console,
    show_lines: bool = False,
    border_style: str = theme.RICH_BORDER_STYLE,
    header_style: str = theme.RICH_ACCENT_BOLD,
    title_style: str = theme.RICH_ACCENT_BOLD,
    box_style: box.Box = box.ROUNDED,
) -> Table:
    """
    Build a Rich Table from a TableModel that fits the current terminal width.

    Columns are rendered as single-line and truncated with ellipsis when needed.
    """
    term_width = _console_width(console)
    max_table_width = max(60, (term_width - 2) if term_width else 100)
    min_col_width = 4

    title_text = Text(str(model.title))
    title_text.no_wrap = True
    title_text.overflow = "ellipsis"

    rich_table = Table(
        title=title_text,
        show_lines=show_lines,
        expand=True,
        width=max_table_width,
        box=box_style,
        border_style=border_style,
        header_style=header_style,
        title_style=title_style,
    )

    def _cell_width(value: str) -> int:
        return Text.from_markup(value).cell_len

    column_count = max(1, len(model.columns))
    # Rough overhead for borders + separators + padding.
    overhead = 4 + (column_count - 1) * 3

    desired: list[int] = []
    for idx, col in enumerate(model.columns):
        max_len = len(col)
        for row in model.rows:
            if idx < len(row):
                max_len = max(max_len, _cell_width(row[idx]))
        desired.append(max(min_col_width, min(max_len, max_table_width)))

    # Shrink widest columns until the approximate total fits.
    while desired and sum(desired) + overhead > max_table_width:
        widest = max(range(len(desired)), key=lambda i: desired[i])
        if desired[widest] <= min_col_width:
            break
        desired[widest] -= 1

    for idx, col in enumerate(model.columns):
        rich_table.add_column(
            col,
            overflow="ellipsis",
            no_wrap=True,
            min_width=min_col_width,
            max_width=desired[idx] if idx < len(desired) else None,
        )
    for row in model.rows:
        rich_table.add_row(*row)
    return rich_table
