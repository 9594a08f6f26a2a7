"""
Command-line interface for crm-datatable.

Previews how a JSON row export looks through the table controller (search,
sort, result counts) and launches the Qt demo window.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, List, Optional

import typer
from rich.console import Console
from rich.markup import escape

from ct_app.api import ColumnSpec, TableController, TableSettings, get_preset, PRESETS
from ct_common.api import CTError, configure_logging
from ct_ui import theme
from ct_ui.presenters import build_rich_table, snapshot_to_model

console = Console()

app = typer.Typer(help="Preview and browse contractor CRM tables.", no_args_is_help=True)


def _error(message: str) -> None:
    console.print(theme.PRESENTER_TEMPLATES["error"].format(message=escape(message)))


def _warning(message: str) -> None:
    console.print(theme.PRESENTER_TEMPLATES["warning"].format(message=escape(message)))


def _info(message: str) -> None:
    console.print(theme.PRESENTER_TEMPLATES["info"].format(message=escape(message)))


def load_rows(path: Path) -> list[Any]:
    """Read a JSON array of row objects."""
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise CTError(f"Cannot read {path}: {exc}", cause=exc) from exc
    except json.JSONDecodeError as exc:
        raise CTError(f"Invalid JSON in {path}: {exc.msg}", cause=exc) from exc
    if isinstance(data, dict):
        # Accept API envelopes such as {"invoices": [...]}
        lists = [value for value in data.values() if isinstance(value, list)]
        if len(lists) == 1:
            data = lists[0]
    if not isinstance(data, list):
        raise CTError(f"Expected a JSON array of rows in {path}")
    return data


def infer_columns(rows: list[Any], limit: int = 50) -> list[ColumnSpec]:
    """Sortable columns for every key seen in the first rows; nested objects become dot-paths."""
    keys: dict[str, None] = {}

    def _walk(prefix: str, value: Any) -> None:
        if isinstance(value, dict) and value:
            for key, inner in value.items():
                _walk(f"{prefix}.{key}" if prefix else str(key), inner)
        elif prefix:
            keys.setdefault(prefix, None)

    for row in rows[:limit]:
        if isinstance(row, dict):
            _walk("", row)
    return [ColumnSpec(key, key, sortable=True) for key in keys]


@app.callback()
def entry(
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging."),
) -> None:
    """Global entry point."""
    configure_logging(debug=debug)


@app.command("preview")
def preview(
    path: Path = typer.Argument(..., help="JSON file with an array of rows."),
    preset: Optional[str] = typer.Option(
        None,
        "--preset",
        "-p",
        help=f"Column preset ({', '.join(PRESETS)}). Columns are inferred when omitted.",
    ),
    search: str = typer.Option("", "--search", "-s", help="Search term."),
    fields: Optional[List[str]] = typer.Option(
        None,
        "--field",
        "-f",
        help="Dot-path to search in (repeatable). Defaults to the preset or all columns.",
    ),
    sort: Optional[str] = typer.Option(None, "--sort", help="Column key to sort by."),
    desc: bool = typer.Option(False, "--desc", help="Sort descending."),
    limit: int = typer.Option(50, "--limit", "-n", min=1, help="Maximum rows to print."),
) -> None:
    """Show the filtered and sorted view of a row export."""
    try:
        rows = load_rows(path)
    except CTError as exc:
        _error(str(exc))
        raise typer.Exit(1)

    if preset:
        selected = get_preset(preset)
        if selected is None:
            _error(f"Unknown preset '{preset}'. Choose one of: {', '.join(PRESETS)}")
            raise typer.Exit(1)
        title = selected.title
        columns = list(selected.columns)
        search_fields = list(fields or selected.search_fields)
        empty_message = selected.empty_message
    else:
        title = path.name
        columns = infer_columns(rows)
        search_fields = list(fields or [column.key for column in columns])
        empty_message = None

    controller = TableController(
        columns,
        rows=rows,
        search_fields=search_fields,
        empty_message=empty_message,
        selectable=False,
        # The terminal prints every row of the view; no windowing.
        settings=TableSettings.build(virtualize_threshold=max(len(rows), 1)),
    )
    controller.set_search(search)
    if sort:
        column = next((col for col in columns if col.key == sort), None)
        if column is None or not column.sortable:
            _error(f"Column '{sort}' is not sortable")
            raise typer.Exit(1)
        controller.toggle_sort(sort)
        if desc:
            controller.toggle_sort(sort)
    elif desc:
        _warning("--desc has no effect without --sort")

    snapshot = controller.snapshot()
    if snapshot.is_empty:
        _warning(snapshot.empty_message)
    else:
        model = snapshot_to_model(snapshot, title=title, limit=limit)
        console.print(build_rich_table(model, console=console))
        if snapshot.view_count > limit:
            _info(f"{snapshot.view_count - limit} more row(s) not shown")
    if snapshot.status_message:
        _info(snapshot.status_message)


@app.command("gui")
def gui(
    invoices: int = typer.Option(250, "--invoices", min=0, help="Number of sample invoices."),
) -> None:
    """Launch the Qt demo window (requires the gui extra)."""
    try:
        from ct_gui.main import main as gui_main
    except ImportError as exc:
        _error(f"GUI dependencies missing: {exc}. Install with `pip install .[gui]`.")
        raise typer.Exit(1)
    raise typer.Exit(gui_main(invoice_count=invoices))


def main() -> None:
    """Console script entrypoint (Typer app)."""
    app()


if __name__ == "__main__":
    main()
