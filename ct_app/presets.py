"""Column and search presets for the CRM record tables."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Mapping

from ct_app.table.columns import ColumnSpec
from ct_app.table.paths import resolve_path

PROJECT_STATUS_BADGES: Mapping[str, str] = {
    "active": "success",
    "completed": "primary",
    "on_hold": "warning",
    "canceled": "danger",
}

INVOICE_STATUS_BADGES: Mapping[str, str] = {
    "draft": "secondary",
    "sent": "primary",
    "paid": "success",
    "partially_paid": "warning",
    "overdue": "danger",
    "canceled": "danger",
}

DEFAULT_BADGE = "secondary"


@dataclass(frozen=True)
class StatusBadge:
    """Status cell content; the render surface maps ``role`` to a style."""

    text: str
    role: str

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class TablePreset:
    name: str
    title: str
    columns: tuple[ColumnSpec, ...]
    search_fields: tuple[str, ...]
    search_placeholder: str
    empty_message: str


def badge_role(status: str | None, badges: Mapping[str, str]) -> str:
    if status is None:
        return DEFAULT_BADGE
    return badges.get(str(status), DEFAULT_BADGE)


def _or_dash(key: str) -> Callable[[Any], Any]:
    def render(row: Any) -> Any:
        value = resolve_path(row, key)
        return "-" if value in (None, "") else value

    return render


def _status(badges: Mapping[str, str]) -> Callable[[Any], StatusBadge]:
    def render(row: Any) -> StatusBadge:
        status = resolve_path(row, "status")
        text = "" if status is None else str(status)
        return StatusBadge(text=text, role=badge_role(status, badges))

    return render


CLIENTS = TablePreset(
    name="clients",
    title="Clients",
    columns=(
        ColumnSpec("name", "Name", sortable=True),
        ColumnSpec("email", "Email", sortable=True, render=_or_dash("email")),
        ColumnSpec("phone", "Phone", render=_or_dash("phone")),
        ColumnSpec("project_count", "Projects", sortable=True),
        ColumnSpec("created_at", "Created", sortable=True),
    ),
    search_fields=("name", "email", "phone"),
    search_placeholder="Search clients by name or email...",
    empty_message="No clients found",
)

PROJECTS = TablePreset(
    name="projects",
    title="Projects",
    columns=(
        ColumnSpec("title", "Project", sortable=True),
        ColumnSpec("client_name", "Client", sortable=True),
        ColumnSpec("status", "Status", sortable=True, render=_status(PROJECT_STATUS_BADGES)),
        ColumnSpec("total_amount", "Budget", sortable=True),
        ColumnSpec("start_date", "Start Date", sortable=True, render=_or_dash("start_date")),
    ),
    search_fields=("title", "client_name", "status", "description"),
    search_placeholder="Search projects by name, client, or status...",
    empty_message="No projects found",
)

INVOICES = TablePreset(
    name="invoices",
    title="Invoices",
    columns=(
        ColumnSpec("invoice_number", "Invoice #", sortable=True),
        ColumnSpec("client_name", "Client", sortable=True),
        ColumnSpec("project_name", "Project", sortable=True, render=_or_dash("project_name")),
        ColumnSpec("total_amount", "Amount", sortable=True),
        ColumnSpec("paid_amount", "Paid", sortable=True),
        ColumnSpec("due_date", "Due Date", sortable=True, render=_or_dash("due_date")),
        ColumnSpec("status", "Status", sortable=True, render=_status(INVOICE_STATUS_BADGES)),
    ),
    search_fields=("invoice_number", "client_name", "project_name", "status"),
    search_placeholder="Search invoices by number, client, or project...",
    empty_message="No invoices found",
)

PRESETS: dict[str, TablePreset] = {
    preset.name: preset for preset in (CLIENTS, PROJECTS, INVOICES)
}


def get_preset(name: str) -> TablePreset | None:
    return PRESETS.get(name.strip().lower())
