"""In-memory CRM record source used by the demo window."""

from __future__ import annotations

import random
import threading
from datetime import date, timedelta
from typing import Any, Hashable, Iterable

_CLIENT_NAMES = [
    "Acme Builders",
    "Birch & Sons",
    "Cedar Renovations",
    "Delta Roofing",
    "Evergreen Homes",
    "Fairview Plumbing",
    "Granite Works",
    "Harbor Electric",
]
_PROJECT_KINDS = ["Kitchen remodel", "Roof repair", "Deck build", "Basement finish"]
_PROJECT_STATUSES = ["active", "completed", "on_hold", "canceled"]
_INVOICE_STATUSES = ["draft", "sent", "paid", "partially_paid", "overdue", "canceled"]


class RecordSource:
    """Deterministic sample clients, projects and invoices.

    Stands in for the REST API: ``fetch`` returns a fresh list each call and
    ``delete`` removes rows by identifier.
    """

    def __init__(self, invoice_count: int = 250, seed: int = 7) -> None:
        rng = random.Random(seed)
        self._lock = threading.Lock()
        self._records: dict[str, list[dict[str, Any]]] = {}
        self._records["clients"] = self._build_clients()
        self._records["projects"] = self._build_projects(rng)
        self._records["invoices"] = self._build_invoices(rng, invoice_count)

    def names(self) -> list[str]:
        return list(self._records)

    def fetch(self, name: str) -> list[dict[str, Any]]:
        with self._lock:
            if name not in self._records:
                raise KeyError(f"Unknown record type: {name}")
            return [dict(row) for row in self._records[name]]

    def delete(self, name: str, ids: Iterable[Hashable]) -> int:
        """Delete rows by id; returns how many were removed."""
        doomed = set(ids)
        with self._lock:
            rows = self._records.get(name, [])
            kept = [row for row in rows if row.get("id") not in doomed]
            self._records[name] = kept
            return len(rows) - len(kept)

    def _build_clients(self) -> list[dict[str, Any]]:
        start = date(2024, 1, 1)
        return [
            {
                "id": index + 1,
                "name": name,
                "email": f"office@{name.split()[0].lower()}.example",
                "phone": None if index % 3 == 0 else f"555-01{index:02d}",
                "project_count": index % 4,
                "created_at": (start + timedelta(days=index * 17)).isoformat(),
                "address": {"city": ["Springfield", "Riverton", "Lakeside"][index % 3]},
            }
            for index, name in enumerate(_CLIENT_NAMES)
        ]

    def _build_projects(self, rng: random.Random) -> list[dict[str, Any]]:
        projects = []
        for index in range(24):
            client = _CLIENT_NAMES[index % len(_CLIENT_NAMES)]
            kind = _PROJECT_KINDS[index % len(_PROJECT_KINDS)]
            projects.append(
                {
                    "id": index + 1,
                    "title": f"{kind} #{index + 1}",
                    "client_name": client,
                    "status": rng.choice(_PROJECT_STATUSES),
                    "total_amount": rng.randrange(2_000, 60_000, 250),
                    "start_date": None
                    if index % 5 == 0
                    else (date(2024, 3, 1) + timedelta(days=index * 9)).isoformat(),
                    "description": f"{kind} for {client}",
                }
            )
        return projects

    def _build_invoices(self, rng: random.Random, count: int) -> list[dict[str, Any]]:
        invoices = []
        for index in range(count):
            client = _CLIENT_NAMES[index % len(_CLIENT_NAMES)]
            total = round(rng.uniform(250, 12_000), 2)
            status = rng.choice(_INVOICE_STATUSES)
            paid = {"paid": total, "partially_paid": round(total / 2, 2)}.get(status, 0)
            invoices.append(
                {
                    "id": index + 1,
                    "invoice_number": f"INV-2024-{index + 1:04d}",
                    "client_name": client,
                    "project_name": None
                    if index % 7 == 0
                    else f"{_PROJECT_KINDS[index % len(_PROJECT_KINDS)]} #{index % 24 + 1}",
                    "total_amount": total,
                    "paid_amount": paid,
                    "due_date": (date(2024, 6, 1) + timedelta(days=index)).isoformat(),
                    "status": status,
                }
            )
        return invoices
