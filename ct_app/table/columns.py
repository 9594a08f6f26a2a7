"""Column descriptors and sort state."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Callable, Iterable, Sequence

from ct_common.errors import TableConfigError

CellRenderer = Callable[[Any], Any]


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True)
class ColumnSpec:
    """One table column.

    ``key`` is a dot-path into the row; ``render`` replaces the default cell
    value when given.
    """

    key: str
    label: str
    sortable: bool = False
    render: CellRenderer | None = None


@dataclass(frozen=True)
class SortState:
    key: str | None = None
    direction: SortDirection = SortDirection.ASC

    @property
    def is_active(self) -> bool:
        return self.key is not None

    def toggled(self, key: str) -> "SortState":
        """Return the state after a header click on ``key``."""
        if self.key == key and self.direction is SortDirection.ASC:
            return replace(self, direction=SortDirection.DESC)
        return SortState(key=key, direction=SortDirection.ASC)


def normalize_columns(columns: Iterable[ColumnSpec] | None) -> tuple[ColumnSpec, ...]:
    """Return columns as a tuple, rejecting duplicate or empty keys."""
    if not columns:
        return ()
    result = tuple(columns)
    seen: set[str] = set()
    for column in result:
        if not column.key:
            raise TableConfigError(
                "Column key must not be empty", context={"label": column.label}
            )
        if column.key in seen:
            raise TableConfigError(
                f"Duplicate column key: {column.key}", context={"key": column.key}
            )
        seen.add(column.key)
    return result


def find_column(columns: Sequence[ColumnSpec], key: str) -> ColumnSpec | None:
    return next((column for column in columns if column.key == key), None)
