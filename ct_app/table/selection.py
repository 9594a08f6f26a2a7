"""Selection set of row identifiers and its reconciliation against the view."""

from __future__ import annotations

from enum import Enum
from typing import Any, Hashable, Iterable, Iterator, Sequence

from ct_app.table.paths import resolve_path


class SelectAllState(str, Enum):
    CHECKED = "checked"
    UNCHECKED = "unchecked"
    INDETERMINATE = "indeterminate"


def _hashable(value: object) -> bool:
    try:
        hash(value)
    except TypeError:
        return False
    return True


class Selection:
    """Immutable, insertion-ordered set of row identifiers.

    Every operation returns a new instance; compare with ``==``. Identifiers
    that cannot be hashed (a list read from a malformed row) are never members.
    """

    __slots__ = ("_ids", "_members")

    def __init__(self, ids: Iterable[Hashable] = ()) -> None:
        ordered = tuple(dict.fromkeys(row_id for row_id in ids if _hashable(row_id)))
        self._ids = ordered
        self._members = frozenset(ordered)

    @classmethod
    def of(cls, ids: Iterable[Hashable]) -> "Selection":
        return cls(ids)

    @property
    def ids(self) -> tuple[Hashable, ...]:
        return self._ids

    def __contains__(self, row_id: object) -> bool:
        try:
            return row_id in self._members
        except TypeError:
            return False

    def __len__(self) -> int:
        return len(self._ids)

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self._ids)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Selection):
            return NotImplemented
        return self._ids == other._ids

    def __hash__(self) -> int:
        return hash(self._ids)

    def __repr__(self) -> str:
        return f"Selection({list(self._ids)!r})"

    def toggled(self, row_id: Hashable) -> "Selection":
        if row_id in self:
            return Selection(item for item in self._ids if item != row_id)
        return Selection((*self._ids, row_id))


def view_ids(view: Sequence[Any], id_field: str) -> list[Hashable]:
    """Identifiers of the view rows, in view order."""
    return [resolve_path(row, id_field) for row in view]


def reconcile(selection: Selection, ids_in_view: Sequence[Hashable]) -> Selection:
    """Drop identifiers no longer in the view.

    Returns ``selection`` itself when nothing was dropped, otherwise a new
    selection ordered by view position.
    """
    if not selection:
        return selection
    kept = Selection(row_id for row_id in ids_in_view if row_id in selection)
    if len(kept) == len(selection):
        return selection
    return kept


def select_all_state(
    selection: Selection, ids_in_view: Sequence[Hashable]
) -> SelectAllState:
    """Tri-state of the select-all control for the current view."""
    if not ids_in_view:
        return SelectAllState.UNCHECKED
    hits = sum(1 for row_id in ids_in_view if row_id in selection)
    if hits == 0:
        return SelectAllState.UNCHECKED
    if hits == len(ids_in_view):
        return SelectAllState.CHECKED
    return SelectAllState.INDETERMINATE
