"""Filter and sort stages of the table view, plus their memoizing pipeline."""

from __future__ import annotations

import locale
import logging
from dataclasses import dataclass
from functools import cmp_to_key
from typing import Any, Sequence

from ct_app.table.columns import SortDirection, SortState
from ct_app.table.paths import resolve_path, stringify

logger = logging.getLogger(__name__)


def filter_rows(
    rows: Sequence[Any], term: str | None, fields: Sequence[str] | None
) -> list[Any]:
    """Return rows where any search field contains ``term``, case-insensitively.

    An empty term or an empty field list lets every row through.
    """
    if not rows:
        return []
    if not term or not fields:
        return list(rows)
    needle = term.lower()
    matched: list[Any] = []
    for row in rows:
        for field in fields:
            value = resolve_path(row, field)
            if value is None:
                continue
            if needle in stringify(value).lower():
                matched.append(row)
                break
    return matched


def _compare_text(left: str, right: str) -> int:
    """Case-insensitive collation; case only breaks ties ("apple" < "Banana")."""
    folded = locale.strcoll(left.casefold(), right.casefold())
    if folded:
        return folded
    return locale.strcoll(left, right)


def _compare_values(left: Any, right: Any) -> int:
    if isinstance(left, str) or isinstance(right, str):
        return _compare_text(stringify(left), stringify(right))
    try:
        if left < right:
            return -1
        if left > right:
            return 1
        return 0
    except TypeError:
        return _compare_text(stringify(left), stringify(right))


def sort_rows(rows: Sequence[Any], sort: SortState) -> list[Any]:
    """Return rows ordered by ``sort``.

    Rows whose sort value is None come last in both directions, in their
    incoming order.
    """
    if not sort.is_active:
        return list(rows)
    present: list[tuple[Any, Any]] = []
    missing: list[Any] = []
    for row in rows:
        value = resolve_path(row, sort.key)
        if value is None:
            missing.append(row)
        else:
            present.append((value, row))
    present.sort(
        key=cmp_to_key(lambda a, b: _compare_values(a[0], b[0])),
        reverse=sort.direction is SortDirection.DESC,
    )
    return [row for _, row in present] + missing


@dataclass
class _FilterEntry:
    rows: Sequence[Any]
    term: str
    fields: tuple[str, ...]
    result: list[Any]


@dataclass
class _SortEntry:
    source: list[Any]
    sort: SortState
    result: list[Any]


class ViewPipeline:
    """Memoized filter -> sort derivation.

    The filter stage is reused while the rows object, the term and the fields
    are unchanged; the sort stage while the filtered list and the sort state
    are unchanged. Rows are compared by identity: passing a new sequence is
    how callers signal new data.
    """

    def __init__(self) -> None:
        self._filter: _FilterEntry | None = None
        self._sort: _SortEntry | None = None

    def filtered(
        self, rows: Sequence[Any], term: str, fields: Sequence[str]
    ) -> list[Any]:
        key_fields = tuple(fields)
        entry = self._filter
        if (
            entry is not None
            and entry.rows is rows
            and entry.term == term
            and entry.fields == key_fields
        ):
            return entry.result
        result = filter_rows(rows, term, key_fields)
        self._filter = _FilterEntry(rows, term, key_fields, result)
        return result

    def derive(
        self,
        rows: Sequence[Any],
        term: str,
        fields: Sequence[str],
        sort: SortState,
    ) -> list[Any]:
        """Return the filtered and sorted view."""
        filtered = self.filtered(rows, term, fields)
        entry = self._sort
        if entry is not None and entry.source is filtered and entry.sort == sort:
            return entry.result
        result = sort_rows(filtered, sort) if sort.is_active else filtered
        logger.debug(
            "Derived table view: %d of %d rows, sort=%s", len(result), len(rows), sort.key
        )
        self._sort = _SortEntry(filtered, sort, result)
        return result
