"""Windowing math for virtualized rows."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class VirtualItem:
    index: int
    start: int
    size: int


@dataclass(frozen=True)
class VirtualWindow:
    """Rows to materialize for one scroll position.

    ``total_height`` is the height of the whole list so the scrollbar reflects
    every row, not only the materialized ones.
    """

    items: tuple[VirtualItem, ...]
    total_height: int

    @property
    def indices(self) -> range:
        if not self.items:
            return range(0)
        return range(self.items[0].index, self.items[-1].index + 1)


def compute_window(
    row_count: int,
    row_height: int,
    viewport_height: int,
    scroll_offset: float,
    overscan: int,
) -> VirtualWindow:
    """Return the rows intersecting the viewport, padded by ``overscan``."""
    if row_count <= 0 or row_height <= 0:
        return VirtualWindow(items=(), total_height=0)
    total_height = row_count * row_height
    offset = min(max(scroll_offset, 0), max(total_height - viewport_height, 0))
    first_visible = int(offset // row_height)
    last_visible = math.ceil((offset + max(viewport_height, 0)) / row_height) - 1
    last_visible = max(last_visible, first_visible)
    start = max(0, first_visible - overscan)
    end = min(row_count - 1, last_visible + overscan)
    items = tuple(
        VirtualItem(index=index, start=index * row_height, size=row_height)
        for index in range(start, end + 1)
    )
    return VirtualWindow(items=items, total_height=total_height)


class WindowCalculator:
    """Recompute the window only when one of its inputs changed."""

    def __init__(self) -> None:
        self._key: tuple[int, int, int, float, int] | None = None
        self._window: VirtualWindow | None = None

    def window(
        self,
        row_count: int,
        row_height: int,
        viewport_height: int,
        scroll_offset: float,
        overscan: int,
    ) -> VirtualWindow:
        key = (row_count, row_height, viewport_height, scroll_offset, overscan)
        if self._window is None or key != self._key:
            self._window = compute_window(*key)
            self._key = key
        return self._window
