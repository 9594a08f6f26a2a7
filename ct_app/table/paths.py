"""Dot-path field access shared by filtering, sorting and cell display."""

from __future__ import annotations

from collections.abc import Set
from typing import Any, Mapping, Sequence

# Values whose attributes are never row fields ("x".title is a method, not data)
_PLAIN_TYPES = (str, bytes, bytearray, int, float, complex, bool, Sequence, Set)


def _step(current: Any, part: str) -> Any:
    if isinstance(current, Mapping):
        return current.get(part)
    if isinstance(current, Sequence) and not isinstance(current, (str, bytes, bytearray)):
        if part.isdigit():
            index = int(part)
            return current[index] if index < len(current) else None
        # namedtuple rows keep their field names
        if not hasattr(current, "_fields"):
            return None
    elif isinstance(current, _PLAIN_TYPES):
        return None
    value = getattr(current, part, None)
    if callable(value):
        return None
    return value


def resolve_path(row: Any, path: str | None) -> Any:
    """Return the value at ``path`` inside ``row`` or None.

    ``"address.city"`` walks ``row["address"]["city"]`` and ``"items.0.name"``
    indexes into lists. Mappings are read by key, user objects (dataclasses,
    namespaces) by attribute; scalars and methods never yield a value. A
    missing or None intermediate yields None; nothing here raises for absent
    data.
    """
    if row is None or not path:
        return None
    current: Any = row
    for part in path.split("."):
        if current is None:
            return None
        current = _step(current, part)
    return current


def stringify(value: Any) -> str:
    """Render a resolved value the way search matching and plain cells see it."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (list, tuple)):
        return ",".join(stringify(item) for item in value)
    return str(value)
