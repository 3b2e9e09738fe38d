"""Conversion between plain Python data and value trees."""

from __future__ import annotations

from typing import Any

from .values import Empty, Value, VList, VMapping, VScalar, _Empty


def to_value(obj: Any) -> Value:
    """Convert JSON-like Python data to a Value.

    - ``None`` → Empty
    - ``str`` → VScalar
    - ``bool`` → VScalar("true" / "false")
    - integral numbers → VScalar without a decimal point
    - ``dict`` → VMapping (keys stringified, order kept)
    - ``list`` / ``tuple`` → VList
    - Values pass through unchanged; anything else goes through ``str``.
    """
    if isinstance(obj, (VScalar, VList, VMapping, _Empty)):
        return obj
    if obj is None:
        return Empty
    if isinstance(obj, str):
        return VScalar(obj)
    if isinstance(obj, bool):
        return VScalar("true" if obj else "false")
    if isinstance(obj, (int, float)):
        if isinstance(obj, float) and obj.is_integer():
            return VScalar(str(int(obj)))
        return VScalar(str(obj))
    if isinstance(obj, dict):
        return VMapping({str(k): to_value(v) for k, v in obj.items()})
    if isinstance(obj, (list, tuple)):
        return VList([to_value(v) for v in obj])
    return VScalar(str(obj))


def to_mapping(obj: Any) -> VMapping:
    """Like :func:`to_value` but always returns a VMapping."""
    value = to_value(obj)
    if isinstance(value, VMapping):
        return value
    return VMapping()


def to_python(value: Value) -> Any:
    """Convert a Value to ``str`` / ``list`` / ``dict`` / ``None``."""
    if isinstance(value, VScalar):
        return value.value
    if isinstance(value, VList):
        return [to_python(v) for v in value.items]
    if isinstance(value, VMapping):
        return {k: to_python(v) for k, v in value.entries.items()}
    if isinstance(value, _Empty):
        return None
    raise TypeError(f"not a Value: {type(value).__name__}")


# ---------------------------------------------------------------------------
# Canonical form
# ---------------------------------------------------------------------------

def normalize(value: VMapping) -> VMapping:
    """Return the tree that a serialize/parse pass turns *value* into.

    Empty values and empty containers disappear, plain list items become
    ``{text: ...}`` records and multiline text is trimmed line by line.
    """
    entries: dict[str, Value] = {}
    for key, item in value.entries.items():
        norm = _normalize_entry(item)
        if norm is not None:
            entries[key] = norm
    return VMapping(entries)


def _normalize_entry(item: Value) -> Value | None:
    if isinstance(item, VScalar):
        return VScalar(_normalize_text(item.value))
    if isinstance(item, VList):
        records = [r for r in (_normalize_record(e) for e in item.items) if r]
        return VList(records) if records else None
    if isinstance(item, VMapping):
        nested = normalize(item)
        return nested if nested.entries else None
    return None


def _normalize_record(element: Value) -> VMapping | None:
    if isinstance(element, VScalar):
        return VMapping({"text": VScalar(element.value)})
    if isinstance(element, VMapping):
        fields = {
            k: VScalar(v.value)
            for k, v in element.entries.items()
            if isinstance(v, VScalar)
        }
        return VMapping(fields) if fields else None
    return None


def _normalize_text(text: str) -> str:
    if "\n" not in text:
        return text
    lines = [line.strip() for line in text.split("\n")]
    return "\n".join(line for line in lines if not line.startswith("#")).strip()
