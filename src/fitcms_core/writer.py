"""Writer: serialize a value tree back to the YAML subset."""

from __future__ import annotations

import logging

from .scalars import BLOCK_MARKER, INDENT, is_multiline, quote
from .values import Value, VList, VMapping, VScalar, _Empty

logger = logging.getLogger(__name__)


def serialize(value: VMapping, indent_level: int = 0) -> str:
    """Serialize *value* in insertion order.

    - ``Empty`` entries are skipped.
    - Lists become ``key:`` plus one ``- `` line per element; records put
      their first field on the ``- `` line and the rest 4 columns deeper.
    - Nested mappings recurse one level deeper.
    - Multiline scalars use the ``key: |`` block form.
    - Every other scalar is written ``key: "value"``. Embedded quotes are not
      escaped.
    """
    spaces = INDENT * indent_level
    out: list[str] = []

    for key, item in value.entries.items():
        if isinstance(item, _Empty):
            continue
        if isinstance(item, VList):
            out.append(f"{spaces}{key}:\n")
            for element in item.items:
                out.extend(_list_element(element, spaces + INDENT))
        elif isinstance(item, VMapping):
            out.append(f"{spaces}{key}:\n")
            out.append(serialize(item, indent_level + 1))
        elif isinstance(item, VScalar):
            out.extend(_scalar(key, item.value, spaces))
        else:
            raise TypeError(f"cannot serialize {type(item).__name__} under {key!r}")

    return "".join(out)


def _scalar(key: str, text: str, spaces: str) -> list[str]:
    if not is_multiline(text):
        return [f"{spaces}{key}: {quote(text)}\n"]
    lines = [f"{spaces}{key}: {BLOCK_MARKER}\n"]
    for line in text.split("\n"):
        lines.append(f"{spaces}{INDENT}{line}\n")
    return lines


def _list_element(element: Value, spaces: str) -> list[str]:
    if isinstance(element, VScalar):
        return [f"{spaces}- {quote(element.value)}\n"]

    if isinstance(element, VMapping):
        fields = [
            (k, v) for k, v in element.entries.items() if _is_record_field(k, v)
        ]
        lines: list[str] = []
        for i, (k, v) in enumerate(fields):
            lead = "- " if i == 0 else INDENT
            lines.append(f"{spaces}{lead}{k}: {quote(v.value)}\n")
        return lines

    if isinstance(element, (VList, _Empty)):
        logger.debug("Skipping unsupported list element %r", element)
        return []

    raise TypeError(f"cannot serialize list element {type(element).__name__}")


def _is_record_field(key: str, value: Value) -> bool:
    if isinstance(value, VScalar):
        return True
    if not isinstance(value, _Empty):
        logger.debug("Skipping non-scalar record field %r", key)
    return False
