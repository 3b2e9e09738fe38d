"""Value types for the content codec."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union


@dataclass(slots=True)
class VScalar:
    value: str

    def __str__(self) -> str:
        return self.value


@dataclass(slots=True)
class VList:
    items: list["Value"] = field(default_factory=list)

    def __str__(self) -> str:
        return "[" + ", ".join(str(v) for v in self.items) + "]"

    def __len__(self) -> int:
        return len(self.items)


@dataclass(slots=True)
class VMapping:
    """Ordered ``key -> Value`` table; also used for list records."""

    entries: dict[str, "Value"] = field(default_factory=dict)

    def __str__(self) -> str:
        return "{" + ", ".join(f"{k}: {v}" for k, v in self.entries.items()) + "}"

    def __len__(self) -> int:
        return len(self.entries)

    def __contains__(self, key: object) -> bool:
        return key in self.entries

    def get(self, key: str) -> "Value":
        return self.entries.get(key, Empty)

    def text(self, key: str, default: str = "") -> str:
        """Return the scalar stored under *key*, or *default*."""
        v = self.entries.get(key)
        if isinstance(v, VScalar):
            return v.value
        return default


class _Empty:
    """Singleton for null / absent values."""

    _instance: "_Empty | None" = None

    def __new__(cls) -> "_Empty":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "Empty"

    def __bool__(self) -> bool:
        return False

    def __str__(self) -> str:
        return ""


Empty = _Empty()

Value = Union[VScalar, VList, VMapping, _Empty]
