from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Generic, Iterable, Optional, TypeVar

K = TypeVar("K")
V = TypeVar("V")


@dataclass
class Registry(Generic[K, V]):
    """Minimal ordered registry mapping keys to values.

    Typical usage:
        REG = Registry[str, FileFormat]()

        replaced = REG.put("tmx", fmt)
        fmt = REG.try_get("tmx")
        REG.unregister("tmx")

    Insertion order is kept; putting an existing key replaces the value in place.
    """

    _items: Dict[K, V] = field(default_factory=dict)

    def put(self, key: K, value: V) -> Optional[V]:
        """Store ``value`` under ``key``; return the value it replaced, if any."""
        previous = self._items.get(key)
        self._items[key] = value
        return previous

    def unregister(self, key: K) -> Optional[V]:
        return self._items.pop(key, None)

    def try_get(self, key: K, default: Optional[V] = None) -> Optional[V]:
        return self._items.get(key, default)

    def keys(self) -> Iterable[K]:
        return self._items.keys()

    def values(self) -> Iterable[V]:
        return self._items.values()

    def clear(self) -> None:
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)
