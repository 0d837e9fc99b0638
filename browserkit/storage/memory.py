"""In-memory storage backend for BrowserKit."""

from __future__ import annotations

from typing import Sequence

from .base import KeyValueBackend


class InMemoryBackend(KeyValueBackend):
    def __init__(self) -> None:
        self._items: dict[str, str] = {}

    async def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    async def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    async def remove_item(self, key: str) -> None:
        self._items.pop(key, None)

    async def clear(self) -> None:
        self._items.clear()

    async def keys(self) -> Sequence[str]:
        return list(self._items)

    def dump(self) -> dict[str, str]:
        return dict(self._items)
