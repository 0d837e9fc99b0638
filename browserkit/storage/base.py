"""Storage abstractions behind the local/session storage accessors."""

from __future__ import annotations

import json
from typing import Any, Literal, Protocol, Sequence

StorageArea = Literal["local", "session"]


class KeyValueBackend(Protocol):
    async def get_item(self, key: str) -> str | None:
        ...

    async def set_item(self, key: str, value: str) -> None:
        ...

    async def remove_item(self, key: str) -> None:
        ...

    async def clear(self) -> None:
        ...

    async def keys(self) -> Sequence[str]:
        ...


class StorageAccessor:
    """JSON-aware wrapper mirroring ``localStorage`` read/write conventions.

    Strings are stored verbatim, ``None`` is stored as an empty string and any
    other value is stored as JSON. Reads decode JSON when possible and fall back
    to the raw text; missing or empty entries read back as ``None``.
    """

    def __init__(self, backend: KeyValueBackend, *, area: StorageArea = "local") -> None:
        self.backend = backend
        self.area = area

    async def get(self, key: str) -> Any:
        raw = await self.backend.get_item(key)
        if not raw:
            return None
        try:
            return json.loads(raw)
        except json.JSONDecodeError:
            return raw

    async def set(self, key: str, data: Any) -> None:
        await self.backend.set_item(key, encode_value(data))

    async def remove(self, key: str) -> None:
        await self.backend.remove_item(key)

    async def clear(self) -> None:
        await self.backend.clear()

    async def keys(self) -> Sequence[str]:
        return await self.backend.keys()


def encode_value(data: Any) -> str:
    if data is None:
        return ""
    if isinstance(data, str):
        return data
    return json.dumps(data, ensure_ascii=False)
