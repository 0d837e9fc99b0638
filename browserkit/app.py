"""Top level container wiring BrowserKit helpers together."""

from __future__ import annotations

from typing import Any, Awaitable, Callable, TypeVar

from .config import BrowserKitConfig
from .crypto import CryptoManager
from .events import EventTarget
from .listeners import ListenerRegistry
from .retry import retry, retry_async
from .storage.base import KeyValueBackend, StorageAccessor
from .storage.memory import InMemoryBackend
from .storage.sqlalchemy import AsyncSQLAlchemyStorage

T = TypeVar("T")


class BrowserKit:
    """Central dependency container used by applications and tests."""

    def __init__(
        self,
        config: BrowserKitConfig | None = None,
        *,
        listeners: ListenerRegistry | None = None,
        window: Any | None = None,
        document: Any | None = None,
        local_backend: KeyValueBackend | None = None,
        session_backend: KeyValueBackend | None = None,
    ) -> None:
        self.config = config or BrowserKitConfig()
        self.listeners = listeners if listeners is not None else ListenerRegistry()
        self.window = window if window is not None else EventTarget("window")
        self.document = document if document is not None else EventTarget("document")

        self._sqlalchemy_storage: AsyncSQLAlchemyStorage | None = None
        self.local_storage = StorageAccessor(self._wire_local(local_backend), area="local")
        self.session_storage = StorageAccessor(
            session_backend if session_backend is not None else InMemoryBackend(),
            area="session",
        )

        crypto = self.config.crypto
        self.crypto = (
            CryptoManager(crypto.key, crypto.iv, crypto.suffix) if crypto.enabled else None
        )

    def _wire_local(self, backend: KeyValueBackend | None) -> KeyValueBackend:
        if backend is not None:
            return backend

        storage = self.config.storage
        if storage.backend == "memory":
            return InMemoryBackend()
        if storage.backend == "sqlalchemy":
            dsn = storage.resolve_dsn()
            if not dsn:
                raise ValueError("SQLAlchemy backend requires a DSN")
            self._sqlalchemy_storage = AsyncSQLAlchemyStorage(dsn, echo=storage.echo_sql)
            return self._sqlalchemy_storage.backend("local")
        raise ValueError(f"Unsupported storage backend {storage.backend}")

    def retry(self, operation: Callable[[], T], **kwargs: Any) -> T:
        kwargs.setdefault("max_attempts", self.config.retry.max_attempts)
        kwargs.setdefault("delay", self.config.retry.delay)
        return retry(operation, **kwargs)

    async def retry_async(self, operation: Callable[[], Awaitable[T]], **kwargs: Any) -> T:
        kwargs.setdefault("max_attempts", self.config.retry.max_attempts)
        kwargs.setdefault("delay", self.config.retry.delay)
        return await retry_async(operation, **kwargs)

    def snapshot(self) -> dict[str, Any]:
        """Export current state for debugging."""
        return {
            "storage": self.config.storage.backend,
            "crypto": self.crypto is not None,
            "listeners": self.listeners.snapshot(),
        }

    async def init_backend(self) -> None:
        """Initialize storage backend resources (e.g., database tables)."""
        if self._sqlalchemy_storage:
            await self._sqlalchemy_storage.init_models()

    async def close(self) -> None:
        """Detach every registered listener and release storage resources."""
        self.listeners.clear()
        if self._sqlalchemy_storage:
            await self._sqlalchemy_storage.dispose()
