"""Configuration models for BrowserKit."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Literal

from .exceptions import ConfigError


StorageBackend = Literal["memory", "sqlalchemy"]

_TRUTHY = {"1", "true", "yes"}


@dataclass(slots=True)
class StorageConfig:
    """Configure where the local storage area is persisted."""

    backend: StorageBackend = "memory"
    dsn: str | None = None
    echo_sql: bool = False

    def resolve_dsn(self) -> str | None:
        if self.dsn:
            return self.dsn
        if self.backend == "sqlalchemy":
            return "sqlite+aiosqlite:///./browserkit.db"
        return None


@dataclass(slots=True)
class RetryConfig:
    """Defaults for :func:`browserkit.retry.retry`."""

    max_attempts: int = 3
    delay: float = 0.5


@dataclass(slots=True)
class CryptoConfig:
    """Raw key material; derived keys are computed by CryptoManager."""

    key: str | None = None
    iv: str | None = None
    suffix: str = "0"

    @property
    def enabled(self) -> bool:
        return bool(self.key and self.iv)


@dataclass(slots=True)
class BrowserKitConfig:
    """Top-level configuration container."""

    storage: StorageConfig = field(default_factory=StorageConfig)
    retry: RetryConfig = field(default_factory=RetryConfig)
    crypto: CryptoConfig = field(default_factory=CryptoConfig)
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "BrowserKitConfig":
        """Create config from environment variables prefixed with BROWSERKIT_."""
        prefix = "BROWSERKIT_"
        backend = os.getenv(f"{prefix}STORAGE_BACKEND", "memory").lower()
        if backend not in {"memory", "sqlalchemy"}:
            raise ConfigError(f"Unsupported storage backend '{backend}'")

        storage = StorageConfig(
            backend=backend,  # type: ignore[arg-type]
            dsn=os.getenv(f"{prefix}STORAGE_DSN") or None,
            echo_sql=os.getenv(f"{prefix}STORAGE_ECHO_SQL", "false").lower() in _TRUTHY,
        )
        retry = RetryConfig(
            max_attempts=_parse_number(f"{prefix}RETRY_MAX_ATTEMPTS", "3", int),
            delay=_parse_number(f"{prefix}RETRY_DELAY", "0.5", float),
        )
        crypto = CryptoConfig(
            key=os.getenv(f"{prefix}CRYPTO_KEY") or None,
            iv=os.getenv(f"{prefix}CRYPTO_IV") or None,
            suffix=os.getenv(f"{prefix}CRYPTO_SUFFIX", "0") or "0",
        )
        return cls(
            storage=storage,
            retry=retry,
            crypto=crypto,
            log_level=os.getenv(f"{prefix}LOG_LEVEL", "INFO").upper(),
        )


def _parse_number(variable: str, default: str, kind: type):
    raw = os.getenv(variable, default)
    try:
        return kind(raw)
    except ValueError as exc:
        raise ConfigError(f"Invalid value for {variable}: {raw!r}") from exc
