"""Bounded retry with a fixed delay between attempts."""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Awaitable, Callable
from typing import TypeVar

T = TypeVar("T")

logger = logging.getLogger(__name__)


def _check_attempts(max_attempts: int) -> None:
    if max_attempts < 1:
        raise ValueError("max_attempts must be at least 1")


def retry(
    operation: Callable[[], T],
    *,
    max_attempts: int = 3,
    delay: float = 0.5,
    label: str | None = None,
) -> T:
    """Call ``operation`` until it succeeds, at most ``max_attempts`` times.

    The exception from the final attempt is re-raised unchanged.
    """
    _check_attempts(max_attempts)
    label = label or getattr(operation, "__name__", repr(operation))
    attempt = 0
    while True:
        attempt += 1
        try:
            return operation()
        except Exception as exc:
            if attempt >= max_attempts:
                logger.warning(
                    "Operation '%s' failed after %s attempts: %s", label, attempt, exc
                )
                raise
            logger.info(
                "Operation '%s' failed (attempt %s/%s); retrying in %.1f s.",
                label,
                attempt,
                max_attempts,
                delay,
            )
            time.sleep(delay)


async def retry_async(
    operation: Callable[[], Awaitable[T]],
    *,
    max_attempts: int = 3,
    delay: float = 0.5,
    label: str | None = None,
) -> T:
    """Async counterpart of :func:`retry`; waits with ``asyncio.sleep``."""
    _check_attempts(max_attempts)
    label = label or getattr(operation, "__name__", repr(operation))
    attempt = 0
    while True:
        attempt += 1
        try:
            return await operation()
        except Exception as exc:
            if attempt >= max_attempts:
                logger.warning(
                    "Operation '%s' failed after %s attempts: %s", label, attempt, exc
                )
                raise
            logger.info(
                "Operation '%s' failed (attempt %s/%s); retrying in %.1f s.",
                label,
                attempt,
                max_attempts,
                delay,
            )
            await asyncio.sleep(delay)


__all__ = ["retry", "retry_async"]
