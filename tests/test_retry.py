from unittest.mock import AsyncMock, Mock

import pytest

from browserkit.retry import retry, retry_async


def test_retry_returns_first_success(monkeypatch):
    sleeps = []
    monkeypatch.setattr("browserkit.retry.time.sleep", sleeps.append)
    operation = Mock(side_effect=[OSError("down"), OSError("down"), "ok"])

    assert retry(operation, max_attempts=3, delay=0.25) == "ok"
    assert operation.call_count == 3
    assert sleeps == [0.25, 0.25]


def test_retry_reraises_last_failure(monkeypatch):
    monkeypatch.setattr("browserkit.retry.time.sleep", lambda delay: None)
    operation = Mock(side_effect=[ValueError("first"), ValueError("last")])

    with pytest.raises(ValueError, match="last"):
        retry(operation, max_attempts=2)
    assert operation.call_count == 2


def test_retry_single_attempt_does_not_sleep(monkeypatch):
    def fail_sleep(delay):
        raise AssertionError("should not sleep")

    monkeypatch.setattr("browserkit.retry.time.sleep", fail_sleep)
    with pytest.raises(KeyError):
        retry(Mock(side_effect=KeyError("x")), max_attempts=1)


def test_retry_rejects_non_positive_attempts():
    with pytest.raises(ValueError):
        retry(lambda: 1, max_attempts=0)


@pytest.mark.asyncio()
async def test_retry_async_retries_until_success(monkeypatch):
    delays = []

    async def fake_sleep(delay: float) -> None:
        delays.append(delay)

    monkeypatch.setattr("browserkit.retry.asyncio.sleep", fake_sleep)
    operation = AsyncMock(side_effect=[ConnectionError("reset"), 7])

    assert await retry_async(operation, max_attempts=3, delay=0.1) == 7
    assert operation.await_count == 2
    assert delays == [0.1]


@pytest.mark.asyncio()
async def test_retry_async_exhaustion_logs_warning(monkeypatch, caplog):
    async def fake_sleep(delay: float) -> None:
        return None

    monkeypatch.setattr("browserkit.retry.asyncio.sleep", fake_sleep)
    operation = AsyncMock(side_effect=TimeoutError("slow"))

    with pytest.raises(TimeoutError):
        await retry_async(operation, max_attempts=2, label="fetch")
    assert operation.await_count == 2
    assert "Operation 'fetch' failed after 2 attempts" in caplog.text
