"""Pytest fixtures for BrowserKit."""

from __future__ import annotations

import pytest

from ..app import BrowserKit
from ..config import BrowserKitConfig


@pytest.fixture()
def memory_kit() -> BrowserKit:
    return BrowserKit(BrowserKitConfig())


def kit_fixture(**kwargs) -> BrowserKit:
    """Helper for ad-hoc tests where pytest is not available."""
    config = BrowserKitConfig(**kwargs)
    return BrowserKit(config)
