"""Testing utilities for BrowserKit."""

from .factory import PayloadFactory, UserAgentFactory
from .fixtures import kit_fixture, memory_kit
from .recorder import RecordingListener

__all__ = [
    "PayloadFactory",
    "RecordingListener",
    "UserAgentFactory",
    "kit_fixture",
    "memory_kit",
]
