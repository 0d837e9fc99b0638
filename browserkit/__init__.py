"""BrowserKit public API."""

from .app import BrowserKit
from .config import BrowserKitConfig
from .events import Event, EventEmitter, EventTarget
from .exceptions import BrowserKitError, CapabilityError
from .listeners import Binding, ListenerRegistry, resolve_emitter

__all__ = [
    "Binding",
    "BrowserKit",
    "BrowserKitConfig",
    "BrowserKitError",
    "CapabilityError",
    "Event",
    "EventEmitter",
    "EventTarget",
    "ListenerRegistry",
    "resolve_emitter",
]
