"""Keyed listener registry for window/document-style targets and emitters.

Application code attaches a listener under a caller-chosen key, e.g.
``"window_resize_layout_handle_resize"``. Registering again under the same
``(emitter, event_name, listener_key)`` triple detaches the previous listener
before the new one is installed, and ``unregister`` detaches by key so callers
never have to keep the original callable around.

Entries hold a strong reference to their emitter until every binding on it is
removed. Call :meth:`ListenerRegistry.unregister_all` before discarding an
emitter whose listeners were never unregistered.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterator, Literal, Protocol

from .exceptions import CapabilityError

logger = logging.getLogger(__name__)

Listener = Callable[..., Any]
RegistrySnapshot = Dict[str, Dict[str, Dict[str, Listener]]]
EmitterStyle = Literal["target", "emitter"]

_TARGET_METHODS = (
    ("addEventListener", "removeEventListener"),
    ("add_event_listener", "remove_event_listener"),
)
_EMITTER_METHODS = (
    ("add_listener", "remove_listener"),
    ("addListener", "removeListener"),
)


class EmitterAdapter(Protocol):
    """Uniform subscribe/unsubscribe view over one emitter object."""

    emitter: Any
    style: EmitterStyle

    @property
    def label(self) -> str: ...

    def subscribe(self, event_name: str, listener: Listener) -> None: ...

    def unsubscribe(self, event_name: str, listener: Listener) -> None: ...


@dataclass(slots=True)
class _MethodPairAdapter:
    emitter: Any
    add: Callable[[str, Listener], Any]
    remove: Callable[[str, Listener], Any]

    @property
    def label(self) -> str:
        return emitter_label(self.emitter)

    def subscribe(self, event_name: str, listener: Listener) -> None:
        self.add(event_name, listener)

    def unsubscribe(self, event_name: str, listener: Listener) -> None:
        self.remove(event_name, listener)


@dataclass(slots=True)
class TargetAdapter(_MethodPairAdapter):
    """Adapter for objects exposing ``addEventListener``/``removeEventListener``."""

    style: EmitterStyle = "target"


@dataclass(slots=True)
class ListenerAdapter(_MethodPairAdapter):
    """Adapter for objects exposing ``add_listener``/``remove_listener``."""

    style: EmitterStyle = "emitter"


def _method_pair(obj: Any, candidates) -> tuple[Callable, Callable] | None:
    for add_name, remove_name in candidates:
        add = getattr(obj, add_name, None)
        remove = getattr(obj, remove_name, None)
        if callable(add) and callable(remove):
            return add, remove
    return None


def resolve_emitter(emitter: Any, action: str = "register") -> EmitterAdapter:
    """Return the adapter matching the capability ``emitter`` exposes.

    Target-style methods win when an object exposes both shapes. Raises
    :class:`CapabilityError` when neither shape is available.
    """
    pair = _method_pair(emitter, _TARGET_METHODS)
    if pair is not None:
        return TargetAdapter(emitter, *pair)
    pair = _method_pair(emitter, _EMITTER_METHODS)
    if pair is not None:
        return ListenerAdapter(emitter, *pair)
    raise CapabilityError(action, emitter)


def emitter_label(emitter: Any) -> str:
    name = getattr(emitter, "name", None)
    if not isinstance(name, str) or not name:
        name = type(emitter).__name__
    return f"{name}@{id(emitter):#x}"


@dataclass(frozen=True, slots=True)
class Binding:
    emitter: Any
    event_name: str
    listener_key: str
    listener: Listener


@dataclass(slots=True)
class _EmitterEntry:
    adapter: EmitterAdapter
    events: dict[str, dict[str, Listener]] = field(default_factory=dict)


class ListenerRegistry:
    """Own keyed listener bindings across any number of emitters."""

    def __init__(self) -> None:
        self._entries: dict[int, _EmitterEntry] = {}
        self._lock = threading.RLock()

    def register(
        self,
        emitter: Any,
        event_name: str,
        listener: Listener,
        listener_key: str,
    ) -> RegistrySnapshot:
        """Attach ``listener`` under ``listener_key``, replacing any previous one.

        Returns a snapshot of the whole registry after the insertion.
        """
        adapter = resolve_emitter(emitter, "register")
        with self._lock:
            self._detach(adapter, event_name, listener_key)
            adapter.subscribe(event_name, listener)
            entry = self._entries.get(id(emitter))
            if entry is None:
                entry = self._entries[id(emitter)] = _EmitterEntry(adapter)
            entry.events.setdefault(event_name, {})[listener_key] = listener
            logger.debug(
                "Registered listener '%s' for '%s' on %s.",
                listener_key,
                event_name,
                adapter.label,
            )
            return self._snapshot()

    def unregister(
        self,
        emitter: Any,
        event_name: str,
        listener_key: str,
    ) -> RegistrySnapshot | Literal[False]:
        """Detach the listener stored under ``listener_key``.

        Returns ``False`` without touching anything when no such binding exists.
        """
        adapter = resolve_emitter(emitter, "unregister")
        with self._lock:
            if not self._detach(adapter, event_name, listener_key):
                return False
            return self._snapshot()

    def unregister_all(self, emitter: Any) -> int:
        """Detach every binding held for ``emitter`` and return how many were removed."""
        adapter = resolve_emitter(emitter, "unregister")
        with self._lock:
            entry = self._entries.get(id(emitter))
            if entry is None:
                return 0
            removed = 0
            for event_name, listeners in list(entry.events.items()):
                for listener_key in list(listeners):
                    if self._detach(adapter, event_name, listener_key):
                        removed += 1
            return removed

    def clear(self) -> int:
        """Detach all bindings on all emitters."""
        with self._lock:
            emitters = [entry.adapter.emitter for entry in self._entries.values()]
            return sum(self.unregister_all(emitter) for emitter in emitters)

    def get(self, emitter: Any, event_name: str, listener_key: str) -> Listener | None:
        with self._lock:
            entry = self._entries.get(id(emitter))
            if entry is None:
                return None
            return entry.events.get(event_name, {}).get(listener_key)

    def bindings(self, emitter: Any | None = None) -> list[Binding]:
        with self._lock:
            if emitter is not None:
                entry = self._entries.get(id(emitter))
                entries = [entry] if entry is not None else []
            else:
                entries = list(self._entries.values())
            return [binding for entry in entries for binding in _iter_bindings(entry)]

    def snapshot(self) -> RegistrySnapshot:
        with self._lock:
            return self._snapshot()

    def __len__(self) -> int:
        with self._lock:
            return sum(
                len(listeners)
                for entry in self._entries.values()
                for listeners in entry.events.values()
            )

    def __contains__(self, item: object) -> bool:
        if not isinstance(item, tuple) or len(item) != 3:
            return False
        emitter, event_name, listener_key = item
        return self.get(emitter, event_name, listener_key) is not None

    def _detach(self, adapter: EmitterAdapter, event_name: str, listener_key: str) -> bool:
        entry = self._entries.get(id(adapter.emitter))
        if entry is None:
            return False
        listeners = entry.events.get(event_name)
        if not listeners or listener_key not in listeners:
            return False

        listener = listeners[listener_key]
        # targets keep one subscription per (event, listener), shared by every key holding it
        shared = adapter.style == "target" and any(
            other == listener for key, other in listeners.items() if key != listener_key
        )
        if not shared:
            adapter.unsubscribe(event_name, listener)
        del listeners[listener_key]
        if not listeners:
            del entry.events[event_name]
        if not entry.events:
            del self._entries[id(adapter.emitter)]
        logger.debug(
            "Unregistered listener '%s' for '%s' on %s.",
            listener_key,
            event_name,
            adapter.label,
        )
        return True

    def _snapshot(self) -> RegistrySnapshot:
        return {
            entry.adapter.label: {
                event_name: dict(listeners) for event_name, listeners in entry.events.items()
            }
            for entry in self._entries.values()
        }


def _iter_bindings(entry: _EmitterEntry) -> Iterator[Binding]:
    for event_name, listeners in entry.events.items():
        for listener_key, listener in listeners.items():
            yield Binding(entry.adapter.emitter, event_name, listener_key, listener)


__all__ = [
    "Binding",
    "EmitterAdapter",
    "Listener",
    "ListenerAdapter",
    "ListenerRegistry",
    "RegistrySnapshot",
    "TargetAdapter",
    "emitter_label",
    "resolve_emitter",
]
