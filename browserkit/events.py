"""In-process event sources matching the two listener protocols."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass, field
from typing import Any, Callable, DefaultDict, Iterable

EventListener = Callable[..., Any]


@dataclass(slots=True)
class Event:
    type: str
    detail: Any = None
    target: "EventTarget | None" = field(default=None, repr=False)


class EventTarget:
    """DOM-like target: ``addEventListener`` / ``removeEventListener`` / ``dispatchEvent``.

    Adding the same listener twice for one event type is ignored, as in the DOM.
    """

    def __init__(self, name: str = "") -> None:
        self.name = name
        self._listeners: DefaultDict[str, list[EventListener]] = defaultdict(list)

    def addEventListener(self, type: str, listener: EventListener) -> None:
        listeners = self._listeners[type]
        if listener not in listeners:
            listeners.append(listener)

    def removeEventListener(self, type: str, listener: EventListener) -> None:
        listeners = self._listeners.get(type)
        if listeners and listener in listeners:
            listeners.remove(listener)
            if not listeners:
                del self._listeners[type]

    def dispatchEvent(self, event: Event | str, detail: Any = None) -> Event:
        if isinstance(event, str):
            event = Event(type=event, detail=detail)
        event.target = self
        for listener in list(self._listeners.get(event.type, ())):
            listener(event)
        return event

    def listeners(self, type: str) -> Iterable[EventListener]:
        return tuple(self._listeners.get(type, ()))

    def __repr__(self) -> str:
        return f"EventTarget(name={self.name!r})"


class EventEmitter:
    """Node-like emitter: ``add_listener`` / ``remove_listener`` / ``emit``.

    Listeners may be added more than once; ``remove_listener`` drops the most
    recently added occurrence.
    """

    def __init__(self, name: str = "") -> None:
        self.name = name
        self._listeners: DefaultDict[str, list[EventListener]] = defaultdict(list)

    def add_listener(self, event_name: str, listener: EventListener) -> "EventEmitter":
        self._listeners[event_name].append(listener)
        return self

    on = add_listener

    def remove_listener(self, event_name: str, listener: EventListener) -> "EventEmitter":
        listeners = self._listeners.get(event_name)
        if listeners:
            for index in range(len(listeners) - 1, -1, -1):
                if listeners[index] == listener:
                    del listeners[index]
                    break
            if not listeners:
                del self._listeners[event_name]
        return self

    off = remove_listener

    def emit(self, event_name: str, *args: Any, **kwargs: Any) -> bool:
        listeners = list(self._listeners.get(event_name, ()))
        for listener in listeners:
            listener(*args, **kwargs)
        return bool(listeners)

    def listeners(self, event_name: str) -> Iterable[EventListener]:
        return tuple(self._listeners.get(event_name, ()))

    def listener_count(self, event_name: str) -> int:
        return len(self._listeners.get(event_name, ()))

    def clear(self) -> None:
        self._listeners.clear()

    def __repr__(self) -> str:
        return f"EventEmitter(name={self.name!r})"


__all__ = ["Event", "EventEmitter", "EventListener", "EventTarget"]
