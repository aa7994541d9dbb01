import logging
from collections import defaultdict
from enum import Enum
from typing import Any, Callable

logger = logging.getLogger(__name__)

EventCallback = Callable[[dict[str, Any]], None]


def _event_name(name: str | Enum) -> str:
    return str(name.value) if isinstance(name, Enum) else str(name)


class EventBus:
    """
    Named notification hub between the battle core and the presentation layer

    Consumers subscribe by event name; payloads are plain dicts (ids, numeric
    deltas, type tags) and never carry behavior. Every emitted event is also
    appended to `history`, which headless drivers and tests read back.
    """

    def __init__(self, keep_history: bool = True):
        self._listeners: dict[str, list[EventCallback]] = defaultdict(list)
        self.keep_history = keep_history
        self.history: list[tuple[str, dict[str, Any]]] = []

    def on(self, name: str | Enum, callback: EventCallback) -> None:
        self._listeners[_event_name(name)].append(callback)

    def off(self, name: str | Enum, callback: EventCallback) -> None:
        listeners = self._listeners.get(_event_name(name), [])
        if callback in listeners:
            listeners.remove(callback)

    def emit(self, name: str | Enum, payload: dict[str, Any] | None = None) -> None:
        event_name = _event_name(name)
        data = dict(payload or {})
        if self.keep_history:
            self.history.append((event_name, data))
        logger.debug("emit %s %s", event_name, data)
        for callback in list(self._listeners.get(event_name, [])):
            callback(data)

    def names(self) -> list[str]:
        """Names of all emitted events in order"""
        return [name for name, _ in self.history]

    def payloads(self, name: str | Enum) -> list[dict[str, Any]]:
        event_name = _event_name(name)
        return [data for emitted, data in self.history if emitted == event_name]

    def clear_history(self) -> None:
        self.history.clear()
