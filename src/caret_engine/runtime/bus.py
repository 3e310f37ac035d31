"""Minimal synchronous event bus used to publish cursor and selection changes."""

from __future__ import annotations

from typing import Callable, Dict

Subscriber = Callable[[object], None]


class EventBus:
    """Fan out named events to subscribers in registration order."""

    def __init__(self) -> None:
        self._subscribers: Dict[str, list[Subscriber]] = {}

    def subscribe(self, event: str, callback: Subscriber) -> None:
        self._subscribers.setdefault(event, []).append(callback)

    def unsubscribe(self, event: str, callback: Subscriber) -> bool:
        callbacks = self._subscribers.get(event)
        if not callbacks or callback not in callbacks:
            return False
        callbacks.remove(callback)
        if not callbacks:
            self._subscribers.pop(event, None)
        return True

    def emit(self, event: str, payload: object | None = None) -> None:
        for callback in list(self._subscribers.get(event, [])):
            callback(payload)


__all__ = ["EventBus", "Subscriber"]
