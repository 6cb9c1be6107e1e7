"""Attribute-only events and a keyed store for them."""

from __future__ import annotations

import contextlib
import threading
from typing import Any, Callable, ContextManager

from pcfnozzle.attributes import Attributes


class Nrevent:
    """An event described entirely by its attributes."""

    def __init__(self, attributes: Attributes) -> None:
        self.attributes = attributes
        self._map_lock: threading.RLock | None = None
        self._sender: Callable[["Nrevent"], Any] | None = None

    def _guard(self) -> ContextManager[Any]:
        return self._map_lock if self._map_lock is not None else contextlib.nullcontext()

    def signature(self) -> str:
        return self.attributes.signature()

    def set_sender(self, sender: Callable[["Nrevent"], Any]) -> None:
        self._sender = sender

    def send(self) -> None:
        """Pass this event to its sender."""
        if self._sender is None:
            raise RuntimeError("event has no sender")
        self._sender(self)

    def harvest(self) -> dict[str, Any]:
        """Marshal the event while holding its map's lock."""
        with self._guard():
            return self.marshal()

    def marshal(self) -> dict[str, Any]:
        return self.attributes.marshal()


class NreventMap:
    """Thread-safe store of events keyed by signature."""

    def __init__(self) -> None:
        self._collection: dict[str, Nrevent] = {}
        self._lock = threading.RLock()

    def drain(self) -> list[Nrevent]:
        """Remove and return all events."""
        with self._lock:
            drained = list(self._collection.values())
            self._collection = {}
        return drained

    def for_each(self, fn: Callable[[Nrevent], Any]) -> int:
        """Call ``fn`` on every event; return how many there were."""
        with self._lock:
            for event in self._collection.values():
                fn(event)
            return len(self._collection)

    def get(self, signature: str) -> Nrevent | None:
        with self._lock:
            return self._collection.get(signature)

    def put(self, event: Nrevent) -> None:
        event._map_lock = self._lock
        with self._lock:
            self._collection[event.signature()] = event

    def __len__(self) -> int:
        return len(self._collection)