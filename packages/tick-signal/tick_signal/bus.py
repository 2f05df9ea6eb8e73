"""In-memory pub/sub event bus with per-tick flush semantics."""
from __future__ import annotations

from typing import Any, Callable

Handler = Callable[[str, dict[str, Any]], None]


class SignalBus:
    """Queues published signals and delivers them on ``flush()``.

    Handlers run in subscription order. Signals published while a flush is
    delivering are held for the next flush.
    """

    def __init__(self) -> None:
        self._subscribers: dict[str, list[Handler]] = {}
        self._queue: list[tuple[str, dict[str, Any]]] = []

    def subscribe(self, signal_name: str, handler: Handler) -> None:
        self._subscribers.setdefault(signal_name, []).append(handler)

    def publish(self, signal_name: str, **data: Any) -> None:
        self._queue.append((signal_name, data))

    def flush(self) -> None:
        snapshot = self._queue
        self._queue = []
        for signal_name, data in snapshot:
            for handler in list(self._subscribers.get(signal_name, ())):
                handler(signal_name, data)
