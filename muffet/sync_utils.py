"""Small thread-safe building blocks."""

from __future__ import annotations

import queue
import threading
from typing import Any, Callable


class Cache:
    """A cache where only the first caller of a key computes its value."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._values: dict[str, Any] = {}
        self._pending: dict[str, threading.Event] = {}

    def load_or_store(self, key: str) -> tuple[Any, Callable[[Any], None] | None]:
        """Return ``(value, None)`` if cached, else ``(None, store)`` for the first caller.

        Later callers of a key being computed wait until ``store`` is called.
        """
        with self._lock:
            if key in self._values:
                return self._values[key], None
            event = self._pending.get(key)
            if event is None:
                event = self._pending[key] = threading.Event()
                owner = True
            else:
                owner = False

        if not owner:
            event.wait()
            return self._values.get(key), None

        def store(value: Any) -> None:
            with self._lock:
                self._values[key] = value
            event.set()

        return None, store


class ConcurrentStringSet:
    """A thread-safe set of strings."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._items: set[str] = set()

    def add(self, s: str) -> bool:
        """Add a string and return whether it was already present."""
        with self._lock:
            present = s in self._items
            self._items.add(s)
            return present


class Semaphore:
    """A counting semaphore whose number of holders can be inspected."""

    def __init__(self, capacity: int) -> None:
        self._slots: queue.Queue[bool] = queue.Queue(maxsize=capacity)

    def request(self) -> None:
        self._slots.put(True)

    def release(self) -> None:
        self._slots.get()

    def __len__(self) -> int:
        return self._slots.qsize()

    def __enter__(self) -> Semaphore:
        self.request()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.release()


_STOP = object()


class DaemonManager:
    """Runs functions in background threads until all of them have finished."""

    def __init__(self, capacity: int) -> None:
        self._daemons: queue.Queue[Any] = queue.Queue(maxsize=capacity)
        self._lock = threading.Lock()
        self._running = 0

    def add(self, f: Callable[[], None]) -> None:
        """Schedule a function, blocking while the queue is full."""
        with self._lock:
            self._running += 1

        def daemon() -> None:
            try:
                f()
            finally:
                with self._lock:
                    self._running -= 1
                    finished = self._running == 0
                if finished:
                    self._daemons.put(_STOP)

        self._daemons.put(daemon)

    def run(self) -> None:
        """Start scheduled functions and wait until every one has finished."""
        with self._lock:
            if self._running == 0:
                return
        while (daemon := self._daemons.get()) is not _STOP:
            threading.Thread(target=daemon, daemon=True).start()

    def __len__(self) -> int:
        return self._daemons.qsize()