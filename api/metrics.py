"""Process-wide counter of file server hits."""
import threading

from flask import current_app

EXTENSION_KEY = "hit_counter"


class HitCounter:
    """An integer with atomic increment, read and reset."""

    def __init__(self, initial: int = 0):
        self._lock = threading.Lock()
        self._value = initial

    def increment(self) -> int:
        with self._lock:
            self._value += 1
            return self._value

    def value(self) -> int:
        with self._lock:
            return self._value

    def reset(self) -> None:
        with self._lock:
            self._value = 0


def init_app(app) -> HitCounter:
    counter = HitCounter()
    app.extensions[EXTENSION_KEY] = counter
    return counter


def get_hit_counter() -> HitCounter:
    return current_app.extensions[EXTENSION_KEY]
