"""Thread-safe generator of message ids."""

import threading


class SafeID:
    """Hands out consecutive integer ids, safe to share between threads."""

    def __init__(self, start_id=0):
        self._next_id = start_id
        self._lock = threading.Lock()

    def next(self):
        """Return the next id."""
        with self._lock:
            current = self._next_id
            self._next_id += 1
            return current