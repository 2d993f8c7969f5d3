from threading import Lock


class CacheContext:
    """Process-local memoization of registry and audience field lookups."""

    def __init__(self):
        self._lock = Lock()
        self._values = {}

    def get_or_compute(self, key, compute):
        with self._lock:
            if key in self._values:
                return self._values[key]
        value = compute()
        with self._lock:
            self._values.setdefault(key, value)
            return self._values[key]

    def clear(self):
        with self._lock:
            self._values.clear()

    def __len__(self):
        return len(self._values)
