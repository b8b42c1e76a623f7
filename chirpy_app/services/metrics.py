import threading


class HitCounter:
    """
    Process-wide count of requests served from /app.

    Sync handlers run on a threadpool, so every access goes through a lock.
    Not persisted: a restart starts again at zero.
    """

    def __init__(self):
        self._hits = 0
        self._lock = threading.Lock()

    def increment(self) -> int:
        with self._lock:
            self._hits += 1
            return self._hits

    def load(self) -> int:
        with self._lock:
            return self._hits

    def reset(self) -> None:
        with self._lock:
            self._hits = 0
