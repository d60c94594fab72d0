import threading
from typing import Any, Callable


class DatasetCache:
    """Process-lifetime cache of parsed datasets keyed by country code.

    Entries never expire. Population through ``get_or_load`` is serialized so
    a key is loaded at most once; a loader returning ``None`` caches nothing.
    """

    def __init__(self):
        self._store: dict[str, Any] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> Any | None:
        with self._lock:
            return self._store.get(key)

    def set(self, key: str, value: Any) -> None:
        with self._lock:
            self._store[key] = value

    def get_or_load(self, key: str, loader: Callable[[], Any | None]) -> Any | None:
        with self._lock:
            if key in self._store:
                return self._store[key]
            value = loader()
            if value is not None:
                self._store[key] = value
            return value

    def __contains__(self, key: str) -> bool:
        with self._lock:
            return key in self._store

    def __len__(self) -> int:
        with self._lock:
            return len(self._store)

    def clear(self) -> None:
        with self._lock:
            self._store.clear()
