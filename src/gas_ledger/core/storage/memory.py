"""In-memory storage backend implementation.

Holds list records for the lifetime of the process only.
"""

import threading

from gas_ledger.core.models import ListRecord


class MemoryStorageBackend:
    """In-memory storage backend using Python dict.

    Thread-safe for individual calls. ``get`` hands back the live record;
    callers that mutate it are expected to hold their own lock across the
    read-modify-write.
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._data: dict[str, ListRecord] = {}

    def get(self, key: str) -> ListRecord | None:
        with self._lock:
            return self._data.get(key)

    def set(self, key: str, record: ListRecord) -> None:
        with self._lock:
            self._data[key] = record

    def exists(self, key: str) -> bool:
        with self._lock:
            return key in self._data

    def clear(self) -> None:
        with self._lock:
            self._data.clear()

    def size(self) -> int:
        with self._lock:
            return len(self._data)

    def close(self) -> None:
        pass
