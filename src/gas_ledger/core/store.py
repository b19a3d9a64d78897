"""Contract store with gas metering and a memoized sorted view."""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable
from typing import Any

from gas_ledger.core.config import StoreConfig
from gas_ledger.core.exceptions import MissingSourceDataError
from gas_ledger.core.ledger import record_operations, to_response
from gas_ledger.core.models import ListRecord, OperationKind, RequestScope, Response
from gas_ledger.core.storage.memory import MemoryStorageBackend

logger = logging.getLogger(__name__)


class ContractStore:
    """A toy smart contract holding one integer list.

    Every call records the operations it performs into the caller's
    RequestScope and returns a Response carrying the scope's totals.

    Gas per call:
        replace:     WRITE + DELETE            = 20 - 15 = 5
        read_sorted: READ (+ WRITE on a miss)  = 1 or 21

    The sorted view is computed on the first read after a replace and
    served from cache afterwards, so a request that only reads a cached
    list stays free.

    Example:
        store = ContractStore()
        scope = begin_request()
        store.replace(scope, [2, 1, 3])
        res = store.read_sorted(scope)
        # res.data == (1, 2, 3), res.total_cost == 26, res.free is False
    """

    def __init__(
        self,
        config: StoreConfig | None = None,
        storage: MemoryStorageBackend | None = None,
    ) -> None:
        self.config = config or StoreConfig()
        self._storage = storage if storage is not None else MemoryStorageBackend()
        self._lock = threading.RLock()
        self._stats = {"replaces": 0, "cache_hits": 0, "cache_misses": 0}

        if not self._storage.exists(self.config.source_key):
            self._storage.set(
                self.config.source_key,
                ListRecord.from_values(self.config.default_values),
            )

    @property
    def storage(self) -> MemoryStorageBackend:
        return self._storage

    def replace(self, scope: RequestScope | None, values: Iterable[int]) -> Response:
        """Overwrite the source list and invalidate the sorted view.

        WRITE and DELETE are both recorded even when there was no cached
        view to delete. The response carries no data.
        """
        values = tuple(values)
        with self._lock:
            record = self._storage.get(self.config.source_key)
            if record is None:
                record = ListRecord.from_values(values)
                self._storage.set(self.config.source_key, record)
                dropped = False
            else:
                dropped = record.replace(values)
            self._stats["replaces"] += 1
            scope = record_operations(scope, OperationKind.WRITE, OperationKind.DELETE)

        logger.info(
            "replaced %s with %d values (cache dropped: %s)",
            self.config.source_key,
            len(values),
            dropped,
        )
        return to_response(scope, None)

    def read_sorted(self, scope: RequestScope | None) -> Response:
        """Read the sorted list, sorting and caching it on a miss.

        Raises:
            MissingSourceDataError: If the source list is missing from storage.
        """
        with self._lock:
            scope = record_operations(scope, OperationKind.READ)
            record = self._storage.get(self.config.source_key)
            if record is None:
                raise MissingSourceDataError(self.config.source_key)

            if record.is_cached:
                self._stats["cache_hits"] += 1
                logger.debug("sorted list served from cache")
            else:
                record.fill()
                self._stats["cache_misses"] += 1
                scope = record_operations(scope, OperationKind.WRITE)
                logger.debug("sorted list computed and cached")

            return to_response(scope, record.sorted_values)

    def snapshot(self) -> dict[str, list[int]]:
        """Key/value view of the stored lists.

        The sorted key is present only while the sorted view is cached.
        """
        with self._lock:
            record = self._storage.get(self.config.source_key)
            if record is None:
                return {}
            view = {self.config.source_key: list(record.values)}
            if record.is_cached and record.sorted_values is not None:
                view[self.config.sorted_key] = list(record.sorted_values)
            return view

    def stats(self) -> dict[str, Any]:
        """Get store statistics.

        Reports replace and cache hit/miss counters, the current cache
        status, the length of the source list (``size``) and the number of
        records in the backing storage (``records``).
        """
        with self._lock:
            record = self._storage.get(self.config.source_key)
            return {
                **self._stats,
                "cache_status": record.status.value if record else None,
                "size": len(record.values) if record else 0,
                "records": self._storage.size(),
            }

    def close(self) -> None:
        """Clean up resources."""
        self._storage.close()

    def __enter__(self) -> "ContractStore":
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()
        return None
