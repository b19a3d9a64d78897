"""Data models for operation metering, responses and stored lists."""

import uuid as uuid_lib
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from gas_ledger.core.sorter import sort_values


def _generate_request_id() -> str:
    """Generate a new UUID for a request scope."""
    return str(uuid_lib.uuid4())


class OperationKind(Enum):
    """Operations that can be performed against the store.

    Each member's value is a ``(cost, forces_paid)`` pair. Costs may be
    negative: a delete refunds part of the gas spent on the write before it.
    """

    DELETE = (-15, False)
    READ = (1, False)
    MODIFY = (5, True)
    WRITE = (20, True)

    @property
    def cost(self) -> int:
        return self.value[0]

    @property
    def forces_paid(self) -> bool:
        """Whether recording this operation makes the request non-free."""
        return self.value[1]


class CacheStatus(Enum):
    """Whether a list record currently holds a valid sorted view."""

    UNCACHED = "uncached"
    CACHED = "cached"


@dataclass
class RequestScope:
    """Per-request gas accumulator.

    Attributes:
        total_cost: Sum of the costs of every recorded operation
        free: False once any paid operation (write/modify) was recorded
        operations: Recorded operations, in order
        request_id: UUID identifying the request in logs
    """

    total_cost: int = 0
    free: bool = True
    operations: list[OperationKind] = field(default_factory=list)
    request_id: str = field(default_factory=_generate_request_id)

    def record(self, *ops: OperationKind) -> "RequestScope":
        """Record operations in order, mutating this scope in place."""
        for op in ops:
            if op.forces_paid:
                self.free = False
            self.total_cost += op.cost
            self.operations.append(op)
        return self

    def to_dict(self) -> dict[str, Any]:
        return {
            "request_id": self.request_id,
            "total_cost": self.total_cost,
            "free": self.free,
            "operations": [op.name for op in self.operations],
        }


@dataclass(frozen=True)
class Response:
    """Final result of a store call: the data plus the gas to pay for it."""

    data: tuple[int, ...] | None
    total_cost: int = 0
    free: bool = True

    def to_dict(self) -> dict[str, Any]:
        return {
            "data": list(self.data) if self.data is not None else None,
            "total_cost": self.total_cost,
            "free": self.free,
        }


@dataclass
class ListRecord:
    """A source list together with its memoized sorted view.

    Keeping both in one entity means a replace cannot leave a stale sorted
    view behind: ``sorted_values`` is set only through ``fill`` and cleared
    by every ``replace``.
    """

    values: tuple[int, ...] = ()
    status: CacheStatus = CacheStatus.UNCACHED
    sorted_values: tuple[int, ...] | None = None

    @classmethod
    def from_values(cls, values: Iterable[int]) -> "ListRecord":
        return cls(values=tuple(values))

    @property
    def is_cached(self) -> bool:
        return self.status is CacheStatus.CACHED

    def replace(self, values: Iterable[int]) -> bool:
        """Overwrite the source list and drop the cache.

        Returns:
            True if a cached sorted view was discarded.
        """
        had_cache = self.is_cached
        self.values = tuple(values)
        self.sorted_values = None
        self.status = CacheStatus.UNCACHED
        return had_cache

    def fill(self) -> tuple[int, ...]:
        """Cache the sorted form of the current source list."""
        self.sorted_values = tuple(sort_values(self.values))
        self.status = CacheStatus.CACHED
        return self.sorted_values
