"""
Gas Ledger

A toy smart contract that meters the gas of every operation performed
against it and memoizes the sorted view of its integer list.

Features:
- Per-request gas accounting with a free/paid flag
- Operation costs kept in a single lookup table (OperationKind)
- Sorted view cached until the next replace of the source list
- Thread-safe in-memory storage backend
"""

from gas_ledger.core.config import LedgerSettings, StoreConfig
from gas_ledger.core.exceptions import LedgerError, MissingSourceDataError
from gas_ledger.core.ledger import begin_request, record_operations, to_response
from gas_ledger.core.models import (
    CacheStatus,
    ListRecord,
    OperationKind,
    RequestScope,
    Response,
)
from gas_ledger.core.sorter import sort_values
from gas_ledger.core.store import ContractStore

__version__ = "0.1.0"
__all__ = [
    "ContractStore",
    "StoreConfig",
    "LedgerSettings",
    "LedgerError",
    "MissingSourceDataError",
    "begin_request",
    "record_operations",
    "to_response",
    "CacheStatus",
    "ListRecord",
    "OperationKind",
    "RequestScope",
    "Response",
    "sort_values",
]
