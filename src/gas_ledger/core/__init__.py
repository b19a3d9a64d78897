"""Core components for gas metering and the contract store."""

from gas_ledger.core.config import LedgerSettings, StoreConfig, get_settings
from gas_ledger.core.exceptions import LedgerError, MissingSourceDataError
from gas_ledger.core.ledger import begin_request, record_operations, to_response
from gas_ledger.core.models import (
    CacheStatus,
    ListRecord,
    OperationKind,
    RequestScope,
    Response,
)
from gas_ledger.core.sorter import is_sorted, sort_values
from gas_ledger.core.store import ContractStore

__all__ = [
    "ContractStore",
    "StoreConfig",
    "LedgerSettings",
    "get_settings",
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
    "is_sorted",
    "sort_values",
]
