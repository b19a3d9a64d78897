"""Exceptions raised by the contract store."""


class LedgerError(Exception):
    """Base class for all gas ledger errors."""


class MissingSourceDataError(LedgerError, LookupError):
    """Raised when neither a cached sorted list nor its source list exists.

    The store seeds the source list on construction and every replace
    repopulates it, so this only surfaces if the backing storage was
    cleared underneath the store.
    """

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"no {key} in storage")
