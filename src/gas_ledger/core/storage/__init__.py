"""Storage backends for list records.

- MemoryStorageBackend: In-memory storage, lives as long as the process
"""

from gas_ledger.core.storage.memory import MemoryStorageBackend

__all__ = [
    "MemoryStorageBackend",
]
