"""Services package."""

from milk_ledger.services.storage import (
    BackendUnavailableError,
    InMemoryBackend,
    JsonFileBackend,
    KeyValueBackend,
    RecordStore,
    StorageError,
)

__all__ = [
    "BackendUnavailableError",
    "InMemoryBackend",
    "JsonFileBackend",
    "KeyValueBackend",
    "RecordStore",
    "StorageError",
]
