"""
Storage Services Package

Provides the key-value backend interface, its implementations
(in-memory and JSON files on disk) and the RecordStore built on top.
"""

from milk_ledger.services.storage.interface import (
    BackendUnavailableError,
    KeyValueBackend,
    StorageError,
)
from milk_ledger.services.storage.json_files import JsonFileBackend
from milk_ledger.services.storage.memory import InMemoryBackend
from milk_ledger.services.storage.record_store import RecordStore

__all__ = [
    # Interface
    "KeyValueBackend",
    # Exceptions
    "BackendUnavailableError",
    "StorageError",
    # Implementations
    "InMemoryBackend",
    "JsonFileBackend",
    "RecordStore",
]
