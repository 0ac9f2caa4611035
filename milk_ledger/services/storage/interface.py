"""
Abstract Storage Interface

DESIGN DECISION: The ledger persists into a plain key-value namespace.
Each collection (vendors, entries, monthly settings) is one key holding
a JSON-encoded array. Defining the capability as an interface allows us to:
1. Use in-memory storage for testing
2. Keep data on disk as human-readable JSON files
3. Swap in another backend without touching repositories

The interface is intentionally tiny - whole values in, whole values out.
A ``set`` replaces the value for a key in one step, so readers never see
a half-written collection.
"""

from abc import ABC, abstractmethod
from typing import Optional


class KeyValueBackend(ABC):
    """
    Abstract interface for the persistence medium.

    Any storage implementation must implement these methods.
    Implementations MAY raise; the RecordStore absorbs failures.
    """

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """
        Read the value stored under ``key``.

        Returns:
            The stored text, or None if the key is absent

        Raises:
            StorageError: If the medium cannot be read
        """
        pass

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """
        Store ``value`` under ``key``, replacing any previous value.

        Raises:
            StorageError: If the medium cannot be written
        """
        pass

    @abstractmethod
    def remove(self, key: str) -> None:
        """Remove ``key``. Removing an absent key is not an error."""
        pass


class StorageError(Exception):
    """Base exception for storage operations."""
    pass


class BackendUnavailableError(StorageError):
    """The storage medium could not be read or written."""
    pass
