"""In-memory key-value backend, used by tests and by the 'memory' storage setting."""

from typing import Optional

from milk_ledger.services.storage.interface import KeyValueBackend


class InMemoryBackend(KeyValueBackend):
    """Dictionary-backed storage. Contents are lost when the process exits."""

    def __init__(self, initial: Optional[dict[str, str]] = None):
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def remove(self, key: str) -> None:
        self._data.pop(key, None)

    def keys(self) -> list[str]:
        return list(self._data)
