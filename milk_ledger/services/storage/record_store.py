"""
Record Store

Generic load/save of JSON collections on top of a KeyValueBackend.

CRITICAL: Both operations are total. Losing the persistence medium must
never crash the caller:
- ``load`` degrades to the caller's default (absent key, broken JSON,
  unreadable medium)
- ``save`` degrades to a no-op and reports False
Every absorbed failure is written to the audit log.
"""

import json
from typing import Any, Optional, TypeVar

from milk_ledger.audit import AuditLogger
from milk_ledger.models.audit import AuditEventBuilder
from milk_ledger.services.storage.interface import KeyValueBackend


T = TypeVar("T")


class RecordStore:
    """JSON serialization boundary between repositories and the backend."""

    def __init__(
        self,
        backend: KeyValueBackend,
        audit_logger: Optional[AuditLogger] = None,
    ):
        self._backend = backend
        self._audit = audit_logger or AuditLogger()

    @property
    def backend(self) -> KeyValueBackend:
        return self._backend

    def load(self, key: str, default: T) -> Any:
        """
        Return the value persisted under ``key``.

        Returns ``default`` if the key is absent, the stored text is not
        valid JSON, or the backend fails.
        """
        try:
            raw = self._backend.get(key)
            if raw is None:
                return default
            return json.loads(raw)
        except Exception as e:
            self._audit.log(AuditEventBuilder.storage_read_failed(key, str(e)))
            return default

    def save(self, key: str, value: Any) -> bool:
        """
        Serialize ``value`` and persist it under ``key``.

        Returns:
            True if the value was written, False if the write was dropped
        """
        try:
            self._backend.set(key, json.dumps(value, ensure_ascii=False))
            return True
        except Exception as e:
            self._audit.log(AuditEventBuilder.storage_write_failed(key, str(e)))
            return False
