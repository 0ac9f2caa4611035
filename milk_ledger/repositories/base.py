"""
Base repository for the three ledger collections.

Each collection lives under one key as a JSON array. There is no caching:
every call re-reads and re-parses the whole collection, and every write
persists the whole collection back.
"""

from typing import Generic, Optional, Type, TypeVar

from pydantic import ValidationError

from milk_ledger.audit import AuditLogger
from milk_ledger.models.audit import AuditEventBuilder
from milk_ledger.models.records import LedgerRecord, utc_now
from milk_ledger.services.storage import RecordStore


RecordType = TypeVar("RecordType", bound=LedgerRecord)


class RecordRepository(Generic[RecordType]):
    """
    Upsert-by-id collection of ledger records.

    Writes operate on the stored rows as-is, so rows this version cannot
    parse are skipped on read but never dropped by a save or delete.
    """

    entity_type: str = "record"

    def __init__(
        self,
        store: RecordStore,
        key: str,
        model: Type[RecordType],
        audit_logger: Optional[AuditLogger] = None,
    ):
        self._store = store
        self._key = key
        self._model = model
        self._audit = audit_logger or AuditLogger()

    @property
    def key(self) -> str:
        return self._key

    def get_all(self) -> list[RecordType]:
        """Every parseable record, in storage order."""
        records = []
        for position, row in enumerate(self._load_rows()):
            try:
                records.append(self._model.model_validate(row))
            except ValidationError as e:
                self._audit.log(
                    AuditEventBuilder.malformed_record_skipped(
                        self._key, position, str(e)
                    )
                )
        return records

    def get_by_id(self, record_id: str) -> Optional[RecordType]:
        for record in self.get_all():
            if record.id == record_id:
                return record
        return None

    def save(self, record: RecordType) -> RecordType:
        """
        Insert or replace ``record`` by id.

        A replaced record keeps its position and is stored with a fresh
        ``updated_at``. The caller's object is returned unchanged, so on
        update its ``updated_at`` differs from the stored one.
        """
        rows = self._load_rows()
        created = True
        for index, row in enumerate(rows):
            if isinstance(row, dict) and row.get("id") == record.id:
                stamped = record.model_copy(update={"updated_at": utc_now()})
                rows[index] = stamped.to_storage_dict()
                created = False
                break
        else:
            rows.append(record.to_storage_dict())

        self._store.save(self._key, rows)
        self._audit.log(
            AuditEventBuilder.record_saved(self.entity_type, record.id, created)
        )
        return record

    def delete(self, record_id: str) -> bool:
        """
        Remove the record with ``record_id``.

        Returns:
            True if something was removed (and persisted), False otherwise
        """
        rows = self._load_rows()
        remaining = [
            row for row in rows
            if not (isinstance(row, dict) and row.get("id") == record_id)
        ]
        if len(remaining) == len(rows):
            return False

        self._store.save(self._key, remaining)
        self._audit.log(AuditEventBuilder.record_deleted(self.entity_type, record_id))
        return True

    def replace_all(self, records: list[RecordType]) -> bool:
        """Overwrite the whole collection with ``records``."""
        return self.replace_rows([record.to_storage_dict() for record in records])

    def raw_rows(self) -> list:
        """
        The stored rows exactly as persisted, including rows ``get_all`` skips.

        Used by backup export so a restore reproduces storage unchanged.
        """
        return self._load_rows()

    def replace_rows(self, rows: list) -> bool:
        """Overwrite the whole collection with already-serialized rows."""
        return self._store.save(self._key, rows)

    def _load_rows(self) -> list:
        rows = self._store.load(self._key, [])
        if not isinstance(rows, list):
            self._audit.log(
                AuditEventBuilder.storage_read_failed(
                    self._key, f"expected a JSON array, got {type(rows).__name__}"
                )
            )
            return []
        return rows
