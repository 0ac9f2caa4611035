"""Milk entry repository."""

from typing import Optional

from milk_ledger.audit import AuditLogger
from milk_ledger.models.records import MilkEntry, month_key
from milk_ledger.repositories.base import RecordRepository
from milk_ledger.services.storage import RecordStore


class MilkEntryRepository(RecordRepository[MilkEntry]):
    """Recorded deliveries, in the order they were first saved."""

    entity_type = "entry"

    def __init__(
        self,
        store: RecordStore,
        key: str,
        audit_logger: Optional[AuditLogger] = None,
    ):
        super().__init__(store, key, MilkEntry, audit_logger)

    def get_for_month(self, year: int, month: int) -> list[MilkEntry]:
        """
        Entries whose date falls in the given calendar month.

        Matches on the ``YYYY-MM`` prefix of the canonical ``YYYY-MM-DD``
        date, so the month is zero-padded before comparing.
        """
        prefix = month_key(year, month)
        return [
            entry for entry in self.get_all()
            if entry.date.isoformat().startswith(prefix)
        ]
