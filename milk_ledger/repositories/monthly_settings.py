"""Monthly settings repository."""

from typing import Optional

from milk_ledger.audit import AuditLogger
from milk_ledger.models.records import MonthlySettings
from milk_ledger.repositories.base import RecordRepository
from milk_ledger.services.storage import RecordStore


class MonthlySettingsRepository(RecordRepository[MonthlySettings]):
    """
    Per-month entry defaults.

    KNOWN ISSUE: one record per month is expected but not enforced at
    write time. If duplicates exist, ``get_by_month`` returns the first
    one in storage order.
    """

    entity_type = "monthly_settings"

    def __init__(
        self,
        store: RecordStore,
        key: str,
        audit_logger: Optional[AuditLogger] = None,
    ):
        super().__init__(store, key, MonthlySettings, audit_logger)

    def get_by_month(self, month_key: str) -> Optional[MonthlySettings]:
        for settings in self.get_all():
            if settings.month == month_key:
                return settings
        return None
