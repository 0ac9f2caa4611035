"""
Backup & Restore

Exports the full data set as one JSON document and restores it.

Backup format:

    {
      "vendors": [...],
      "milkEntries": [...],
      "monthlySettings": [...],
      "exportedAt": "2024-03-31T18:30:00+00:00"
    }

DESIGN DECISION: Collections are exported and restored as the rows that
are actually stored, not as re-serialized models. Restoring a backup
reproduces storage exactly, including rows the repositories skip on read
and timestamps written by older versions of the app.

CRITICAL: An import is validated completely before anything is written.
A malformed backup leaves existing data untouched. Once validation has
passed, collections are written key by key; there is no transaction
across the three keys.
"""

import json
from datetime import date, datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from milk_ledger.audit import AuditLogger
from milk_ledger.models.audit import AuditEventBuilder
from milk_ledger.models.records import utc_now
from milk_ledger.repositories import (
    MilkEntryRepository,
    MonthlySettingsRepository,
    RecordRepository,
    VendorRepository,
)


VENDORS_FIELD = "vendors"
ENTRIES_FIELD = "milkEntries"
MONTHLY_SETTINGS_FIELD = "monthlySettings"
EXPORTED_AT_FIELD = "exportedAt"


class BackupRow(BaseModel):
    """
    Structural check for one row of a backed-up collection.

    A row must be an object with an id, the key every collection is
    upserted on. Other fields are kept as they are and checked by the
    repositories on read.
    """

    model_config = ConfigDict(extra="allow")

    id: str = Field(..., min_length=1)


_ROWS_ADAPTER = TypeAdapter(list[BackupRow])


class BackupService:
    """Full-data JSON export and import."""

    def __init__(
        self,
        vendors: VendorRepository,
        entries: MilkEntryRepository,
        monthly_settings: MonthlySettingsRepository,
        audit_logger: Optional[AuditLogger] = None,
    ):
        self._collections: dict[str, RecordRepository] = {
            VENDORS_FIELD: vendors,
            ENTRIES_FIELD: entries,
            MONTHLY_SETTINGS_FIELD: monthly_settings,
        }
        self._audit = audit_logger or AuditLogger()

    def export_all(self, exported_at: Optional[datetime] = None) -> str:
        """Serialize all three stored collections plus an export timestamp."""
        exported_at = exported_at or utc_now()

        data = {}
        for field, repository in self._collections.items():
            data[field] = repository.raw_rows()
        data[EXPORTED_AT_FIELD] = exported_at.isoformat()

        self._audit.log(AuditEventBuilder.data_exported(
            {field: len(data[field]) for field in self._collections}
        ))
        return json.dumps(data, ensure_ascii=False)

    def import_all(self, blob: str) -> bool:
        """
        Replace stored collections with the ones in ``blob``.

        Collections missing from the backup, null or otherwise empty
        non-list values (``false``, ``""``) are left as they are. An empty
        list still replaces the stored collection.

        Returns:
            True if every present collection was written, False if the
            backup was rejected or a write failed
        """
        try:
            parsed = self._parse(blob)
        except (ValueError, TypeError) as e:
            self._audit.log(AuditEventBuilder.import_failed(str(e)))
            return False

        success = True
        for field, rows in parsed.items():
            if not self._collections[field].replace_rows(rows):
                success = False

        if success:
            self._audit.log(AuditEventBuilder.data_imported(
                {field: len(rows) for field, rows in parsed.items()}
            ))
        else:
            self._audit.log(AuditEventBuilder.import_failed(
                "backup was valid but not every collection could be written"
            ))
        return success

    def _parse(self, blob: str) -> dict[str, list[dict[str, Any]]]:
        """
        Decode and check the structure of a backup document.

        Raises:
            ValueError: Not JSON, not an object, or a collection is not a
                        list of objects with ids
        """
        data = json.loads(blob)
        if not isinstance(data, dict):
            raise ValueError("Backup must be a JSON object")

        parsed = {}
        for field in self._collections:
            rows = data.get(field)
            if rows is None or (not rows and not isinstance(rows, list)):
                continue
            try:
                _ROWS_ADAPTER.validate_python(rows)
            except ValidationError as e:
                raise ValueError(f"Invalid {field} in backup: {e}") from e
            parsed[field] = rows
        return parsed


def backup_filename(today: Optional[date] = None) -> str:
    """File name for a full backup, e.g. ``mera-doodh-hisab-backup-2024-03-31.json``."""
    today = today or date.today()
    return f"mera-doodh-hisab-backup-{today.isoformat()}.json"
