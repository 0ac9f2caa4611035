"""
Main Orchestrator for Milk Ledger

This module ties together all the components and defines the write
paths a user interface drives:
1. Add / edit a milk entry (pre-filled from the month's settings)
2. Add / edit / delete a vendor
3. Save the defaults for a month
4. Reports, backups and CSV exports

DESIGN DECISION: The interface layer only ever talks to ``MilkLedger``.
It hands over validated drafts and gets records, reports and export
text back. Storage, statistics and serialization stay behind this facade.
"""

from datetime import date
from typing import Optional

from milk_ledger.audit import AuditLogger, configure_logging
from milk_ledger.config import Settings, get_settings
from milk_ledger.exports import BackupService, export_entries_as_csv
from milk_ledger.models.records import (
    EntryDraft,
    MilkEntry,
    MonthlySettings,
    MonthlySettingsDraft,
    Vendor,
    VendorDraft,
    generate_id,
    utc_now,
)
from milk_ledger.models.stats import VendorWithStats
from milk_ledger.queries import ReportBuilder, compute_vendor_stats, month_of
from milk_ledger.repositories import (
    MilkEntryRepository,
    MonthlySettingsRepository,
    VendorRepository,
)
from milk_ledger.services.storage import (
    InMemoryBackend,
    JsonFileBackend,
    KeyValueBackend,
    RecordStore,
)


class MilkLedger:
    """
    Facade over the ledger's repositories, reports and exports.

    Record-building flows mirror form submission: an existing record
    keeps its id and created_at, every submission gets a fresh
    updated_at, and the object built here is what the caller gets back.
    """

    def __init__(
        self,
        vendors: VendorRepository,
        entries: MilkEntryRepository,
        monthly_settings: MonthlySettingsRepository,
        settings: Optional[Settings] = None,
        audit_logger: Optional[AuditLogger] = None,
    ):
        self.vendors = vendors
        self.entries = entries
        self.monthly_settings = monthly_settings
        self._app_settings = (settings or get_settings()).app
        self.reports = ReportBuilder(entries, vendors)
        self.backup = BackupService(
            vendors, entries, monthly_settings, audit_logger=audit_logger
        )

    # ------------------------------------------------------------------
    # Milk entries
    # ------------------------------------------------------------------

    def entry_defaults(self, today: Optional[date] = None) -> dict:
        """
        Pre-fill values for a new entry.

        Rate and vendor come from the settings of today's month when
        they exist, otherwise from the configured defaults.
        """
        today = today or date.today()
        month_settings = self.monthly_settings.get_by_month(month_of(today))

        rate = self._app_settings.default_rate
        vendor_id = ""
        if month_settings:
            rate = month_settings.default_rate
            vendor_id = month_settings.default_vendor_id

        return {
            "date": today,
            "quantity": self._app_settings.default_quantity,
            "rate": rate,
            "vendor_id": vendor_id,
            "is_paid": False,
            "notes": "",
        }

    def record_entry(
        self,
        draft: EntryDraft,
        existing: Optional[MilkEntry] = None,
    ) -> MilkEntry:
        """Create a new entry, or update ``existing`` with the draft's values."""
        now = utc_now()
        entry = MilkEntry(
            id=existing.id if existing else generate_id(),
            date=draft.date,
            quantity=draft.quantity,
            rate=draft.rate,
            vendor_id=draft.vendor_id,
            is_paid=draft.is_paid,
            notes=draft.notes,
            created_at=existing.created_at if existing else now,
            updated_at=now,
        )
        self.entries.save(entry)
        return entry

    def delete_entry(self, entry_id: str) -> bool:
        return self.entries.delete(entry_id)

    # ------------------------------------------------------------------
    # Vendors
    # ------------------------------------------------------------------

    def save_vendor(
        self,
        draft: VendorDraft,
        existing: Optional[Vendor] = None,
    ) -> Vendor:
        """Create a new vendor, or update ``existing`` with the draft's values."""
        now = utc_now()
        vendor = Vendor(
            id=existing.id if existing else generate_id(),
            name=draft.name,
            default_rate=draft.default_rate,
            created_at=existing.created_at if existing else now,
            updated_at=now,
        )
        self.vendors.save(vendor)
        return vendor

    def delete_vendor(self, vendor_id: str) -> bool:
        """Delete a vendor. Its entries keep the now-dangling vendor id."""
        return self.vendors.delete(vendor_id)

    def vendors_with_stats(self) -> list[VendorWithStats]:
        all_entries = self.entries.get_all()
        return [
            compute_vendor_stats(vendor, all_entries)
            for vendor in self.vendors.get_all()
        ]

    # ------------------------------------------------------------------
    # Monthly settings
    # ------------------------------------------------------------------

    def save_monthly_settings(self, draft: MonthlySettingsDraft) -> MonthlySettings:
        """
        Save the defaults for ``draft.month``.

        Re-saving a month updates the first record stored for it.
        """
        now = utc_now()
        current = self.monthly_settings.get_by_month(draft.month)
        settings = MonthlySettings(
            id=current.id if current else generate_id(),
            month=draft.month,
            default_rate=draft.default_rate,
            default_vendor_id=draft.default_vendor_id,
            created_at=current.created_at if current else now,
            updated_at=now,
        )
        self.monthly_settings.save(settings)
        return settings

    # ------------------------------------------------------------------
    # Exports
    # ------------------------------------------------------------------

    def entries_csv(self, entries: list[MilkEntry]) -> str:
        """CSV for ``entries`` with vendor names resolved from all vendors."""
        return export_entries_as_csv(
            entries,
            self.vendors.get_all(),
            currency_symbol=self._app_settings.currency_symbol,
            date_format=self._app_settings.csv_date_format,
        )

    def export_all(self) -> str:
        return self.backup.export_all()

    def import_all(self, blob: str) -> bool:
        return self.backup.import_all(blob)


def create_backend(settings: Settings) -> KeyValueBackend:
    """Backend selected by the storage settings."""
    storage_settings = settings.storage
    if storage_settings.backend == "memory":
        return InMemoryBackend()
    return JsonFileBackend(
        storage_settings.data_dir,
        write_attempts=storage_settings.write_attempts,
    )


def create_ledger(
    settings: Optional[Settings] = None,
    backend: Optional[KeyValueBackend] = None,
    audit_logger: Optional[AuditLogger] = None,
) -> MilkLedger:
    """
    Factory function to create a fully wired ledger.

    Args:
        settings: Settings to use. Defaults to ``get_settings()``.
        backend: Storage backend. Defaults to the one the settings select.
        audit_logger: Audit logger shared by every component.

    Returns:
        A MilkLedger ready to use
    """
    settings = settings or get_settings()
    app_settings = settings.app
    configure_logging(app_settings.log_level, app_settings.log_json)

    audit_logger = audit_logger or AuditLogger()
    store = RecordStore(backend or create_backend(settings), audit_logger)
    storage_settings = settings.storage

    return MilkLedger(
        vendors=VendorRepository(
            store, storage_settings.vendors_key, audit_logger
        ),
        entries=MilkEntryRepository(
            store, storage_settings.entries_key, audit_logger
        ),
        monthly_settings=MonthlySettingsRepository(
            store, storage_settings.monthly_settings_key, audit_logger
        ),
        settings=settings,
        audit_logger=audit_logger,
    )
