"""Vendor repository."""

from typing import Optional

from milk_ledger.audit import AuditLogger
from milk_ledger.models.records import Vendor
from milk_ledger.repositories.base import RecordRepository
from milk_ledger.services.storage import RecordStore


class VendorRepository(RecordRepository[Vendor]):
    """
    Milk suppliers.

    Deleting a vendor does not touch the entries that reference it.
    """

    entity_type = "vendor"

    def __init__(
        self,
        store: RecordStore,
        key: str,
        audit_logger: Optional[AuditLogger] = None,
    ):
        super().__init__(store, key, Vendor, audit_logger)

    def name_lookup(self) -> dict[str, str]:
        """Map of vendor id to vendor name."""
        return {vendor.id: vendor.name for vendor in self.get_all()}
