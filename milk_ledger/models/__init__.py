"""
Data Models Package

This package contains all Pydantic models used in Milk Ledger.
All data flowing through the system must conform to these schemas.
"""

from milk_ledger.models.records import (
    EntryDraft,
    LedgerModel,
    LedgerRecord,
    MilkEntry,
    MonthlySettings,
    MonthlySettingsDraft,
    Vendor,
    VendorDraft,
    generate_id,
    month_key,
    utc_now,
)
from milk_ledger.models.stats import (
    ChartPoint,
    DashboardSummary,
    MonthlyStats,
    Report,
    VendorWithStats,
)
from milk_ledger.models.audit import (
    AuditEvent,
    AuditEventBuilder,
    AuditEventType,
    AuditSeverity,
)

__all__ = [
    # Records
    "LedgerModel",
    "LedgerRecord",
    "MilkEntry",
    "MonthlySettings",
    "Vendor",
    # Drafts
    "EntryDraft",
    "MonthlySettingsDraft",
    "VendorDraft",
    # Derived
    "ChartPoint",
    "DashboardSummary",
    "MonthlyStats",
    "Report",
    "VendorWithStats",
    # Audit
    "AuditEvent",
    "AuditEventBuilder",
    "AuditEventType",
    "AuditSeverity",
    # Helpers
    "generate_id",
    "month_key",
    "utc_now",
]
