"""
Audit Models for Milk Ledger

Every change to the ledger (and every storage failure that was
absorbed instead of raised) produces an audit event. Events go to the
structured log so a user can reconstruct what happened to their data.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, Field


class AuditEventType(str, Enum):
    """Types of events we audit."""
    # Vendors
    VENDOR_SAVED = "vendor_saved"
    VENDOR_DELETED = "vendor_deleted"

    # Milk entries
    ENTRY_SAVED = "entry_saved"
    ENTRY_DELETED = "entry_deleted"

    # Monthly settings
    MONTHLY_SETTINGS_SAVED = "monthly_settings_saved"
    MONTHLY_SETTINGS_DELETED = "monthly_settings_deleted"

    # Backup & restore
    DATA_EXPORTED = "data_exported"
    DATA_IMPORTED = "data_imported"
    IMPORT_FAILED = "import_failed"

    # Storage
    STORAGE_READ_FAILED = "storage_read_failed"
    STORAGE_WRITE_FAILED = "storage_write_failed"
    MALFORMED_RECORD_SKIPPED = "malformed_record_skipped"


class AuditSeverity(str, Enum):
    """Severity level for audit events."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class AuditEvent(BaseModel):
    """
    A single audit event.

    This is the core unit of our audit trail.
    """

    event_id: UUID = Field(
        default_factory=uuid4,
        description="Unique event identifier"
    )
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="When the event occurred (UTC)"
    )

    event_type: AuditEventType
    severity: AuditSeverity = AuditSeverity.INFO

    # Context - what record is this about?
    entity_type: Optional[str] = Field(
        default=None,
        description="Type of record (e.g., 'vendor', 'entry', 'collection')"
    )
    entity_id: Optional[str] = None

    description: str = Field(
        ...,
        max_length=500,
        description="Human-readable description of what happened"
    )
    details: dict[str, Any] = Field(default_factory=dict)
    error_message: Optional[str] = None

    def to_log_dict(self) -> dict:
        """Convert to a dictionary suitable for structured logging."""
        return {
            "event_id": str(self.event_id),
            "timestamp": self.timestamp.isoformat(),
            "event_type": self.event_type.value,
            "severity": self.severity.value,
            "entity_type": self.entity_type,
            "entity_id": self.entity_id,
            "description": self.description,
            "details": self.details,
            "error_message": self.error_message,
        }


class AuditEventBuilder:
    """
    Helper class to build audit events with common patterns.

    Usage:
        event = AuditEventBuilder.record_saved("vendor", vendor.id, created=True)
        event = AuditEventBuilder.storage_read_failed(key, error)

    Collection keys go in ``entity_id`` only, never in ``description``,
    so storage events stay within the description length limit.
    """

    _SAVED = {
        "vendor": AuditEventType.VENDOR_SAVED,
        "entry": AuditEventType.ENTRY_SAVED,
        "monthly_settings": AuditEventType.MONTHLY_SETTINGS_SAVED,
    }
    _DELETED = {
        "vendor": AuditEventType.VENDOR_DELETED,
        "entry": AuditEventType.ENTRY_DELETED,
        "monthly_settings": AuditEventType.MONTHLY_SETTINGS_DELETED,
    }

    @staticmethod
    def record_saved(
        entity_type: str,
        record_id: str,
        created: bool,
    ) -> AuditEvent:
        action = "created" if created else "updated"
        return AuditEvent(
            event_type=AuditEventBuilder._SAVED[entity_type],
            entity_type=entity_type,
            entity_id=record_id,
            description=f"{entity_type.replace('_', ' ').capitalize()} {action}",
            details={"created": created},
        )

    @staticmethod
    def record_deleted(entity_type: str, record_id: str) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventBuilder._DELETED[entity_type],
            entity_type=entity_type,
            entity_id=record_id,
            description=f"{entity_type.replace('_', ' ').capitalize()} deleted",
        )

    @staticmethod
    def data_exported(counts: dict[str, int]) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.DATA_EXPORTED,
            entity_type="collection",
            description="Full data set exported",
            details=counts,
        )

    @staticmethod
    def data_imported(counts: dict[str, int]) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.DATA_IMPORTED,
            entity_type="collection",
            description=f"Imported {', '.join(counts) or 'nothing'}",
            details=counts,
        )

    @staticmethod
    def import_failed(error_message: str) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.IMPORT_FAILED,
            severity=AuditSeverity.WARNING,
            entity_type="collection",
            description="Import rejected, existing data left untouched",
            error_message=error_message,
        )

    @staticmethod
    def storage_read_failed(key: str, error_message: str) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.STORAGE_READ_FAILED,
            severity=AuditSeverity.ERROR,
            entity_type="collection",
            entity_id=key,
            description="Could not read collection, using default",
            error_message=error_message,
        )

    @staticmethod
    def storage_write_failed(key: str, error_message: str) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.STORAGE_WRITE_FAILED,
            severity=AuditSeverity.ERROR,
            entity_type="collection",
            entity_id=key,
            description="Could not write collection, change not persisted",
            error_message=error_message,
        )

    @staticmethod
    def malformed_record_skipped(
        key: str,
        position: int,
        error_message: str,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.MALFORMED_RECORD_SKIPPED,
            severity=AuditSeverity.WARNING,
            entity_type="collection",
            entity_id=key,
            description=f"Skipped malformed record #{position}",
            details={"position": position},
            error_message=error_message,
        )
