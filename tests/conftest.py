"""
Pytest configuration and shared fixtures.

Everything runs against InMemoryBackend; no test touches the real
data directory.
"""

from datetime import date

import pytest

from milk_ledger.audit import AuditLogger
from milk_ledger.config import Settings, StorageSettings
from milk_ledger.models import MilkEntry, MonthlySettings, Vendor
from milk_ledger.orchestrator import create_ledger
from milk_ledger.repositories import (
    MilkEntryRepository,
    MonthlySettingsRepository,
    VendorRepository,
)
from milk_ledger.services.storage import InMemoryBackend, RecordStore


class RecordingLogger:
    """Stands in for a structlog logger and keeps every call."""

    def __init__(self):
        self.records: list[tuple[str, dict]] = []

    def debug(self, event, **kw):
        self.records.append(("debug", kw))

    def info(self, event, **kw):
        self.records.append(("info", kw))

    def warning(self, event, **kw):
        self.records.append(("warning", kw))

    def error(self, event, **kw):
        self.records.append(("error", kw))

    def event_types(self) -> list[str]:
        return [kw["event_type"] for _, kw in self.records]


@pytest.fixture
def log_sink():
    return RecordingLogger()


@pytest.fixture
def audit_logger(log_sink):
    return AuditLogger(log_sink)


@pytest.fixture
def backend():
    return InMemoryBackend()


@pytest.fixture
def store(backend, audit_logger):
    return RecordStore(backend, audit_logger)


@pytest.fixture
def storage_settings():
    return StorageSettings()


@pytest.fixture
def vendor_repo(store, storage_settings, audit_logger):
    return VendorRepository(store, storage_settings.vendors_key, audit_logger)


@pytest.fixture
def entry_repo(store, storage_settings, audit_logger):
    return MilkEntryRepository(store, storage_settings.entries_key, audit_logger)


@pytest.fixture
def settings_repo(store, storage_settings, audit_logger):
    return MonthlySettingsRepository(
        store, storage_settings.monthly_settings_key, audit_logger
    )


@pytest.fixture
def ledger(backend, audit_logger):
    return create_ledger(settings=Settings(), backend=backend, audit_logger=audit_logger)


@pytest.fixture
def make_entry():
    """Factory for MilkEntry records with sensible defaults."""

    def _make(
        day: date,
        quantity: float = 1.0,
        rate: float = 50.0,
        vendor_id: str = "v1",
        is_paid: bool = False,
        **kwargs,
    ) -> MilkEntry:
        return MilkEntry(
            date=day,
            quantity=quantity,
            rate=rate,
            vendor_id=vendor_id,
            is_paid=is_paid,
            **kwargs,
        )

    return _make


@pytest.fixture
def make_vendor():
    def _make(vendor_id: str = "v1", name: str = "Fresh Dairy", default_rate: float = 50.0) -> Vendor:
        return Vendor(id=vendor_id, name=name, default_rate=default_rate)

    return _make


@pytest.fixture
def make_monthly_settings():
    def _make(month: str = "2024-03", default_rate: float = 55.0, default_vendor_id: str = "v1", **kwargs) -> MonthlySettings:
        return MonthlySettings(
            month=month,
            default_rate=default_rate,
            default_vendor_id=default_vendor_id,
            **kwargs,
        )

    return _make
