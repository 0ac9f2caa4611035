"""Repositories for the three ledger collections."""

from milk_ledger.repositories.base import RecordRepository
from milk_ledger.repositories.entries import MilkEntryRepository
from milk_ledger.repositories.monthly_settings import MonthlySettingsRepository
from milk_ledger.repositories.vendors import VendorRepository

__all__ = [
    "MilkEntryRepository",
    "MonthlySettingsRepository",
    "RecordRepository",
    "VendorRepository",
]
