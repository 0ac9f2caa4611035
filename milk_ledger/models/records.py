"""
Core Data Models for Milk Ledger

These models define the schemas for every record the ledger persists.
They are designed to:
1. Enforce the pricing invariants (positive quantity and rate) at runtime
2. Keep the established camelCase wire names in storage and exports
3. Never store derived values (an entry's amount is always recomputed)

DESIGN DECISION: Python code uses snake_case attributes while the
persisted JSON uses camelCase keys (``defaultRate``, ``vendorId``,
``isPaid``...). Existing backups stay importable and exports stay
readable by the previous version of the app.
"""

import datetime as dt
from typing import Optional
from uuid import uuid4

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
)
from pydantic.alias_generators import to_camel


MONTH_KEY_PATTERN = r"^\d{4}-(0[1-9]|1[0-2])$"


def generate_id() -> str:
    """Create a new opaque record identifier."""
    return uuid4().hex


def utc_now() -> dt.datetime:
    return dt.datetime.now(dt.timezone.utc)


def month_key(year: int, month: int) -> str:
    """Canonical ``YYYY-MM`` key for a calendar month."""
    return f"{year:04d}-{month:02d}"


class LedgerModel(BaseModel):
    """Base for every model that is serialized with camelCase keys."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
        extra="ignore",
    )

    def to_storage_dict(self) -> dict:
        """Plain JSON-compatible dict using the wire (camelCase) names."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class LedgerRecord(LedgerModel):
    """
    A persisted record.

    Identity is the opaque ``id``; two records with the same id are the
    same record regardless of their other fields.
    """

    id: str = Field(
        default_factory=generate_id,
        min_length=1,
        description="Opaque unique identifier"
    )
    created_at: dt.datetime = Field(
        default_factory=utc_now,
        description="When the record was first created"
    )
    updated_at: dt.datetime = Field(
        default_factory=utc_now,
        description="Last update timestamp"
    )


# =============================================================================
# PERSISTED RECORDS
# =============================================================================

class Vendor(LedgerRecord):
    """A milk supplier with a default per-liter rate."""

    name: str = Field(
        ...,
        min_length=1,
        description="Vendor/dairy name"
    )
    default_rate: float = Field(
        ...,
        gt=0,
        description="Rate per liter suggested for this vendor"
    )


class MilkEntry(LedgerRecord):
    """
    One recorded milk delivery.

    Several entries may share the same date (more than one delivery or
    vendor per day). ``vendor_id`` is a reference that is NOT enforced:
    entries keep it after the vendor is deleted.
    """

    date: dt.date = Field(
        ...,
        description="Calendar day of the delivery"
    )
    quantity: float = Field(
        ...,
        gt=0,
        description="Quantity in liters"
    )
    rate: float = Field(
        ...,
        gt=0,
        description="Price per liter"
    )
    vendor_id: str = Field(
        ...,
        description="ID of the vendor that delivered"
    )
    is_paid: bool = Field(
        default=False,
        description="Has this delivery been paid for?"
    )
    notes: Optional[str] = Field(
        default=None,
        description="Free-text notes"
    )

    @property
    def amount(self) -> float:
        """Cost of the delivery. Derived, never stored."""
        return self.quantity * self.rate

    @property
    def month_key(self) -> str:
        return month_key(self.date.year, self.date.month)


class MonthlySettings(LedgerRecord):
    """
    Per-month defaults used to pre-fill new entries.

    Callers expect one record per month, but nothing enforces it:
    lookups return the first match in storage order.
    """

    month: str = Field(
        ...,
        pattern=MONTH_KEY_PATTERN,
        description="Month key in YYYY-MM format"
    )
    default_rate: float = Field(
        ...,
        gt=0,
        description="Rate per liter for new entries in this month"
    )
    default_vendor_id: str = Field(
        default="",
        description="Vendor pre-selected for new entries in this month"
    )


# =============================================================================
# DRAFTS - validated user input, before it becomes a record
# =============================================================================

class EntryDraft(LedgerModel):
    """Values submitted when adding or editing a milk entry."""

    date: dt.date
    quantity: float = Field(
        ...,
        ge=0.1,
        le=100,
        description="Quantity must be between 0.1 and 100 liters"
    )
    rate: float = Field(
        ...,
        ge=1,
        le=1000,
        description="Rate must be between 1 and 1000 per liter"
    )
    vendor_id: str = Field(
        ...,
        min_length=1,
        description="A vendor must be selected"
    )
    is_paid: bool = False
    notes: Optional[str] = None

    @field_validator('notes')
    @classmethod
    def blank_notes_to_none(cls, v: Optional[str]) -> Optional[str]:
        return v or None


class VendorDraft(LedgerModel):
    """Values submitted when adding or editing a vendor."""

    name: str = Field(
        ...,
        min_length=2,
        max_length=50,
        description="Name must be 2 to 50 characters"
    )
    default_rate: float = Field(
        ...,
        ge=1,
        le=1000,
        description="Rate must be between 1 and 1000 per liter"
    )


class MonthlySettingsDraft(LedgerModel):
    """Values submitted from the monthly settings form."""

    month: str = Field(
        ...,
        pattern=MONTH_KEY_PATTERN,
        description="Month key in YYYY-MM format"
    )
    default_rate: float = Field(
        ...,
        ge=1,
        le=1000,
    )
    default_vendor_id: str = Field(
        ...,
        min_length=1,
        description="A vendor must be selected"
    )

    @field_validator('month', mode='before')
    @classmethod
    def month_from_date(cls, v):
        """Accept any date inside the month as well as a YYYY-MM key."""
        if isinstance(v, dt.date):
            return month_key(v.year, v.month)
        return v
