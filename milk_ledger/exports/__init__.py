"""Export package: JSON backup/restore and CSV rendering."""

from milk_ledger.exports.backup import BackupService, backup_filename
from milk_ledger.exports.csv_export import (
    UNKNOWN_VENDOR,
    export_entries_as_csv,
    format_number,
)

__all__ = [
    "BackupService",
    "UNKNOWN_VENDOR",
    "backup_filename",
    "export_entries_as_csv",
    "format_number",
]
