"""
CSV export of milk entries.

Format (one header row, one row per entry, oldest first):

    Date,Quantity (L),Rate (₹),Amount (₹),Vendor,Paid,Notes
    01/03/24,2,50,100.00,Fresh Dairy,Yes,
"""

from milk_ledger.models.records import MilkEntry, Vendor


UNKNOWN_VENDOR = "Unknown"

_NEEDS_QUOTING = (",", '"', "\n", "\r")


def format_number(value: float) -> str:
    """Shortest plain rendering: ``2`` rather than ``2.0``, ``2.5`` as is."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def quote(text: str) -> str:
    """Wrap in double quotes, doubling any embedded quote."""
    return '"' + text.replace('"', '""') + '"'


def _plain_field(text: str) -> str:
    if any(ch in text for ch in _NEEDS_QUOTING):
        return quote(text)
    return text


def csv_header(currency_symbol: str = "₹") -> str:
    return (
        f"Date,Quantity (L),Rate ({currency_symbol}),"
        f"Amount ({currency_symbol}),Vendor,Paid,Notes"
    )


def export_entries_as_csv(
    entries: list[MilkEntry],
    vendors: list[Vendor],
    currency_symbol: str = "₹",
    date_format: str = "%x",
) -> str:
    """
    Render ``entries`` as CSV text.

    Args:
        entries: Entries to export, in any order
        vendors: The full vendor set, used to resolve vendor names.
                 Entries pointing at a missing vendor show "Unknown".
        currency_symbol: Shown in the Rate and Amount column headers
        date_format: strftime format for the Date column

    Returns:
        CSV text ending with a newline
    """
    vendor_names = {vendor.id: vendor.name for vendor in vendors}

    lines = [csv_header(currency_symbol)]
    for entry in sorted(entries, key=lambda e: e.date):
        vendor_name = vendor_names.get(entry.vendor_id) or UNKNOWN_VENDOR
        lines.append(",".join([
            entry.date.strftime(date_format),
            format_number(entry.quantity),
            format_number(entry.rate),
            f"{entry.amount:.2f}",
            _plain_field(vendor_name),
            "Yes" if entry.is_paid else "No",
            quote(entry.notes) if entry.notes else "",
        ]))

    return "\n".join(lines) + "\n"
