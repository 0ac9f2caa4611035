"""
Milk Ledger - Source Package

Personal bookkeeping for daily milk deliveries: vendors with default
pricing, one entry per delivery, monthly statistics and exports.

DESIGN PRINCIPLES:
1. Storage failures never crash the caller
2. Derived values (amounts, totals) are always recomputed, never stored
3. A rejected import changes nothing
4. Storage layer is swappable
"""

__version__ = "1.0.0"
__author__ = "Milk Ledger Team"
