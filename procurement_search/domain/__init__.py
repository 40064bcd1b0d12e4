"""Domain package — all ORM models are imported here so create_all sees them.

Folder intent:
  buyer.py               — Buyers (names are not unique)
  procurement_record.py  — Procurement records (read-only for the search API)
"""

from procurement_search.domain.buyer import Buyer
from procurement_search.domain.procurement_record import ProcurementRecord

__all__ = [
    "Buyer",
    "ProcurementRecord",
]
