# inventory_backend/models/history.py
from dataclasses import dataclass
from datetime import datetime

# One observed stock change. `product_id` is a weak reference:
# entries outlive the product they describe.
@dataclass(frozen=True)
class HistoryEntry:
    id: int
    product_id: int
    old_stock: int
    new_stock: int
    changed_by: str
    timestamp: datetime
