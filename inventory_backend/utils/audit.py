import logging

from inventory_backend.database import InventoryDB
from inventory_backend.models.history import HistoryEntry

logger = logging.getLogger(__name__)

def log_stock_change(db: InventoryDB, *, product_id, old_stock, new_stock, changed_by=None) -> HistoryEntry:
    entry = db.history.record(product_id, old_stock, new_stock, changed_by or "Unknown")
    logger.info(f"Stock of product {product_id} changed {old_stock} -> {new_stock} by {entry.changed_by}")
    return entry
