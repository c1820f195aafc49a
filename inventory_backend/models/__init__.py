from inventory_backend.models.product import Product
from inventory_backend.models.history import HistoryEntry

__all__ = ["Product", "HistoryEntry"]
