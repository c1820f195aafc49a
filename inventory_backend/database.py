# inventory_backend/database.py
import logging
import threading
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Mapping, Optional

from fastapi import Request

from inventory_backend.config import settings
from inventory_backend.models.history import HistoryEntry
from inventory_backend.models.product import Product, normalize_fields, IN_STOCK, OUT_OF_STOCK

logger = logging.getLogger(__name__)

# Demo catalogue loaded on startup when SEED_DEMO_DATA is on
DEMO_PRODUCTS: List[Dict[str, Any]] = [
    {"id": 1, "name": "Laptop", "unit": "Piece", "category": "Electronics", "brand": "Dell",
     "stock": 25, "status": IN_STOCK, "image": ""},
    {"id": 2, "name": "Mouse", "unit": "Piece", "category": "Electronics", "brand": "Logitech",
     "stock": 150, "status": IN_STOCK, "image": ""},
    {"id": 3, "name": "Keyboard", "unit": "Piece", "category": "Electronics", "brand": "Corsair",
     "stock": 0, "status": OUT_OF_STOCK, "image": ""},
    {"id": 4, "name": "Monitor", "unit": "Piece", "category": "Electronics", "brand": "Samsung",
     "stock": 30, "status": IN_STOCK, "image": ""},
    {"id": 5, "name": "Desk Chair", "unit": "Piece", "category": "Furniture", "brand": "Herman Miller",
     "stock": 12, "status": IN_STOCK, "image": ""},
]


class ProductStore:
    """Authoritative in-memory product collection, kept in insertion order."""

    def __init__(self):
        self._products: List[Product] = []
        self._next_id = 1

    def seed(self, rows: Iterable[Mapping[str, Any]]) -> None:
        for row in rows:
            product = Product(id=int(row["id"]), **normalize_fields(row))
            self._products.append(product)
            self._next_id = max(self._next_id, product.id + 1)

    def create(self, fields: Mapping[str, Any]) -> Product:
        product = Product(id=self._next_id, **normalize_fields(fields))
        self._next_id += 1
        self._products.append(product)
        return product

    def get_by_id(self, product_id: int) -> Optional[Product]:
        return next((p for p in self._products if p.id == product_id), None)

    def find_by_name(self, name: str) -> Optional[Product]:
        key = (name or "").lower()
        return next((p for p in self._products if p.name.lower() == key), None)

    def replace(self, product: Product) -> None:
        for i, current in enumerate(self._products):
            if current.id == product.id:
                self._products[i] = product
                return
        raise KeyError(product.id)

    def delete(self, product_id: int) -> bool:
        for i, current in enumerate(self._products):
            if current.id == product_id:
                del self._products[i]
                return True
        return False

    def list(self) -> List[Product]:
        return list(self._products)

    def __len__(self) -> int:
        return len(self._products)


class HistoryLog:
    """Append-only record of stock changes."""

    def __init__(self):
        self._entries: List[HistoryEntry] = []

    def record(self, product_id: int, old_stock: int, new_stock: int, changed_by: str) -> HistoryEntry:
        entry = HistoryEntry(
            id=len(self._entries) + 1,
            product_id=product_id,
            old_stock=old_stock,
            new_stock=new_stock,
            changed_by=changed_by,
            timestamp=datetime.now(timezone.utc),
        )
        self._entries.append(entry)
        return entry

    def get_for_product(self, product_id: int) -> List[HistoryEntry]:
        # Newest first; same-instant entries fall back to recording order
        entries = [e for e in self._entries if e.product_id == product_id]
        return sorted(entries, key=lambda e: (e.timestamp, e.id), reverse=True)

    def __len__(self) -> int:
        return len(self._entries)


class InventoryDB:
    """Owns the product store, the history log and the write lock."""

    def __init__(self):
        self.products = ProductStore()
        self.history = HistoryLog()
        self.lock = threading.RLock()


def init_db(seed: Optional[bool] = None) -> InventoryDB:
    db = InventoryDB()
    if seed is None:
        seed = settings.SEED_DEMO_DATA
    if seed:
        db.products.seed(DEMO_PRODUCTS)
        logger.info(f"Seeded {len(db.products)} demo products")
    return db


def get_db(request: Request) -> InventoryDB:
    return request.app.state.db
