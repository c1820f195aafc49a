# inventory_backend/utils/queries.py
from typing import List, Optional

from inventory_backend.database import InventoryDB
from inventory_backend.models.product import Product


def get_product(db: InventoryDB, product_id: int) -> Optional[Product]:
    return db.products.get_by_id(product_id)


def find_by_name_substring(db: InventoryDB, query: Optional[str]) -> List[Product]:
    """Case-insensitive substring match on name. An empty query matches everything."""
    needle = (query or "").lower()
    return [p for p in db.products.list() if needle in p.name.lower()]


def find_by_category(db: InventoryDB, category: Optional[str]) -> List[Product]:
    """Exact, case-sensitive category match. Empty or None means no filter."""
    products = db.products.list()
    if not category:
        return products
    return [p for p in products if p.category == category]


def filter_products(db: InventoryDB, search: Optional[str] = None, category: Optional[str] = None) -> List[Product]:
    needle = (search or "").lower()
    return [
        p for p in db.products.list()
        if needle in p.name.lower() and (not category or p.category == category)
    ]


def list_categories(db: InventoryDB) -> List[str]:
    values = {p.category for p in db.products.list() if p.category}
    return sorted(values)
