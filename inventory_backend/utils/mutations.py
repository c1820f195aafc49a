# inventory_backend/utils/mutations.py
import logging
from dataclasses import replace
from typing import Any, Mapping, Optional

from inventory_backend.database import InventoryDB
from inventory_backend.models.product import Product
from inventory_backend.schemas.product import ProductUpdate
from inventory_backend.utils.audit import log_stock_change

logger = logging.getLogger(__name__)


def create_product(db: InventoryDB, fields: Mapping[str, Any]) -> Product:
    with db.lock:
        product = db.products.create(fields)
    logger.info(f"Created product {product.id} ({product.name!r})")
    return product


def update_product(db: InventoryDB, product_id: int, patch: ProductUpdate) -> Optional[Product]:
    """Merge the fields present in `patch` onto the product.

    A stock change is recorded in the history log, attributed to
    `patch.changed_by` ("Unknown" when not given). Returns None when the
    product does not exist.
    """
    changes = {k: v for k, v in patch.changes().items() if v is not None}
    with db.lock:
        current = db.products.get_by_id(product_id)
        if current is None:
            return None

        updated = replace(current, **changes)

        if updated.stock != current.stock:
            log_stock_change(
                db, product_id=product_id, old_stock=current.stock,
                new_stock=updated.stock, changed_by=patch.changed_by,
            )

        db.products.replace(updated)
    logger.info(f"Updated product {product_id}: {sorted(changes)}")
    return updated


def delete_product(db: InventoryDB, product_id: int) -> bool:
    with db.lock:
        deleted = db.products.delete(product_id)
    if deleted:
        logger.info(f"Deleted product {product_id}")
    return deleted
