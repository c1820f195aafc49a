# inventory_backend/models/product.py
import re
from dataclasses import dataclass, asdict
from typing import Any, Dict, Mapping, Optional

IN_STOCK = "In Stock"
OUT_OF_STOCK = "Out of Stock"

DEFAULT_UNIT = "Piece"
DEFAULT_CATEGORY = "Uncategorized"

# Leading integer: "12abc" -> 12, "3.9" -> 3
_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


# Model Product
# A single inventory item held in the in-memory store.
# `status` is set by callers and is never derived from `stock`.
@dataclass
class Product:
    id: int
    name: str
    unit: str = DEFAULT_UNIT
    category: str = DEFAULT_CATEGORY
    brand: str = ""
    stock: int = 0
    status: str = IN_STOCK
    image: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def parse_stock(value: Any) -> int:
    """Coerce a raw stock value to a non-negative int, falling back to 0."""
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return max(value, 0)
    if isinstance(value, float):
        return max(int(value), 0) if value == value else 0
    match = _LEADING_INT.match(str(value))
    if not match:
        return 0
    return max(int(match.group(1)), 0)


def normalize_fields(fields: Mapping[str, Any]) -> Dict[str, Any]:
    """Fill every absent or empty product field with its default.

    This is the only place defaults are applied; explicit creation and CSV
    import both go through it via ``ProductStore.create``.
    """
    def _text(key: str, default: str = "") -> str:
        value: Optional[Any] = fields.get(key)
        if value is None or value == "":
            return default
        return str(value)

    return {
        "name": _text("name"),
        "unit": _text("unit", DEFAULT_UNIT),
        "category": _text("category", DEFAULT_CATEGORY),
        "brand": _text("brand"),
        "stock": parse_stock(fields.get("stock")),
        "status": _text("status", IN_STOCK),
        "image": _text("image"),
    }
