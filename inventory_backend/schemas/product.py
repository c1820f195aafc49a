# inventory_backend/schemas/product.py
from pydantic import BaseModel, Field, ConfigDict, field_validator
from typing import Any, Optional

from inventory_backend.models.product import parse_stock


# Base configuration for dataclass/attribute compatibility
class ORMBase(BaseModel):
    model_config = ConfigDict(from_attributes=True)


def _lenient_stock(value: Any) -> Optional[int]:
    # Unparseable or negative quantities fall back to 0 instead of a 422
    if value is None:
        return None
    return parse_stock(value)


# Shared product attributes, all optional: missing ones get store defaults
class ProductBase(ORMBase):
    name: Optional[str] = None
    unit: Optional[str] = None
    category: Optional[str] = None
    brand: Optional[str] = None
    stock: Optional[int] = None
    status: Optional[str] = None
    image: Optional[str] = None

    @field_validator("stock", mode="before")
    @classmethod
    def lenient_stock(cls, value):
        return _lenient_stock(value)


# Schema for creating a new product (full or partial fields)
class ProductCreate(ProductBase):
    pass


# Schema for partial product updates
class ProductUpdate(ORMBase):
    """Schema for PUT requests - only the fields sent are applied."""
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    name: Optional[str] = None
    unit: Optional[str] = None
    category: Optional[str] = None
    brand: Optional[str] = None
    stock: Optional[int] = None
    status: Optional[str] = None
    image: Optional[str] = None
    # Attribution for the history entry; never stored on the product
    changed_by: Optional[str] = Field(None, alias="changedBy")

    @field_validator("stock", mode="before")
    @classmethod
    def lenient_stock(cls, value):
        return _lenient_stock(value)

    def changes(self) -> dict:
        return self.model_dump(exclude_unset=True, exclude={"changed_by"})


class ProductResponse(ORMBase):
    id: int
    name: str
    unit: str
    category: str
    brand: str
    stock: int
    status: str
    image: str
