# inventory_backend/schemas/history.py
from pydantic import BaseModel, Field, ConfigDict
from datetime import datetime

# Stock change as served to the admin UI (camelCase keys)
class HistoryEntryResponse(BaseModel):
    id: int
    product_id: int = Field(alias="productId")
    old_stock: int = Field(alias="oldStock")
    new_stock: int = Field(alias="newStock")
    changed_by: str = Field(alias="changedBy")
    timestamp: datetime

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)
