# inventory_backend/schemas/transfer.py
from pydantic import BaseModel, Field

# Outcome of a CSV import
class ImportSummary(BaseModel):
    added: int = Field(ge=0)
    skipped: int = Field(ge=0)
    total: int = Field(ge=0)
