# inventory_backend/routes/products.py
import logging
from typing import Optional, List

from fastapi import (
    APIRouter, Depends, HTTPException, Query, Response,
    UploadFile, File, status
)

from inventory_backend.config import settings
from inventory_backend.database import InventoryDB, get_db
from inventory_backend.models.product import Product
from inventory_backend.schemas.history import HistoryEntryResponse
from inventory_backend.schemas.product import ProductCreate, ProductUpdate, ProductResponse
from inventory_backend.schemas.transfer import ImportSummary
from inventory_backend.utils import queries
from inventory_backend.utils.csv_transfer import (
    CSVExportError, CSVImportError, export_products, import_products
)
from inventory_backend.utils.mutations import create_product, delete_product, update_product

router = APIRouter(prefix="/products", tags=["Products"])
logger = logging.getLogger(__name__)

# ---- HELPERS ----
def _serialize(products: List[Product]) -> List[ProductResponse]:
    return [ProductResponse.model_validate(p) for p in products]

def _get_or_404(db: InventoryDB, product_id: int) -> Product:
    product = queries.get_product(db, product_id)
    if product is None:
        raise HTTPException(status_code=404, detail="Product not found")
    return product


# =========================
# PRODUCT LIST
# =========================
@router.get("", response_model=List[ProductResponse])
def list_products(
    name: Optional[str] = Query(None, description="Case-insensitive name fragment"),
    category: Optional[str] = Query(None, description="Exact category"),
    db: InventoryDB = Depends(get_db),
):
    return _serialize(queries.filter_products(db, search=name, category=category))


@router.get("/search", response_model=List[ProductResponse])
def search_products(
    name: Optional[str] = Query(None, description="Case-insensitive name fragment"),
    db: InventoryDB = Depends(get_db),
):
    return _serialize(queries.find_by_name_substring(db, name))


@router.get("/categories", response_model=List[str])
def get_product_categories(db: InventoryDB = Depends(get_db)):
    return queries.list_categories(db)


# =========================
# CSV IMPORT / EXPORT
# =========================
@router.get("/export")
def export_products_csv(db: InventoryDB = Depends(get_db)):
    try:
        data = export_products(db)
    except CSVExportError:
        raise HTTPException(status_code=500, detail="Error exporting products")

    return Response(
        content=data,
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{settings.EXPORT_FILENAME}"'},
    )


@router.post("/import", response_model=ImportSummary)
def import_products_csv(
    file: Optional[UploadFile] = File(None),
    db: InventoryDB = Depends(get_db),
):
    if file is None:
        raise HTTPException(status_code=400, detail="No file uploaded")

    try:
        result = import_products(db, file.file)
    except CSVImportError:
        raise HTTPException(status_code=500, detail="Error processing CSV file")
    finally:
        file.file.close()

    return ImportSummary(**result.to_dict())


# =========================
# SINGLE PRODUCT
# =========================
@router.get("/{product_id}", response_model=ProductResponse)
def get_product(product_id: int, db: InventoryDB = Depends(get_db)):
    return ProductResponse.model_validate(_get_or_404(db, product_id))


@router.get("/{product_id}/history", response_model=List[HistoryEntryResponse])
def get_product_history(product_id: int, db: InventoryDB = Depends(get_db)):
    # Entries survive product deletion, so no existence check here
    entries = db.history.get_for_product(product_id)
    return [HistoryEntryResponse.model_validate(e) for e in entries]


@router.post("", response_model=ProductResponse, status_code=status.HTTP_201_CREATED)
def add_product(payload: ProductCreate, db: InventoryDB = Depends(get_db)):
    product = create_product(db, payload.model_dump(exclude_none=True))
    return ProductResponse.model_validate(product)


@router.put("/{product_id}", response_model=ProductResponse)
def edit_product(product_id: int, payload: ProductUpdate, db: InventoryDB = Depends(get_db)):
    product = update_product(db, product_id, payload)
    if product is None:
        raise HTTPException(status_code=404, detail="Product not found")
    return ProductResponse.model_validate(product)


@router.delete("/{product_id}")
def remove_product(product_id: int, db: InventoryDB = Depends(get_db)):
    if not delete_product(db, product_id):
        raise HTTPException(status_code=404, detail="Product not found")
    return {"message": "Product deleted successfully"}
