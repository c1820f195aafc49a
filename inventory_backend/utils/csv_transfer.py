# inventory_backend/utils/csv_transfer.py
import logging
from dataclasses import dataclass
from typing import Any, BinaryIO, Dict, List, Optional, Union

import pandas as pd

from inventory_backend.config import settings
from inventory_backend.database import InventoryDB

logger = logging.getLogger(__name__)

IMPORT_FIELDS: List[str] = ["name", "unit", "category", "brand", "stock", "status", "image"]
EXPORT_FIELDS: List[str] = ["id", "name", "unit", "category", "brand", "stock", "status"]


class TransferError(Exception):
    """A CSV import or export could not be completed."""


class CSVImportError(TransferError):
    pass


class CSVExportError(TransferError):
    pass


@dataclass
class ImportResult:
    added: int = 0
    skipped: int = 0

    @property
    def total(self) -> int:
        return self.added + self.skipped

    def to_dict(self) -> Dict[str, int]:
        return {"added": self.added, "skipped": self.skipped, "total": self.total}


def _clean_row(row: Dict[str, Any]) -> Dict[str, str]:
    # Short rows come back as NaN even with keep_default_na off
    return {f: row[f] if isinstance(row.get(f), str) else "" for f in IMPORT_FIELDS}


def import_products(
    db: InventoryDB,
    source: Union[str, BinaryIO],
    chunk_size: Optional[int] = None,
) -> ImportResult:
    """Add every CSV row whose name is not already in the store.

    Rows are committed chunk by chunk in file order, so a name repeated later
    in the same file is skipped as a duplicate of the earlier row. A read or
    parse failure raises CSVImportError; rows committed before it stay.
    """
    result = ImportResult()
    try:
        reader = pd.read_csv(
            source,
            dtype=str,
            keep_default_na=False,
            # Never promote a surplus first column to the index
            index_col=False,
            encoding="utf-8-sig",
            chunksize=chunk_size or settings.IMPORT_CHUNK_SIZE,
        )
        with reader:
            for chunk in reader:
                chunk = chunk.rename(columns=lambda c: str(c).strip())
                with db.lock:
                    for raw in chunk.to_dict("records"):
                        row = _clean_row(raw)
                        if db.products.find_by_name(row["name"]) is not None:
                            result.skipped += 1
                            continue
                        db.products.create(row)
                        result.added += 1
    except pd.errors.EmptyDataError:
        logger.info("CSV import received an empty file")
    except (pd.errors.ParserError, UnicodeDecodeError, ValueError, OSError) as e:
        logger.error(f"CSV import failed after {result.total} rows: {e}")
        raise CSVImportError("Error processing CSV file") from e

    logger.info(f"CSV import finished: added={result.added} skipped={result.skipped}")
    return result


def export_products(db: InventoryDB) -> bytes:
    try:
        rows = [p.to_dict() for p in db.products.list()]
        frame = pd.DataFrame(rows, columns=EXPORT_FIELDS)
        data = frame.to_csv(index=False, lineterminator="\n").encode("utf-8")
    except (ValueError, TypeError) as e:
        logger.error(f"CSV export failed: {e}")
        raise CSVExportError("Error exporting products") from e

    logger.info(f"CSV export produced {len(rows)} rows")
    return data
