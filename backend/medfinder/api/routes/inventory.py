"""Global inventory: owner edits and per-medicine lookups."""
from typing import Dict, List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from medfinder.api.deps import get_db
from medfinder.core.exceptions import BusinessError, PriceSlipParseError, StoreWriteError
from medfinder.schemas.inventory import InventoryItem, InventoryRecord, PriceSlipUpload, StockUpdate
from medfinder.services import inventory_service
from medfinder.services.price_slip_parser import parse_price_slip_response

router = APIRouter()


@router.get("", response_model=Dict[str, List[InventoryRecord]])
def read_global_inventory(db: Session = Depends(get_db)):
    return inventory_service.snapshot(db)


@router.get("/medicines/{medicine_name}", response_model=List[InventoryRecord])
def read_medicine(medicine_name: str, db: Session = Depends(get_db)):
    return inventory_service.lookup(db, medicine_name)


@router.get("/pharmacies/{pharmacy_id}", response_model=List[InventoryItem])
def read_pharmacy_inventory(pharmacy_id: int, db: Session = Depends(get_db)):
    return inventory_service.list_for_pharmacy(db, pharmacy_id)


@router.put("/pharmacies/{pharmacy_id}", response_model=List[InventoryRecord])
def upsert_pharmacy_inventory(pharmacy_id: int, items: List[InventoryItem], db: Session = Depends(get_db)):
    """Add or update items in one batch."""
    try:
        return inventory_service.upsert_inventory(db, pharmacy_id, items)
    except StoreWriteError as e:
        raise BusinessError.server_error(e)


@router.post("/pharmacies/{pharmacy_id}/price-slip", response_model=List[InventoryRecord])
def upload_price_slip(pharmacy_id: int, data: PriceSlipUpload, db: Session = Depends(get_db)):
    """Store the items extracted from a photographed price list."""
    try:
        items = parse_price_slip_response(data.extracted_text)
    except PriceSlipParseError as e:
        raise BusinessError.bad_request(str(e))
    try:
        return inventory_service.upsert_inventory(db, pharmacy_id, items)
    except StoreWriteError as e:
        raise BusinessError.server_error(e)


@router.patch("/pharmacies/{pharmacy_id}/medicines/{medicine_name}")
def update_medicine_stock(pharmacy_id: int, medicine_name: str, data: StockUpdate, db: Session = Depends(get_db)):
    """`updated` is False when there was no record to change."""
    try:
        updated = inventory_service.update_stock(db, pharmacy_id, medicine_name, data.stock)
    except StoreWriteError as e:
        raise BusinessError.server_error(e)
    return {"updated": updated}


@router.delete("/pharmacies/{pharmacy_id}/medicines/{medicine_name}")
def delete_medicine(pharmacy_id: int, medicine_name: str, db: Session = Depends(get_db)):
    try:
        removed = inventory_service.remove_inventory(db, pharmacy_id, medicine_name)
    except StoreWriteError as e:
        raise BusinessError.server_error(e)
    return {"removed": removed}
