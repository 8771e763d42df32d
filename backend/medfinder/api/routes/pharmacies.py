"""Pharmacy directory and owner onboarding."""
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from medfinder.api.deps import get_db
from medfinder.core.exceptions import BusinessError, StoreWriteError
from medfinder.schemas.pharmacy import PharmacyBase, PharmacyRegister
from medfinder.services.pharmacy_directory import get_pharmacy, list_all
from medfinder.services.pharmacy_registrar import register_or_get

router = APIRouter()


@router.get("", response_model=List[PharmacyBase])
def list_pharmacies(db: Session = Depends(get_db)):
    """Seed pharmacies first, then registered ones."""
    return list_all(db)


@router.get("/{pharmacy_id}", response_model=PharmacyBase)
def read_pharmacy(pharmacy_id: int, db: Session = Depends(get_db)):
    pharmacy = get_pharmacy(db, pharmacy_id)
    if not pharmacy:
        raise BusinessError.not_found("Pharmacy", reason=f"id={pharmacy_id}")
    return pharmacy


@router.post("/register", response_model=PharmacyBase)
def register_pharmacy(data: PharmacyRegister, db: Session = Depends(get_db)):
    """Owner login: returns the existing pharmacy with this name or registers a new one."""
    try:
        return register_or_get(db, data.owner, data.location)
    except StoreWriteError as e:
        raise BusinessError.server_error(e)
