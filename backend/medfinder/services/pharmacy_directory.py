"""
Pharmacy directory: the seed set plus pharmacies registered at runtime.

The two sets are merged at read time. Seed entries always come first and a
dynamic entry whose id collides with a seed id is hidden (seed wins). The
order is stable so id allocation and tie-breaking in search stay
deterministic.
"""
import logging
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from medfinder.db.seed_pharmacies import SEED_PHARMACIES, SEED_IDS
from medfinder.models.pharmacy import Pharmacy
from medfinder.schemas.pharmacy import PharmacyBase

logger = logging.getLogger(__name__)


def list_dynamic(db: Session) -> List[PharmacyBase]:
    """Registered pharmacies in id order. An unreadable store reads as empty."""
    try:
        rows = db.query(Pharmacy).order_by(Pharmacy.id).all()
    except SQLAlchemyError as e:
        logger.error(f"Failed to read dynamic pharmacies: {e}", exc_info=True)
        db.rollback()
        return []
    return [PharmacyBase.model_validate(row) for row in rows]


def list_all(db: Session) -> List[PharmacyBase]:
    dynamic = [p for p in list_dynamic(db) if p.id not in SEED_IDS]
    return [*SEED_PHARMACIES, *dynamic]


def get_pharmacy(db: Session, pharmacy_id: int) -> Optional[PharmacyBase]:
    for pharmacy in list_all(db):
        if pharmacy.id == pharmacy_id:
            return pharmacy
    return None
