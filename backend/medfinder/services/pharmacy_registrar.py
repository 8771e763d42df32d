"""
Owner onboarding: find the owner's pharmacy by name or register a new one.

Registration is idempotent per name (case-insensitive). An existing match is
returned as stored, even if the owner now reports a different address, phone
or location.
"""
import logging
import threading

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from medfinder.core.audit import AuditLog
from medfinder.core.config import settings
from medfinder.core.exceptions import StoreWriteError
from medfinder.db.seed_pharmacies import SEED_PHARMACIES
from medfinder.models.pharmacy import Pharmacy
from medfinder.schemas.common import Location
from medfinder.schemas.pharmacy import PharmacyBase, PharmacyOwner
from medfinder.services.pharmacy_directory import list_all, list_dynamic

logger = logging.getLogger(__name__)

# Lookup, id allocation and insert form one critical section
_registration_lock = threading.Lock()


def next_pharmacy_id(db: Session) -> int:
    ids = [p.id for p in list_dynamic(db)] + [p.id for p in SEED_PHARMACIES]
    return max(ids + [settings.PHARMACY_ID_BASELINE]) + 1


def register_or_get(db: Session, owner: PharmacyOwner, location: Location) -> PharmacyBase:
    """
    Return the pharmacy named `owner.name`, creating it if needed.

    Raises:
        StoreWriteError: the new pharmacy could not be saved. `view` carries
            the pharmacy that was built for this call.
    """
    with _registration_lock:
        wanted = owner.name.lower()
        for pharmacy in list_all(db):
            if pharmacy.name.lower() == wanted:
                logger.info(f"Owner matched existing pharmacy id={pharmacy.id}")
                return pharmacy

        new_pharmacy = PharmacyBase(
            id=next_pharmacy_id(db),
            name=owner.name,
            address=owner.address,
            phone=owner.phone,
            lat=location.lat,
            lon=location.lon,
        )
        db.add(Pharmacy(**new_pharmacy.model_dump()))
        try:
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Failed to save new pharmacy id={new_pharmacy.id}: {e}", exc_info=True)
            AuditLog.log_action("register", "pharmacy", new_pharmacy.id, success=False)
            raise StoreWriteError("Failed to save pharmacy", view=new_pharmacy) from e

    logger.info(f"Registered pharmacy id={new_pharmacy.id} name={new_pharmacy.name!r}")
    AuditLog.log_action("register", "pharmacy", new_pharmacy.id, changes={"name": new_pharmacy.name})
    return new_pharmacy
