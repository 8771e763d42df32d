"""
Global inventory: medicine key -> ordered list of per-pharmacy stock records.

Keys are the lower-cased medicine name and nothing else (no trimming, no
dosage stripping). Each (medicine, pharmacy) pair has at most one record:
writes update in place or append, never duplicate.

Writers lock the medicine keys they touch, so batches on different medicines
run concurrently and batches on the same medicine serialize. Each mutation
commits once; a failed commit raises StoreWriteError with the records the
call computed.
"""
import logging
from collections import defaultdict
from typing import Dict, Iterable, List

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from medfinder.core.audit import AuditLog
from medfinder.core.exceptions import StoreWriteError
from medfinder.core.locks import KeyedLock
from medfinder.models.inventory import InventoryEntry
from medfinder.schemas.inventory import InventoryItem, InventoryRecord, StockStatus

logger = logging.getLogger(__name__)

_key_locks = KeyedLock()


def medicine_key(medicine_name: str) -> str:
    return medicine_name.lower()


def _to_record(entry: InventoryEntry) -> InventoryRecord:
    return InventoryRecord(pharmacy_id=entry.pharmacy_id, price=entry.price, stock=StockStatus(entry.stock))


def _write_failed(db: Session, action: str, pharmacy_id: int, error: SQLAlchemyError, view, changes: dict) -> StoreWriteError:
    db.rollback()
    logger.error(f"Failed to persist inventory {action} for pharmacy {pharmacy_id}: {error}", exc_info=True)
    AuditLog.log_action(action, "inventory", pharmacy_id, changes=changes, success=False)
    return StoreWriteError(f"Failed to persist inventory {action}", view=view)


def lookup(db: Session, medicine_name: str) -> List[InventoryRecord]:
    """Records for one medicine in list order; empty if unknown or unreadable."""
    try:
        entries = (
            db.query(InventoryEntry)
            .filter(InventoryEntry.medicine_key == medicine_key(medicine_name))
            .order_by(InventoryEntry.id)
            .all()
        )
    except SQLAlchemyError as e:
        logger.error(f"Failed to read inventory for {medicine_name!r}: {e}", exc_info=True)
        db.rollback()
        return []
    return [_to_record(e) for e in entries]


def snapshot(db: Session) -> Dict[str, List[InventoryRecord]]:
    """The whole global inventory as a mapping. Keys never map to empty lists."""
    try:
        entries = db.query(InventoryEntry).order_by(InventoryEntry.id).all()
    except SQLAlchemyError as e:
        logger.error(f"Failed to read global inventory: {e}", exc_info=True)
        db.rollback()
        return {}
    inventory: Dict[str, List[InventoryRecord]] = defaultdict(list)
    for entry in entries:
        inventory[entry.medicine_key].append(_to_record(entry))
    return dict(inventory)


def list_for_pharmacy(db: Session, pharmacy_id: int) -> List[InventoryItem]:
    """One pharmacy's own price list, keyed by medicine key."""
    try:
        entries = (
            db.query(InventoryEntry)
            .filter(InventoryEntry.pharmacy_id == pharmacy_id)
            .order_by(InventoryEntry.id)
            .all()
        )
    except SQLAlchemyError as e:
        logger.error(f"Failed to read inventory of pharmacy {pharmacy_id}: {e}", exc_info=True)
        db.rollback()
        return []
    return [
        InventoryItem(medicine_name=e.medicine_key, price=e.price, stock=StockStatus(e.stock))
        for e in entries
    ]


def upsert_inventory(db: Session, pharmacy_id: int, items: Iterable[InventoryItem]) -> List[InventoryRecord]:
    """
    Add or overwrite this pharmacy's price and stock for each item.

    Existing records keep their position in the medicine's list. The batch is
    committed once.

    Returns:
        The record written for each item, in item order.
    """
    items = list(items)
    keys = [medicine_key(item.medicine_name) for item in items]
    changes = {"medicines": sorted(set(keys))}
    written: List[InventoryRecord] = []

    with _key_locks.hold(keys):
        try:
            # Entries already touched in this batch, so a repeated key updates the same record
            batch: Dict[str, InventoryEntry] = {}
            for key, item in zip(keys, items):
                stock = item.stock or StockStatus.InStock
                entry = batch.get(key)
                if entry is None:
                    entry = (
                        db.query(InventoryEntry)
                        .filter(InventoryEntry.medicine_key == key, InventoryEntry.pharmacy_id == pharmacy_id)
                        .first()
                    )
                if entry is not None:
                    entry.price = item.price
                    entry.stock = stock.value
                else:
                    entry = InventoryEntry(medicine_key=key, pharmacy_id=pharmacy_id, price=item.price, stock=stock.value)
                    db.add(entry)
                batch[key] = entry
                written.append(InventoryRecord(pharmacy_id=pharmacy_id, price=item.price, stock=stock))
            db.commit()
        except SQLAlchemyError as e:
            raise _write_failed(db, "upsert", pharmacy_id, e, written, changes) from e

    AuditLog.log_action("upsert", "inventory", pharmacy_id, changes=changes)
    logger.info(f"Upserted {len(written)} inventory item(s) for pharmacy {pharmacy_id}")
    return written


def update_stock(db: Session, pharmacy_id: int, medicine_name: str, stock: StockStatus) -> bool:
    """
    Overwrite the stock status of one record.

    Returns False, changing nothing, when the medicine or this pharmacy's
    record for it does not exist.
    """
    key = medicine_key(medicine_name)
    changes = {"medicine": key, "stock": stock.value}
    view = None

    with _key_locks.hold([key]):
        try:
            entry = (
                db.query(InventoryEntry)
                .filter(InventoryEntry.medicine_key == key, InventoryEntry.pharmacy_id == pharmacy_id)
                .first()
            )
            if entry is None:
                logger.info(f"No inventory record for {key!r} at pharmacy {pharmacy_id}; stock unchanged")
                return False
            entry.stock = stock.value
            view = InventoryRecord(pharmacy_id=pharmacy_id, price=entry.price, stock=stock)
            db.commit()
        except SQLAlchemyError as e:
            raise _write_failed(db, "update_stock", pharmacy_id, e, view, changes) from e

    AuditLog.log_action("update_stock", "inventory", pharmacy_id, changes=changes)
    return True


def remove_inventory(db: Session, pharmacy_id: int, medicine_name: str) -> bool:
    """
    Drop this pharmacy's record for a medicine.

    Removing the last record removes the medicine key itself. Returns False
    when there was nothing to remove.
    """
    key = medicine_key(medicine_name)
    changes = {"medicine": key}

    with _key_locks.hold([key]):
        try:
            deleted = (
                db.query(InventoryEntry)
                .filter(InventoryEntry.medicine_key == key, InventoryEntry.pharmacy_id == pharmacy_id)
                .delete(synchronize_session=False)
            )
            if not deleted:
                db.rollback()
                logger.info(f"No inventory record for {key!r} at pharmacy {pharmacy_id}; nothing removed")
                return False
            db.commit()
        except SQLAlchemyError as e:
            raise _write_failed(db, "remove", pharmacy_id, e, None, changes) from e

    AuditLog.log_action("remove", "inventory", pharmacy_id, changes=changes)
    return True
