"""Seed the global inventory with common medicines at a few verified pharmacies.

Usage: python seed_inventory.py
"""
from medfinder.db.init_db import init_db
from medfinder.db.session import SessionLocal
from medfinder.schemas.inventory import InventoryItem, StockStatus
from medfinder.services.inventory_service import upsert_inventory

# pharmacy id -> (medicine, price per strip, stock)
DEMO_STOCK = {
    21: [("Paracetamol 500mg", 30.0, StockStatus.InStock), ("Dolo 650", 32.0, StockStatus.InStock)],
    22: [("Paracetamol 500mg", 28.5, StockStatus.InStock), ("Cetirizine 10mg", 18.0, StockStatus.LowStock)],
    23: [("Paracetamol 500mg", 35.0, StockStatus.LowStock), ("Azithromycin 500mg", 120.0, StockStatus.InStock)],
    18: [("Dolo 650", 30.0, StockStatus.InStock), ("Pantoprazole 40mg", 95.0, StockStatus.InStock)],
    28: [("Cetirizine 10mg", 20.0, StockStatus.InStock), ("Crocin Advance", 25.0, StockStatus.OutOfStock)],
    1: [("Crocin Advance", 24.0, StockStatus.InStock), ("Azithromycin 500mg", 115.0, StockStatus.InStock)],
}


def seed_inventory():
    init_db()
    db = SessionLocal()
    try:
        for pharmacy_id, rows in DEMO_STOCK.items():
            items = [InventoryItem(medicine_name=name, price=price, stock=stock) for name, price, stock in rows]
            upsert_inventory(db, pharmacy_id, items)
            print(f"✅ Pharmacy {pharmacy_id}: {len(items)} item(s)")
    finally:
        db.close()


if __name__ == "__main__":
    seed_inventory()
