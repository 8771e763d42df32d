from sqlalchemy import Column, Integer, String, Float, UniqueConstraint
from medfinder.db.base import Base


class InventoryEntry(Base):
    """
    One (medicine, pharmacy) stock fact in the global inventory.

    The rows sharing a `medicine_key` form that medicine's ordered list;
    order is the row id, so updating in place keeps the position. A key with
    no rows is simply absent from the mapping.
    """
    __tablename__ = "inventory_records"
    __table_args__ = (
        UniqueConstraint("medicine_key", "pharmacy_id", name="uq_inventory_medicine_pharmacy"),
    )

    id = Column(Integer, primary_key=True, index=True)
    medicine_key = Column(String(255), nullable=False, index=True)  # lower-cased name
    pharmacy_id = Column(Integer, nullable=False, index=True)
    price = Column(Float, nullable=False, default=0.0)
    stock = Column(String(32), nullable=False, default="In Stock")  # StockStatus value

    def __repr__(self):
        return f"<InventoryEntry {self.medicine_key!r} pharmacy={self.pharmacy_id} stock={self.stock!r}>"
