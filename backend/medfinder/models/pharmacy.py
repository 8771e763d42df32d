from sqlalchemy import Column, Integer, String, Float, DateTime
from sqlalchemy.sql import func
from medfinder.db.base import Base


class Pharmacy(Base):
    """
    Pharmacy registered at runtime by an onboarding owner (the dynamic set).

    Seed pharmacies are not stored here; they live in
    `medfinder.db.seed_pharmacies`. Ids are allocated by the registrar, never
    by the database.
    """
    __tablename__ = "pharmacies"

    id = Column(Integer, primary_key=True, autoincrement=False)
    name = Column(String(255), nullable=False)
    address = Column(String(512), nullable=False, default="")
    phone = Column(String(64), nullable=False, default="")
    lat = Column(Float, nullable=False)
    lon = Column(Float, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    def __repr__(self):
        return f"<Pharmacy id={self.id} name={self.name!r}>"
