from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_validator


class StockStatus(str, Enum):
    InStock = "In Stock"
    LowStock = "Low Stock"
    OutOfStock = "Out of Stock"


class InventoryItem(BaseModel):
    """One line of an owner's price list (typed in or extracted from a photo)."""
    medicine_name: str = Field(alias="medicineName")
    price: float = Field(ge=0)
    stock: StockStatus = StockStatus.InStock

    class Config:
        populate_by_name = True

    @field_validator("stock", mode="before")
    @classmethod
    def default_stock(cls, v: Any) -> Any:
        # Missing, null or empty stock means the item is on the shelf
        return v or StockStatus.InStock


class InventoryRecord(BaseModel):
    pharmacy_id: int = Field(alias="pharmacyId")
    price: float
    stock: StockStatus

    class Config:
        from_attributes = True
        populate_by_name = True


class StockUpdate(BaseModel):
    stock: StockStatus


class PriceSlipUpload(BaseModel):
    """Raw text returned by the image-to-text service for a price list photo."""
    extracted_text: str = Field(alias="extractedText")

    class Config:
        populate_by_name = True
