from typing import Literal

from pydantic import Field

from medfinder.schemas.inventory import StockStatus
from medfinder.schemas.pharmacy import PharmacyBase

SortKey = Literal["price", "distance", "availability"]


class SearchResult(PharmacyBase):
    """A pharmacy enriched for one query. Never persisted."""
    distance: float  # km, one decimal place
    price: float
    price_unit: str = Field(alias="priceUnit")
    stock: StockStatus
    is_best_option: bool = Field(default=False, alias="isBestOption")

    class Config:
        frozen = False
        populate_by_name = True
