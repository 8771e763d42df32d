"""
Nearby medicine search.

Every known pharmacy is enriched with its distance from the user and its
price/stock for the requested medicine. The list is sorted by distance,
reduced to pharmacies with the medicine in stock, truncated, and one entry
is flagged as the best option.

Read-only: the search never writes to the directory or the inventory.
"""
import logging
from typing import Dict, List, Optional

from sqlalchemy.orm import Session

from medfinder.core.config import settings
from medfinder.schemas.common import Location
from medfinder.schemas.inventory import InventoryRecord, StockStatus
from medfinder.schemas.search import SearchResult, SortKey
from medfinder.services.geo import haversine_distance, round_km
from medfinder.services.inventory_service import lookup
from medfinder.services.pharmacy_directory import list_all

logger = logging.getLogger(__name__)

PRICE_UNIT = "per strip"
NO_PRICE_UNIT = "-"

# Best-option tolerances
CLOSER_PRICE_TOLERANCE = 10  # a closer pharmacy may cost up to this much more
CHEAPER_DISTANCE_TOLERANCE = 2  # km a cheaper pharmacy may be farther

# Presentation order for the availability sort
AVAILABILITY_RANK = {
    StockStatus.InStock: 0,
    StockStatus.LowStock: 1,
    StockStatus.OutOfStock: 2,
}


def select_best_option(results: List[SearchResult]) -> Optional[SearchResult]:
    """
    Flag the best option in a distance-sorted result list.

    A single left-to-right pass: the running best is replaced by a closer
    pharmacy that is not much dearer, or by a cheaper one that is not much
    farther. This is not a global optimum and the order of `results` matters.
    """
    if not results:
        return None

    best = results[0]
    for p in results[1:]:
        if p.distance < best.distance and p.price < best.price + CLOSER_PRICE_TOLERANCE:
            best = p
        elif p.price < best.price and p.distance < best.distance + CHEAPER_DISTANCE_TOLERANCE:
            best = p

    best.is_best_option = True
    return best


def find_nearby(
    db: Session,
    location: Location,
    medicine_name: str,
    limit: Optional[int] = None,
) -> List[SearchResult]:
    """
    Pharmacies near `location` that have `medicine_name` in stock.

    Returns at most `limit` (default `settings.SEARCH_RESULT_LIMIT`) results,
    nearest first, all In Stock, with at most one `is_best_option`.
    """
    if limit is None:
        limit = settings.SEARCH_RESULT_LIMIT

    stocked: Dict[int, InventoryRecord] = {r.pharmacy_id: r for r in lookup(db, medicine_name)}

    enriched = []
    for pharmacy in list_all(db):
        record = stocked.get(pharmacy.id)
        enriched.append(
            SearchResult(
                **pharmacy.model_dump(),
                distance=round_km(haversine_distance(location, pharmacy)),
                price=record.price if record else 0,
                price_unit=PRICE_UNIT if record else NO_PRICE_UNIT,
                stock=record.stock if record else StockStatus.OutOfStock,
                is_best_option=False,
            )
        )

    # sorted() is stable: equal distances keep directory order
    nearest = sorted(enriched, key=lambda p: p.distance)
    results = [p for p in nearest if p.stock == StockStatus.InStock][:limit]

    best = select_best_option(results)
    logger.info(
        f"Search {medicine_name!r}: {len(stocked)} stocking pharmacies, "
        f"{len(results)} returned, best={best.id if best else None}"
    )
    return results


def sort_results(results: List[SearchResult], key: SortKey = "distance") -> List[SearchResult]:
    """
    Re-order search results for display. Best-option flags are left as they are.
    """
    if key == "price":
        return sorted(results, key=lambda p: p.price)
    if key == "availability":
        return sorted(results, key=lambda p: AVAILABILITY_RANK[p.stock])
    return sorted(results, key=lambda p: p.distance)
