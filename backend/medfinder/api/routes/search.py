"""Public medicine search."""
from typing import List

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from medfinder.api.deps import get_db
from medfinder.schemas.common import Location
from medfinder.schemas.search import SearchResult, SortKey
from medfinder.services.search_engine import find_nearby, sort_results

router = APIRouter()


@router.get("", response_model=List[SearchResult])
def search_medicine(
    lat: float = Query(..., allow_inf_nan=False),
    lon: float = Query(..., allow_inf_nan=False),
    medicine: str = Query(..., min_length=1),
    sort: SortKey = Query("distance"),
    db: Session = Depends(get_db),
):
    """Up to 10 nearby pharmacies with the medicine in stock, best option flagged."""
    results = find_nearby(db, Location(lat=lat, lon=lon), medicine)
    return sort_results(results, sort)
