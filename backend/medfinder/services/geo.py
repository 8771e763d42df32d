"""Great-circle distance between two coordinates."""
import math
from decimal import ROUND_HALF_UP, Decimal

EARTH_RADIUS_KM = 6371.0


def haversine_distance(loc1, loc2) -> float:
    """
    Haversine distance in kilometres.

    Both arguments only need `lat` and `lon` attributes in degrees. No range
    checks: out-of-range input gives a finite but meaningless distance, and a
    non-finite coordinate gives NaN.
    """
    coords = (loc1.lat, loc1.lon, loc2.lat, loc2.lon)
    if not all(math.isfinite(c) for c in coords):
        return math.nan

    d_lat = math.radians(loc2.lat - loc1.lat)
    d_lon = math.radians(loc2.lon - loc1.lon)
    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(loc1.lat)) * math.cos(math.radians(loc2.lat))
        * math.sin(d_lon / 2) ** 2
    )
    # Rounding error can push near-antipodal points just past 1
    a = min(1.0, a)
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def round_km(distance: float) -> float:
    """One decimal place, halves rounded up (0.25 -> 0.3), unlike `round`."""
    if not math.isfinite(distance):
        return distance
    return float(Decimal(distance).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))
