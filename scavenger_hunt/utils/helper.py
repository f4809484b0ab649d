import math
from datetime import datetime

from scavenger_hunt.utils.constants import EARTH_RADIUS_KM


def days_between(earlier: datetime, later: datetime) -> int:
    '''Whole calendar days from ``earlier`` to ``later``.

    Both instants are truncated to their date in ``later``'s timezone, so a
    completion at 23:59 followed by one at 00:01 counts as one day apart.
    '''
    if later.tzinfo is not None and earlier.tzinfo is not None:
        earlier = earlier.astimezone(later.tzinfo)
    elif later.tzinfo is not None:
        earlier = earlier.replace(tzinfo=later.tzinfo)
    elif earlier.tzinfo is not None:
        earlier = earlier.replace(tzinfo=None)
    return (later.date() - earlier.date()).days


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    d_phi = math.radians(lat2 - lat1)
    d_lambda = math.radians(lon2 - lon1)
    a = (
        math.sin(d_phi / 2) ** 2
        + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    )
    return 2 * EARTH_RADIUS_KM * math.asin(math.sqrt(a))


def parse_bool(value: str | None, default: bool = False) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {'1', 'true', 'yes', 'on'}
