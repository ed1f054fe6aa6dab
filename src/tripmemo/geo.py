import math

from .constants import EARTH_RADIUS_KM
from .models import Photo
from .numeric import round_half_up


def haversine_distance_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Great-circle distance in kilometers between two lat/lon pairs (degrees)."""
    lat1_rad, lat2_rad = math.radians(lat1), math.radians(lat2)
    dlat = math.radians(lat2 - lat1)
    dlon = math.radians(lon2 - lon1)

    a = min(1.0, math.sin(dlat / 2) ** 2 + math.cos(lat1_rad) * math.cos(lat2_rad) * math.sin(dlon / 2) ** 2)
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return EARTH_RADIUS_KM * c


def photo_distance_km(a: Photo, b: Photo) -> float:
    """Distance between two photos. Both must carry coordinates."""
    return haversine_distance_km(a.latitude, a.longitude, b.latitude, b.longitude)


def speed_kmh(from_photo: Photo, to_photo: Photo) -> int:
    """Average speed between two photos in km/h, rounded.

    Returns 0 when either photo lacks coordinates or the second photo is not
    later than the first.
    """
    if not (from_photo.has_coordinates and to_photo.has_coordinates):
        return 0
    hours = (to_photo.timestamp - from_photo.timestamp).total_seconds() / 3600.0
    if hours <= 0:
        return 0
    return int(round_half_up(photo_distance_km(from_photo, to_photo) / hours))
