"""
Route builder and trip aggregates.

- build_route: geotagged photos -> chronological RoutePoint list
- total_distance: km along the route, one decimal
- trip_duration: seconds between first and last photo
- cumulative_distance: running distance used by the playback view
"""

from typing import Iterable, List, Sequence

from .geo import haversine_distance_km, photo_distance_km
from .models import Photo, RoutePoint, wall_clock
from .numeric import round_half_up


def build_route(photos: Iterable[Photo]) -> List[RoutePoint]:
    """Project the photos that carry coordinates onto an ordered route.

    Photos sharing a timestamp keep their relative input order.
    """
    located = [p for p in photos if p.has_coordinates]
    located.sort(key=lambda p: wall_clock(p.timestamp))
    return [
        RoutePoint(lat=p.latitude, lng=p.longitude, timestamp=p.timestamp, photo_id=p.id)
        for p in located
    ]


def total_distance(route: Sequence[RoutePoint]) -> float:
    """Sum of the legs between consecutive route points, rounded to 0.1 km."""
    total = 0.0
    for prev, curr in zip(route, route[1:]):
        total += haversine_distance_km(prev.lat, prev.lng, curr.lat, curr.lng)
    return round_half_up(total, 1)


def trip_duration(photos: Iterable[Photo]) -> int:
    """Seconds between the earliest and the latest photo; input need not be sorted."""
    timestamps = [wall_clock(p.timestamp) for p in photos if p.timestamp is not None]
    if len(timestamps) < 2:
        return 0
    span = (max(timestamps) - min(timestamps)).total_seconds()
    return int(round_half_up(span))


def cumulative_distance(photos: Sequence[Photo], up_to_index: int) -> float:
    """Distance travelled from the first photo up to ``photos[up_to_index]``.

    ``photos`` must already be in chronological order. A leg where either
    photo lacks coordinates adds nothing.
    """
    total = 0.0
    last = min(up_to_index, len(photos) - 1)
    for i in range(1, last + 1):
        prev, curr = photos[i - 1], photos[i]
        if prev.has_coordinates and curr.has_coordinates:
            total += photo_distance_km(prev, curr)
    return round_half_up(total, 1)
