# src/tripmemo/trip.py
"""Assembles a Trip record from the photos of one import."""

import logging
import uuid
from dataclasses import replace
from datetime import datetime, tzinfo
from typing import Iterable, List, Optional

from .achievements import evaluate
from .exceptions import NoTimestampedPhotosError
from .models import Photo, Trip, wall_clock
from .route import build_route, total_distance, trip_duration

logger = logging.getLogger(__name__)


def prepare_photos(photos: Iterable[Photo], tz: Optional[tzinfo] = None) -> List[Photo]:
    """Keep the photos the core can use, in chronological order.

    Photos without a timestamp are dropped. Timestamps carrying a UTC offset
    become naive local time (in ``tz`` when given) so the set sorts as one
    timeline. A photo with only one of latitude/longitude is kept without
    coordinates.
    """
    valid: List[Photo] = []
    dropped = 0
    for photo in photos:
        if photo.timestamp is None:
            dropped += 1
            continue
        if photo.timestamp.tzinfo is not None:
            photo = replace(photo, timestamp=wall_clock(photo.timestamp, tz))
        if (photo.latitude is None) != (photo.longitude is None):
            logger.warning(f"Photo {photo.id} has incomplete coordinates. Ignoring its location.")
            photo = replace(photo, latitude=None, longitude=None, altitude=None)
        valid.append(photo)

    if dropped:
        logger.warning(f"Dropped {dropped} photos without timestamp")

    valid.sort(key=lambda p: p.timestamp)
    return valid


def default_trip_name(start: datetime) -> str:
    return f"{start:%B} trip"


def build_trip(
    photos: Iterable[Photo],
    name: Optional[str] = None,
    is_first_trip: bool = False,
    tz: Optional[tzinfo] = None,
) -> Trip:
    """Compute route, aggregates and achievements and wrap them in a Trip.

    Args:
        photos: Photo records of the trip, any order.
        name: Trip name. Derived from the start month when empty.
        is_first_trip: Whether the user has never recorded a trip before.
        tz: Optional zone for reading local hours of aware timestamps.

    Raises:
        NoTimestampedPhotosError: If no photo carries a timestamp.
    """
    photos = list(photos)
    ordered = prepare_photos(photos, tz)
    if not ordered:
        raise NoTimestampedPhotosError(len(photos))

    route = build_route(ordered)
    achievements = evaluate(ordered, is_first_trip, tz)
    start, end = ordered[0].timestamp, ordered[-1].timestamp
    now = datetime.now()

    trip = Trip(
        id=str(uuid.uuid4()),
        name=(name or "").strip() or default_trip_name(start),
        created_at=now,
        updated_at=now,
        start_date=start,
        end_date=end,
        route=route,
        achievements=achievements,
        total_photos=len(ordered),
        total_distance=total_distance(route),
        duration=trip_duration(ordered),
        cover_photo_id=ordered[0].id,
    )
    logger.info(
        f"Trip built: {trip.name} ({trip.total_photos} photos, {trip.total_distance} km, "
        f"{len(achievements)} achievements)"
    )
    return trip
