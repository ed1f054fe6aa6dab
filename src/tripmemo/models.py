from dataclasses import dataclass, field
from datetime import datetime, tzinfo
from typing import Any, Dict, List, Optional


@dataclass
class Photo:
    """A processed photo as handed over by the image pipeline."""
    id: str
    timestamp: Optional[datetime]
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    altitude: Optional[float] = None
    filename: str = ""

    @property
    def has_coordinates(self) -> bool:
        return self.latitude is not None and self.longitude is not None

    @property
    def has_altitude(self) -> bool:
        return self.has_coordinates and self.altitude is not None


def wall_clock(ts: Optional[datetime], tz: Optional[tzinfo] = None) -> Optional[datetime]:
    """Naive local time of ``ts``.

    Aware values are moved into ``tz`` when one is given, otherwise they keep
    their own wall clock; either way the offset is dropped so they compare
    with naive values.
    """
    if ts is None or ts.tzinfo is None:
        return ts
    if tz is not None:
        ts = ts.astimezone(tz)
    return ts.replace(tzinfo=None)


@dataclass
class RoutePoint:
    lat: float
    lng: float
    timestamp: datetime
    photo_id: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "lat": self.lat,
            "lng": self.lng,
            "timestamp": self.timestamp.isoformat(),
            "photoId": self.photo_id,
        }


@dataclass
class Achievement:
    """An unlocked badge instance."""
    id: str
    type: str
    unlocked_at: datetime
    metadata: Optional[Dict[str, Any]] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "id": self.id,
            "type": self.type,
            "unlockedAt": self.unlocked_at.isoformat(),
        }
        if self.metadata is not None:
            data["metadata"] = self.metadata
        return data


@dataclass
class Trip:
    id: str
    name: str
    created_at: datetime
    updated_at: datetime
    start_date: Optional[datetime]
    end_date: Optional[datetime]
    route: List[RoutePoint] = field(default_factory=list)
    achievements: List[Achievement] = field(default_factory=list)
    total_photos: int = 0
    total_distance: float = 0.0  # km
    duration: int = 0  # seconds
    cover_photo_id: Optional[str] = None

    @property
    def achievement_types(self) -> List[str]:
        return [a.type for a in self.achievements]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "createdAt": self.created_at.isoformat(),
            "updatedAt": self.updated_at.isoformat(),
            "startDate": self.start_date.isoformat() if self.start_date else None,
            "endDate": self.end_date.isoformat() if self.end_date else None,
            "route": [p.to_dict() for p in self.route],
            "achievements": [a.to_dict() for a in self.achievements],
            "totalPhotos": self.total_photos,
            "totalDistance": self.total_distance,
            "duration": self.duration,
            "coverPhotoId": self.cover_photo_id,
        }
