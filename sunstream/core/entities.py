from dataclasses import dataclass
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Optional


@dataclass(frozen=True)
class Coordinates:
    latitude: Decimal
    longitude: Decimal

    def to_dict(self) -> dict[str, str]:
        return {"lat": str(self.latitude), "lng": str(self.longitude)}


@dataclass(frozen=True)
class Event:
    id: int
    category: str
    zone: str
    score: int
    created_at: float
    coordinates: Coordinates
    venue: Optional[str] = None

    @property
    def location_label(self) -> str:
        return self.venue or self.zone

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "category": self.category,
            "location_label": self.location_label,
            "zone": self.zone,
            "venue": self.venue,
            "score": self.score,
            "created_at": datetime.fromtimestamp(self.created_at, tz=timezone.utc).isoformat(),
            "coordinates": self.coordinates.to_dict(),
        }
