"""Trip entity — one recorded sustainable journey."""

from dataclasses import dataclass
from datetime import datetime

from app.domain.value_objects.geo_point import GeoPoint


@dataclass
class Trip:
    id: int | None
    user_id: str
    start_location: str
    end_location: str
    start_point: GeoPoint
    end_point: GeoPoint
    distance_km: float
    points_earned: int
    carbon_saved: float
    trees_equivalent: int
    monetary_value: float
    image_path: str
    created_at: datetime | None = None
