"""GeoPoint value object — immutable, validated (lat, lon) pair."""

import math
from dataclasses import dataclass

from app.domain.errors import InvalidInputError

EARTH_RADIUS_KM = 6371.0


@dataclass(frozen=True)
class GeoPoint:
    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        _check_degrees("latitude", self.latitude, 90.0)
        _check_degrees("longitude", self.longitude, 180.0)

    def haversine_km(self, other: "GeoPoint") -> float:
        """Calculate distance in km between two points using the Haversine formula."""
        lat1 = math.radians(self.latitude)
        lat2 = math.radians(other.latitude)
        dlat = math.radians(other.latitude - self.latitude)
        dlon = math.radians(other.longitude - self.longitude)

        a = (
            math.sin(dlat / 2) ** 2
            + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2) ** 2
        )
        # Float error can push `a` a hair past 1 for antipodal points
        a = min(a, 1.0)
        c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

        return EARTH_RADIUS_KM * c

    def as_pair(self) -> tuple[float, float]:
        return self.latitude, self.longitude


def _check_degrees(name: str, value: float, limit: float) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidInputError(f"{name} must be a number, got {value!r}")
    if isinstance(value, float) and not math.isfinite(value):
        raise InvalidInputError(f"{name} must be finite, got {value}")
    if not -limit <= value <= limit:
        raise InvalidInputError(f"{name} out of range [-{limit:g}, {limit:g}]: {value}")
