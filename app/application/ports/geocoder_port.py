"""Port interface for geocoding place names to coordinates and back."""

from abc import ABC, abstractmethod

from app.domain.value_objects.geo_point import GeoPoint


class GeocoderPort(ABC):
    @abstractmethod
    async def geocode(self, query: str) -> GeoPoint | None:
        """Convert a free-text place name to lat/lon coordinates.

        Returns None if the place cannot be resolved.
        """
        ...

    @abstractmethod
    async def reverse_geocode(self, point: GeoPoint) -> str:
        """Name the place at the given point.

        Falls back to "lat,lon" when the service cannot name it.
        """
        ...
