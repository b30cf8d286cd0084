"""QuoteTripUseCase — geocode both ends of a trip and price it, without saving."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from app.application.ports.geocoder_port import GeocoderPort
from app.domain.errors import InvalidInputError, LocationNotResolvedError
from app.domain.policies.reward_calculator import TripComputation, compute_trip
from app.domain.value_objects.geo_point import GeoPoint

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TripQuote:
    """Resolved trip endpoints and the reward they would earn."""

    start_location: str
    end_location: str
    start_point: GeoPoint
    end_point: GeoPoint
    computation: TripComputation


class QuoteTripUseCase:
    def __init__(self, geocoder: GeocoderPort):
        self._geocoder = geocoder

    async def execute(self, start_location: str, end_location: str) -> TripQuote:
        """Resolve both place names and compute the trip reward.

        Raises:
            InvalidInputError: if either place name is blank.
            LocationNotResolvedError: if either place cannot be geocoded.
        """
        start_location = (start_location or "").strip()
        end_location = (end_location or "").strip()
        if not start_location or not end_location:
            raise InvalidInputError("Both start and end locations are required")

        start_point = await self._resolve(start_location)
        end_point = await self._resolve(end_location)
        computation = compute_trip(start_point, end_point)

        logger.info(
            "Quoted trip '%s' → '%s': %.2f km, %d points",
            start_location, end_location,
            computation.distance_km, computation.points_earned,
        )
        return TripQuote(
            start_location=start_location,
            end_location=end_location,
            start_point=start_point,
            end_point=end_point,
            computation=computation,
        )

    async def _resolve(self, query: str) -> GeoPoint:
        point = await self._geocoder.geocode(query)
        if point is None:
            logger.warning("Could not resolve location '%s'", query)
            raise LocationNotResolvedError(query)
        return point
