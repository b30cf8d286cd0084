"""RecordTripUseCase — full pipeline: quote → store ticket → save trip → update totals."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from app.application.ports.profile_repo import ProfileRepository
from app.application.ports.ticket_storage_port import TicketStoragePort
from app.application.ports.trip_repo import TripRepository
from app.application.use_cases.quote_trip import QuoteTripUseCase
from app.domain.entities.profile import Profile
from app.domain.entities.trip import Trip
from app.domain.errors import ProfileNotFoundError, TicketStorageError

logger = logging.getLogger(__name__)


@dataclass
class RecordedTrip:
    """The saved trip and the profile totals after it was applied."""

    trip: Trip
    profile: Profile


class RecordTripUseCase:
    """Orchestrates recording one sustainable trip for a user."""

    def __init__(
        self,
        quote: QuoteTripUseCase,
        storage: TicketStoragePort,
        trip_repo: TripRepository,
        profile_repo: ProfileRepository,
    ):
        self._quote = quote
        self._storage = storage
        self._trips = trip_repo
        self._profiles = profile_repo

    async def execute(
        self,
        user_id: str,
        start_location: str,
        end_location: str,
        image_filename: str,
        image_content: bytes,
    ) -> RecordedTrip:
        """Record a trip and credit its reward to the user's profile.

        Pipeline:
        1. Load the profile (fail fast if missing)
        2. Geocode both ends and compute the reward
        3. Store the ticket image
        4. Persist the trip
        5. Add points / carbon to the profile totals

        Nothing is persisted if any step before 4 fails. If step 4 or 5
        fails, the stored image is removed again before the error propagates.
        """
        profile = await self._profiles.get_by_user(user_id)
        if profile is None:
            raise ProfileNotFoundError(user_id)

        quote = await self._quote.execute(start_location, end_location)
        image_path = await self._storage.store(user_id, image_filename, image_content)

        c = quote.computation
        trip = Trip(
            id=None,
            user_id=user_id,
            start_location=quote.start_location,
            end_location=quote.end_location,
            start_point=quote.start_point,
            end_point=quote.end_point,
            distance_km=c.distance_km,
            points_earned=c.points_earned,
            carbon_saved=c.carbon_saved_kg,
            trees_equivalent=c.trees_equivalent,
            monetary_value=c.monetary_value,
            image_path=image_path,
        )
        try:
            trip = await self._trips.save(trip)
            updated = await self._profiles.add_reward(user_id, c)
        except Exception:
            await self._remove_image(image_path)
            raise

        logger.info(
            "User %s recorded trip %s: +%d points, +%.2f kg CO2 (totals: %d / %.2f)",
            user_id, trip.id, c.points_earned, c.carbon_saved_kg,
            updated.points, updated.total_carbon_saved,
        )
        return RecordedTrip(trip=trip, profile=updated)

    async def discard(self, recorded: RecordedTrip) -> None:
        """Remove the image of a trip whose transaction was not committed."""
        await self._remove_image(recorded.trip.image_path)

    async def _remove_image(self, image_path: str) -> None:
        try:
            await self._storage.delete(image_path)
        except TicketStorageError:
            logger.exception("Could not remove orphaned ticket image %s", image_path)
