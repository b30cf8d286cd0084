"""In-memory fakes for the application ports."""

from __future__ import annotations

from datetime import datetime, timedelta

import pytest

from app.application.ports.geocoder_port import GeocoderPort
from app.application.ports.profile_repo import ProfileRepository
from app.application.ports.ticket_storage_port import TicketStoragePort
from app.application.ports.trip_repo import TripRepository
from app.domain.entities.profile import Profile
from app.domain.entities.trip import Trip
from app.domain.errors import InvalidTicketImageError, ProfileNotFoundError
from app.domain.value_objects.geo_point import GeoPoint

# ─── In-memory fakes ────────────────────────────────────────────────


class FakeGeocoder(GeocoderPort):
    def __init__(self, places: dict[str, GeoPoint] | None = None):
        self._places = {k.lower(): v for k, v in (places or {}).items()}
        self.queries: list[str] = []

    async def geocode(self, query):
        self.queries.append(query)
        return self._places.get(query.strip().lower())

    async def reverse_geocode(self, point):
        for name, p in self._places.items():
            if p == point:
                return name
        return f"{point.latitude},{point.longitude}"


class FakeTicketStorage(TicketStoragePort):
    def __init__(self):
        self.stored: list[tuple[str, str, bytes]] = []
        self.deleted: list[str] = []

    async def store(self, user_id, filename, content):
        if not content:
            raise InvalidTicketImageError("Ticket image is empty")
        self.stored.append((user_id, filename, content))
        return f"{user_id}/{len(self.stored)}-{filename}"

    async def delete(self, path):
        self.deleted.append(path)


class FakeTripRepo(TripRepository):
    def __init__(self):
        self.trips: list[Trip] = []
        self._clock = datetime(2026, 1, 1, 8, 0)

    async def save(self, trip):
        trip.id = len(self.trips) + 1
        self._clock += timedelta(minutes=1)
        trip.created_at = self._clock
        self.trips.append(trip)
        return trip

    async def get_recent(self, user_id, limit):
        mine = [t for t in self.trips if t.user_id == user_id]
        return sorted(mine, key=lambda t: t.created_at, reverse=True)[:limit]

    async def count_by_user(self, user_id):
        return sum(1 for t in self.trips if t.user_id == user_id)


class FakeProfileRepo(ProfileRepository):
    def __init__(self, profiles: list[Profile] | None = None):
        self.profiles: dict[str, Profile] = {p.user_id: p for p in profiles or []}

    async def save(self, profile):
        profile.id = len(self.profiles) + 1
        self.profiles[profile.user_id] = profile
        return profile

    async def get_by_user(self, user_id):
        return self.profiles.get(user_id)

    async def add_reward(self, user_id, computation):
        profile = self.profiles.get(user_id)
        if profile is None:
            raise ProfileNotFoundError(user_id)
        updated = profile.apply(computation)
        self.profiles[user_id] = updated
        return updated

    async def get_top(self, limit):
        ordered = sorted(self.profiles.values(), key=lambda p: -p.points)
        return ordered[:limit]


# ─── Fixtures ────────────────────────────────────────────────────────


KINGS_CROSS = GeoPoint(latitude=51.530400, longitude=-0.123800)
HEATHROW = GeoPoint(latitude=51.470000, longitude=-0.454300)


@pytest.fixture
def geocoder():
    return FakeGeocoder({"Kings Cross": KINGS_CROSS, "Heathrow": HEATHROW})


@pytest.fixture
def storage():
    return FakeTicketStorage()


@pytest.fixture
def trip_repo():
    return FakeTripRepo()


@pytest.fixture
def profile_repo():
    return FakeProfileRepo([Profile(id=1, user_id="u-1", email="ana@example.com")])


@pytest.fixture
def kings_cross():
    return KINGS_CROSS


@pytest.fixture
def heathrow():
    return HEATHROW
