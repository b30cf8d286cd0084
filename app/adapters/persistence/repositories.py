"""SQLAlchemy repository implementations."""

from __future__ import annotations

from sqlalchemy import Float, Numeric, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.adapters.persistence.models import ProfileModel, TripModel
from app.application.ports.profile_repo import ProfileRepository
from app.application.ports.trip_repo import TripRepository
from app.domain.entities.profile import Profile
from app.domain.entities.trip import Trip
from app.domain.errors import ProfileNotFoundError
from app.domain.policies.reward_calculator import TripComputation
from app.domain.value_objects.geo_point import GeoPoint

# ─── Mappers ─────────────────────────────────────────────────────────


def _profile_to_domain(m: ProfileModel) -> Profile:
    return Profile(
        id=m.id,
        user_id=m.user_id,
        email=m.email,
        points=m.points,
        total_carbon_saved=m.total_carbon_saved,
        created_at=m.created_at,
    )


def _trip_to_domain(m: TripModel) -> Trip:
    return Trip(
        id=m.id,
        user_id=m.user_id,
        start_location=m.start_location,
        end_location=m.end_location,
        start_point=GeoPoint(latitude=m.start_lat, longitude=m.start_lon),
        end_point=GeoPoint(latitude=m.end_lat, longitude=m.end_lon),
        distance_km=m.distance_km,
        points_earned=m.points_earned,
        carbon_saved=m.carbon_saved,
        trees_equivalent=m.trees_equivalent,
        monetary_value=m.monetary_value,
        image_path=m.image_path,
        created_at=m.created_at,
    )


# ─── Repositories ────────────────────────────────────────────────────


class SqlProfileRepository(ProfileRepository):
    def __init__(self, session: AsyncSession):
        self._s = session

    async def save(self, profile: Profile) -> Profile:
        m = ProfileModel(
            user_id=profile.user_id,
            email=profile.email,
            points=profile.points,
            total_carbon_saved=profile.total_carbon_saved,
        )
        self._s.add(m)
        await self._s.flush()
        profile.id = m.id
        return profile

    async def get_by_user(self, user_id: str) -> Profile | None:
        result = await self._s.execute(
            select(ProfileModel).where(ProfileModel.user_id == user_id)
        )
        m = result.scalar_one_or_none()
        return _profile_to_domain(m) if m else None

    async def add_reward(self, user_id: str, computation: TripComputation) -> Profile:
        result = await self._s.execute(
            update(ProfileModel)
            .where(ProfileModel.user_id == user_id)
            .values(
                points=ProfileModel.points + computation.points_earned,
                total_carbon_saved=func.round(
                    (ProfileModel.total_carbon_saved + computation.carbon_saved_kg).cast(Numeric), 2
                ).cast(Float),
            )
            .returning(ProfileModel)
        )
        m = result.scalar_one_or_none()
        if m is None:
            raise ProfileNotFoundError(user_id)
        await self._s.flush()
        return _profile_to_domain(m)

    async def get_top(self, limit: int) -> list[Profile]:
        result = await self._s.execute(
            select(ProfileModel)
            .order_by(
                ProfileModel.points.desc(),
                ProfileModel.total_carbon_saved.desc(),
                ProfileModel.email,
            )
            .limit(limit)
        )
        return [_profile_to_domain(m) for m in result.scalars()]


class SqlTripRepository(TripRepository):
    def __init__(self, session: AsyncSession):
        self._s = session

    async def save(self, trip: Trip) -> Trip:
        m = TripModel(
            user_id=trip.user_id,
            start_location=trip.start_location,
            end_location=trip.end_location,
            start_lat=trip.start_point.latitude,
            start_lon=trip.start_point.longitude,
            end_lat=trip.end_point.latitude,
            end_lon=trip.end_point.longitude,
            distance_km=trip.distance_km,
            points_earned=trip.points_earned,
            carbon_saved=trip.carbon_saved,
            trees_equivalent=trip.trees_equivalent,
            monetary_value=trip.monetary_value,
            image_path=trip.image_path,
        )
        self._s.add(m)
        await self._s.flush()
        await self._s.refresh(m, attribute_names=["created_at"])
        trip.id = m.id
        trip.created_at = m.created_at
        return trip

    async def get_recent(self, user_id: str, limit: int) -> list[Trip]:
        result = await self._s.execute(
            select(TripModel)
            .where(TripModel.user_id == user_id)
            .order_by(TripModel.created_at.desc(), TripModel.id.desc())
            .limit(limit)
        )
        return [_trip_to_domain(m) for m in result.scalars()]

    async def count_by_user(self, user_id: str) -> int:
        result = await self._s.execute(
            select(func.count(TripModel.id)).where(TripModel.user_id == user_id)
        )
        return result.scalar() or 0
