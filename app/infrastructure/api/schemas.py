"""Request / response schemas shared by the API routers."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field, model_validator

from app.domain.entities.profile import Profile
from app.domain.entities.trip import Trip
from app.domain.policies.leaderboard import LeaderboardEntry
from app.domain.policies.reward_calculator import TripComputation
from app.domain.value_objects.geo_point import GeoPoint

# ── Requests ────────────────────────────────────────────────────────


class CoordinateIn(BaseModel):
    latitude: float
    longitude: float

    def to_domain(self) -> GeoPoint:
        return GeoPoint(latitude=self.latitude, longitude=self.longitude)


class DistanceRequest(BaseModel):
    start: CoordinateIn
    end: CoordinateIn


class RewardRequest(BaseModel):
    """Either a distance or a pair of coordinates."""

    distance_km: float | None = None
    start: CoordinateIn | None = None
    end: CoordinateIn | None = None

    @model_validator(mode="after")
    def _one_source(self) -> "RewardRequest":
        has_points = self.start is not None and self.end is not None
        partial = (self.start is None) != (self.end is None)
        if partial or (self.distance_km is not None) == has_points:
            raise ValueError("Provide either distance_km or both start and end")
        return self


class QuoteRequest(BaseModel):
    start_location: str = Field(min_length=1)
    end_location: str = Field(min_length=1)


class ProfileCreate(BaseModel):
    user_id: str = Field(min_length=1, max_length=100)
    email: str = Field(min_length=3, max_length=320)


# ── Responses ───────────────────────────────────────────────────────


class CoordinateOut(BaseModel):
    latitude: float
    longitude: float

    @classmethod
    def from_domain(cls, p: GeoPoint) -> "CoordinateOut":
        return cls(latitude=p.latitude, longitude=p.longitude)


class TripComputationOut(BaseModel):
    distance_km: float
    points_earned: int
    carbon_saved_kg: float
    trees_equivalent: int
    monetary_value: float

    @classmethod
    def from_domain(cls, c: TripComputation) -> "TripComputationOut":
        return cls(
            distance_km=c.distance_km,
            points_earned=c.points_earned,
            carbon_saved_kg=c.carbon_saved_kg,
            trees_equivalent=c.trees_equivalent,
            monetary_value=c.monetary_value,
        )


class ProfileOut(BaseModel):
    user_id: str
    email: str
    points: int
    total_carbon_saved: float

    @classmethod
    def from_domain(cls, p: Profile) -> "ProfileOut":
        return cls(
            user_id=p.user_id,
            email=p.email,
            points=p.points,
            total_carbon_saved=p.total_carbon_saved,
        )


class TripOut(BaseModel):
    id: int | None
    start_location: str
    end_location: str
    start: CoordinateOut
    end: CoordinateOut
    distance_km: float
    points_earned: int
    carbon_saved: float
    trees_equivalent: int
    monetary_value: float
    image_path: str
    created_at: datetime | None

    @classmethod
    def from_domain(cls, t: Trip) -> "TripOut":
        return cls(
            id=t.id,
            start_location=t.start_location,
            end_location=t.end_location,
            start=CoordinateOut.from_domain(t.start_point),
            end=CoordinateOut.from_domain(t.end_point),
            distance_km=t.distance_km,
            points_earned=t.points_earned,
            carbon_saved=t.carbon_saved,
            trees_equivalent=t.trees_equivalent,
            monetary_value=t.monetary_value,
            image_path=t.image_path,
            created_at=t.created_at,
        )


class LeaderboardEntryOut(BaseModel):
    position: int
    user_id: str
    email: str
    points: int
    total_carbon_saved: float
    is_current_user: bool

    @classmethod
    def from_domain(cls, e: LeaderboardEntry) -> "LeaderboardEntryOut":
        return cls(
            position=e.position,
            user_id=e.user_id,
            email=e.email,
            points=e.points,
            total_carbon_saved=e.total_carbon_saved,
            is_current_user=e.is_current_user,
        )
