"""RewardCalculator — turn a sustainable trip into points and carbon credit.

Pure functions only: no I/O, no clock, no shared state. Every screen that
shows or records a trip reward goes through here.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from app.domain.errors import InvalidInputError
from app.domain.value_objects.geo_point import EARTH_RADIUS_KM, GeoPoint

POINTS_PER_KM = 10
CARBON_KG_PER_KM = 0.12  # kg CO2 avoided per km vs. driving
MONETARY_VALUE_PER_KG = 2.5  # USD per kg CO2
CARBON_KG_PER_TREE = 22  # kg CO2 one tree absorbs per year

MAX_DISTANCE_KM = math.pi * EARTH_RADIUS_KM


@dataclass(frozen=True)
class TripComputation:
    """Reward derived from a single trip distance."""

    distance_km: float
    points_earned: int
    carbon_saved_kg: float
    trees_equivalent: int
    monetary_value: float


def compute_distance_km(a: GeoPoint, b: GeoPoint) -> float:
    """Great-circle distance between two points, in km.

    Symmetric, zero for identical points and never above pi * R.

    Raises:
        InvalidInputError: if either argument is not a GeoPoint.
    """
    if not isinstance(a, GeoPoint) or not isinstance(b, GeoPoint):
        raise InvalidInputError("Both coordinates must be resolved GeoPoints")
    if a == b:
        return 0.0
    return a.haversine_km(b)


def compute_reward(distance_km: float) -> TripComputation:
    """Derive points, carbon saved and display metrics from a distance.

    Args:
        distance_km: non-negative trip length in km.

    Returns:
        TripComputation; every field is non-decreasing in distance_km.

    Raises:
        InvalidInputError: if distance_km is negative, NaN, infinite or not a number.
    """
    if isinstance(distance_km, bool) or not isinstance(distance_km, (int, float)):
        raise InvalidInputError(f"Distance must be a number, got {distance_km!r}")
    if isinstance(distance_km, float) and not math.isfinite(distance_km):
        raise InvalidInputError(f"Distance must be finite, got {distance_km}")
    if distance_km < 0:
        raise InvalidInputError(f"Distance cannot be negative: {distance_km}")

    try:
        distance_km = float(distance_km)
    except OverflowError:
        raise InvalidInputError(f"Distance is too large: {distance_km}") from None
    carbon_saved = round_half_up(distance_km * CARBON_KG_PER_KM, 2)

    return TripComputation(
        distance_km=distance_km,
        points_earned=int(round_half_up(distance_km * POINTS_PER_KM)),
        carbon_saved_kg=carbon_saved,
        trees_equivalent=math.floor(carbon_saved / CARBON_KG_PER_TREE),
        monetary_value=round_half_up(carbon_saved * MONETARY_VALUE_PER_KG, 2),
    )


def compute_trip(a: GeoPoint, b: GeoPoint) -> TripComputation:
    """Distance and reward for a trip from a to b."""
    return compute_reward(compute_distance_km(a, b))


def round_half_up(value: float, places: int = 0) -> float:
    """Round halves away from zero for non-negative values.

    Built-in round() uses banker's rounding, which would award 2 points
    for 0.25 km instead of 3.

    Raises:
        InvalidInputError: if value is too large to scale to the given places.
    """
    factor = 10 ** places
    scaled = value * factor
    if not math.isfinite(scaled):
        raise InvalidInputError(f"Value is too large to round: {value}")
    return math.floor(scaled + 0.5) / factor
