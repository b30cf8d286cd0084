"""Tests for QuoteTripUseCase with an in-memory geocoder."""

from __future__ import annotations

import pytest

from app.application.use_cases.quote_trip import QuoteTripUseCase
from app.domain.errors import InvalidInputError, LocationNotResolvedError
from app.domain.policies.reward_calculator import compute_trip


@pytest.mark.asyncio
async def test_quote_resolves_both_ends(geocoder, kings_cross, heathrow):
    uc = QuoteTripUseCase(geocoder=geocoder)
    quote = await uc.execute("Kings Cross", "Heathrow")
    assert quote.start_point == kings_cross
    assert quote.end_point == heathrow
    assert quote.computation == compute_trip(kings_cross, heathrow)
    assert 20 < quote.computation.distance_km < 30


@pytest.mark.asyncio
async def test_quote_strips_names(geocoder):
    uc = QuoteTripUseCase(geocoder=geocoder)
    quote = await uc.execute("  Kings Cross ", "Heathrow  ")
    assert quote.start_location == "Kings Cross"
    assert quote.end_location == "Heathrow"


@pytest.mark.asyncio
async def test_unresolved_start_raises(geocoder):
    uc = QuoteTripUseCase(geocoder=geocoder)
    with pytest.raises(LocationNotResolvedError) as exc:
        await uc.execute("Atlantis", "Heathrow")
    assert exc.value.query == "Atlantis"


@pytest.mark.asyncio
async def test_unresolved_end_raises(geocoder):
    uc = QuoteTripUseCase(geocoder=geocoder)
    with pytest.raises(LocationNotResolvedError):
        await uc.execute("Kings Cross", "Atlantis")


@pytest.mark.asyncio
@pytest.mark.parametrize(("start", "end"), [("", "Heathrow"), ("Kings Cross", "   "), (None, "Heathrow")])
async def test_blank_location_rejected_before_geocoding(geocoder, start, end):
    uc = QuoteTripUseCase(geocoder=geocoder)
    with pytest.raises(InvalidInputError):
        await uc.execute(start, end)
    assert geocoder.queries == []


@pytest.mark.asyncio
async def test_same_place_is_zero_reward(geocoder):
    uc = QuoteTripUseCase(geocoder=geocoder)
    quote = await uc.execute("Heathrow", "heathrow")
    assert quote.computation.distance_km == 0.0
    assert quote.computation.points_earned == 0
