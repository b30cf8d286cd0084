"""Tests for the geocoder adapters — httpx.MockTransport, no network."""

import httpx
import pytest

from app.adapters.geocoder.mapbox_adapter import MapboxAdapter
from app.adapters.geocoder.nominatim_adapter import NominatimAdapter
from app.domain.value_objects.geo_point import GeoPoint


def _transport(handler, calls: list):
    def _record(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return handler(request)

    return httpx.MockTransport(_record)


# ─── Nominatim ───────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_nominatim_geocode_parses_first_result():
    calls = []
    transport = _transport(
        lambda r: httpx.Response(200, json=[{"lat": "51.5304", "lon": "-0.1238"}]), calls
    )
    adapter = NominatimAdapter(user_agent="test-agent", transport=transport)

    point = await adapter.geocode("Kings Cross, London")

    assert point == GeoPoint(latitude=51.5304, longitude=-0.1238)
    assert calls[0].url.path == "/search"
    assert calls[0].url.params["q"] == "Kings Cross, London"
    assert calls[0].headers["User-Agent"] == "test-agent"


@pytest.mark.asyncio
async def test_nominatim_retries_without_house_number():
    calls = []

    def handler(request):
        if any(ch.isdigit() for ch in request.url.params["q"]):
            return httpx.Response(200, json=[])
        return httpx.Response(200, json=[{"lat": "48.85", "lon": "2.35"}])

    adapter = NominatimAdapter(user_agent="t", transport=_transport(handler, calls))
    point = await adapter.geocode("12 Rue de Rivoli, Paris")

    assert point == GeoPoint(latitude=48.85, longitude=2.35)
    assert [c.url.params["q"] for c in calls] == ["12 Rue de Rivoli, Paris", "Rue de Rivoli Paris"]


@pytest.mark.asyncio
async def test_nominatim_no_results_returns_none():
    calls = []
    adapter = NominatimAdapter(
        user_agent="t", transport=_transport(lambda r: httpx.Response(200, json=[]), calls)
    )
    assert await adapter.geocode("Atlantis") is None


@pytest.mark.asyncio
async def test_nominatim_http_error_returns_none():
    calls = []
    adapter = NominatimAdapter(
        user_agent="t", transport=_transport(lambda r: httpx.Response(503), calls)
    )
    assert await adapter.geocode("London") is None


@pytest.mark.asyncio
async def test_nominatim_failure_is_not_cached():
    calls = []
    responses = [
        httpx.Response(503),
        httpx.Response(200, json=[{"lat": "51.5074", "lon": "-0.1278"}]),
    ]
    adapter = NominatimAdapter(
        user_agent="t", transport=_transport(lambda r: responses.pop(0), calls)
    )

    assert await adapter.geocode("London") is None
    assert await adapter.geocode("London") == GeoPoint(latitude=51.5074, longitude=-0.1278)
    assert len(calls) == 2


@pytest.mark.asyncio
async def test_nominatim_no_results_is_cached():
    calls = []
    adapter = NominatimAdapter(
        user_agent="t", transport=_transport(lambda r: httpx.Response(200, json=[]), calls)
    )

    assert await adapter.geocode("Atlantis") is None
    assert await adapter.geocode("atlantis") is None
    assert len(calls) == 1


@pytest.mark.asyncio
async def test_nominatim_cache_deduplicates():
    """Same query (any case / padding) should hit the network once."""
    calls = []
    adapter = NominatimAdapter(
        user_agent="t",
        transport=_transport(lambda r: httpx.Response(200, json=[{"lat": "1", "lon": "2"}]), calls),
    )
    r1 = await adapter.geocode("London")
    r2 = await adapter.geocode("  london  ")
    assert r1 is r2
    assert len(calls) == 1


@pytest.mark.asyncio
async def test_nominatim_blank_query_skips_network():
    calls = []
    adapter = NominatimAdapter(
        user_agent="t", transport=_transport(lambda r: httpx.Response(500), calls)
    )
    assert await adapter.geocode("   ") is None
    assert calls == []


@pytest.mark.asyncio
async def test_nominatim_reverse_geocode():
    calls = []
    adapter = NominatimAdapter(
        user_agent="t",
        transport=_transport(lambda r: httpx.Response(200, json={"display_name": "Camden, London"}), calls),
    )
    name = await adapter.reverse_geocode(GeoPoint(latitude=51.54, longitude=-0.14))
    assert name == "Camden, London"
    assert calls[0].url.path == "/reverse"


@pytest.mark.asyncio
async def test_nominatim_reverse_geocode_falls_back_to_coordinates():
    calls = []
    adapter = NominatimAdapter(
        user_agent="t", transport=_transport(lambda r: httpx.Response(500), calls)
    )
    name = await adapter.reverse_geocode(GeoPoint(latitude=51.5, longitude=-0.1))
    assert name == "51.5,-0.1"


def test_build_queries_single_variant_without_digits():
    assert NominatimAdapter._build_queries("Paris") == ["Paris"]


# ─── Mapbox ──────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_mapbox_center_is_lon_lat():
    calls = []
    payload = {"features": [{"center": [-0.1238, 51.5304], "place_name": "Kings Cross"}]}
    adapter = MapboxAdapter(
        api_key="pk.test", transport=_transport(lambda r: httpx.Response(200, json=payload), calls)
    )
    point = await adapter.geocode("Kings Cross")

    assert point == GeoPoint(latitude=51.5304, longitude=-0.1238)
    assert calls[0].url.params["access_token"] == "pk.test"
    assert "/mapbox.places/Kings%20Cross.json" in str(calls[0].url)


@pytest.mark.asyncio
async def test_mapbox_no_features_returns_none():
    calls = []
    adapter = MapboxAdapter(
        api_key="pk.test",
        transport=_transport(lambda r: httpx.Response(200, json={"features": []}), calls),
    )
    assert await adapter.geocode("Atlantis") is None


@pytest.mark.asyncio
async def test_mapbox_invalid_center_returns_none():
    calls = []
    payload = {"features": [{"center": [500.0, 51.5]}]}
    adapter = MapboxAdapter(
        api_key="pk.test", transport=_transport(lambda r: httpx.Response(200, json=payload), calls)
    )
    assert await adapter.geocode("Broken") is None


@pytest.mark.asyncio
async def test_mapbox_without_key_skips_network():
    calls = []
    adapter = MapboxAdapter(api_key="", transport=_transport(lambda r: httpx.Response(500), calls))
    adapter._api_key = ""
    assert await adapter.geocode("London") is None
    assert calls == []


@pytest.mark.asyncio
async def test_mapbox_reverse_geocode():
    calls = []
    payload = {"features": [{"place_name": "Soho, London, England"}]}
    adapter = MapboxAdapter(
        api_key="pk.test", transport=_transport(lambda r: httpx.Response(200, json=payload), calls)
    )
    name = await adapter.reverse_geocode(GeoPoint(latitude=51.513, longitude=-0.136))
    assert name == "Soho, London, England"
    assert calls[0].url.path.endswith("/-0.136,51.513.json")


@pytest.mark.asyncio
async def test_mapbox_error_log_hides_access_token(caplog):
    calls = []
    adapter = MapboxAdapter(
        api_key="pk.secret-token", transport=_transport(lambda r: httpx.Response(401), calls)
    )

    with caplog.at_level("ERROR"):
        assert await adapter.geocode("London") is None

    assert "401" in caplog.text
    assert "pk.secret-token" not in caplog.text


@pytest.mark.asyncio
async def test_mapbox_failure_is_not_cached():
    calls = []
    payload = {"features": [{"center": [-0.1278, 51.5074]}]}
    responses = [httpx.Response(503), httpx.Response(200, json=payload)]
    adapter = MapboxAdapter(
        api_key="pk.test", transport=_transport(lambda r: responses.pop(0), calls)
    )

    assert await adapter.geocode("London") is None
    assert await adapter.geocode("London") == GeoPoint(latitude=51.5074, longitude=-0.1278)
    assert len(calls) == 2
