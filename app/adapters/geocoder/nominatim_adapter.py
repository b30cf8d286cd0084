"""Nominatim geocoder adapter — implements GeocoderPort."""

from __future__ import annotations

import logging

import httpx

from app.application.ports.geocoder_port import GeocoderPort
from app.config import settings
from app.domain.value_objects.geo_point import GeoPoint

logger = logging.getLogger(__name__)

NOMINATIM_BASE_URL = "https://nominatim.openstreetmap.org"


class NominatimAdapter(GeocoderPort):
    """OpenStreetMap Nominatim geocoding with query variants and caching."""

    def __init__(
        self,
        user_agent: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._user_agent = user_agent or settings.geocoder_user_agent
        self._timeout = timeout or settings.geocoder_timeout
        self._transport = transport
        self._cache: dict[str, GeoPoint | None] = {}

    async def geocode(self, query: str) -> GeoPoint | None:
        """Geocode a place name to GeoPoint.

        Strategy:
        1. Check in-memory cache
        2. Try the full query
        3. Try a broader query without house numbers

        Only definitive answers are cached; a failed request is retried next time.
        """
        cache_key = query.strip().lower()
        if not cache_key:
            return None

        if cache_key in self._cache:
            logger.debug("Cache hit for '%s'", query)
            return self._cache[cache_key]

        try:
            point = await self._search(query)
        except Exception:
            logger.exception("Nominatim API error for '%s'", query)
            return None

        self._cache[cache_key] = point
        return point

    async def reverse_geocode(self, point: GeoPoint) -> str:
        fallback = f"{point.latitude},{point.longitude}"
        try:
            async with httpx.AsyncClient(transport=self._transport) as client:
                response = await client.get(
                    f"{NOMINATIM_BASE_URL}/reverse",
                    params={"lat": point.latitude, "lon": point.longitude, "format": "json"},
                    headers={"User-Agent": self._user_agent},
                    timeout=self._timeout,
                )
                response.raise_for_status()
                data = response.json()
        except Exception:
            logger.exception("Nominatim reverse geocoding error for %s", fallback)
            return fallback

        return data.get("display_name") or fallback

    async def _search(self, query: str) -> GeoPoint | None:
        """Query Nominatim /search with each query variant in turn.

        Returns None when no variant matches; transport and HTTP errors propagate.
        """
        async with httpx.AsyncClient(transport=self._transport) as client:
            for q in self._build_queries(query):
                response = await client.get(
                    f"{NOMINATIM_BASE_URL}/search",
                    params={"q": q, "format": "json", "limit": 1},
                    headers={"User-Agent": self._user_agent},
                    timeout=self._timeout,
                )
                response.raise_for_status()
                results = response.json()

                if results:
                    point = GeoPoint(
                        latitude=float(results[0]["lat"]),
                        longitude=float(results[0]["lon"]),
                    )
                    logger.info(
                        "Nominatim resolved '%s' (q='%s') → (%f, %f)",
                        query, q, point.latitude, point.longitude,
                    )
                    return point

        logger.warning("Nominatim returned no results for '%s'", query)
        return None

    @staticmethod
    def _build_queries(query: str) -> list[str]:
        """Build a few query variants for better hit rate.

        1) full query
        2) without house numbers (more robust for small streets)
        """
        q1 = query.strip()
        q2 = " ".join(
            p for p in q1.replace(",", " ").split() if not any(ch.isdigit() for ch in p)
        )
        queries = [q1]
        if q2 and q2.lower() != q1.lower():
            queries.append(q2)
        return queries
