"""Mapbox geocoder adapter — implements GeocoderPort."""

from __future__ import annotations

import logging
from urllib.parse import quote

import httpx

from app.application.ports.geocoder_port import GeocoderPort
from app.config import settings
from app.domain.value_objects.geo_point import GeoPoint

logger = logging.getLogger(__name__)

MAPBOX_PLACES_URL = "https://api.mapbox.com/geocoding/v5/mapbox.places"


class MapboxAdapter(GeocoderPort):
    """Mapbox Places implementation of GeocoderPort."""

    def __init__(
        self,
        api_key: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._api_key = api_key or settings.mapbox_api_key
        self._timeout = timeout or settings.geocoder_timeout
        self._transport = transport
        self._cache: dict[str, GeoPoint | None] = {}

    async def geocode(self, query: str) -> GeoPoint | None:
        """Geocode a place name; the first (best) feature wins."""
        if not self._api_key:
            logger.warning("Mapbox API key is not set. Skipping geocoding.")
            return None

        cache_key = query.strip().lower()
        if not cache_key:
            return None
        if cache_key in self._cache:
            return self._cache[cache_key]

        try:
            data = await self._get(f"{quote(query.strip(), safe='')}.json", {"autocomplete": "true", "limit": 5})
        except Exception:
            logger.exception("Mapbox API error for '%s'", query)
            return None

        point = self._first_center(data)
        if point:
            logger.info("Mapbox resolved '%s' → (%f, %f)", query, point.latitude, point.longitude)
        else:
            logger.warning("Mapbox could not resolve '%s'", query)
        self._cache[cache_key] = point
        return point

    async def reverse_geocode(self, point: GeoPoint) -> str:
        fallback = f"{point.latitude},{point.longitude}"
        if not self._api_key:
            return fallback

        try:
            data = await self._get(f"{point.longitude},{point.latitude}.json", {})
        except Exception:
            logger.exception("Mapbox reverse geocoding error for %s", fallback)
            return fallback

        features = data.get("features") or []
        if features and features[0].get("place_name"):
            return features[0]["place_name"]
        return fallback

    async def _get(self, path: str, params: dict) -> dict:
        async with httpx.AsyncClient(transport=self._transport) as client:
            response = await client.get(
                f"{MAPBOX_PLACES_URL}/{path}",
                params={**params, "access_token": self._api_key},
                timeout=self._timeout,
            )
            try:
                response.raise_for_status()
            except httpx.HTTPStatusError as e:
                # The request URL carries the access token
                raise httpx.HTTPStatusError(
                    self._redact(str(e)), request=e.request, response=e.response
                ) from None
            return response.json()

    def _redact(self, text: str) -> str:
        return text.replace(self._api_key, "***") if self._api_key else text

    @staticmethod
    def _first_center(data: dict) -> GeoPoint | None:
        """Mapbox returns `center` as [lon, lat]."""
        features = data.get("features") or []
        if not features:
            return None
        center = features[0].get("center")
        if not center or len(center) != 2:
            return None
        try:
            return GeoPoint(latitude=float(center[1]), longitude=float(center[0]))
        except (TypeError, ValueError):
            logger.warning("Mapbox returned an invalid center: %r", center)
            return None
