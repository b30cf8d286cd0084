"""Pytest configuration and shared fixtures."""

import pytest

from app.domain.value_objects.geo_point import GeoPoint


@pytest.fixture
def london():
    return GeoPoint(latitude=51.507351, longitude=-0.127758)


@pytest.fixture
def paris():
    return GeoPoint(latitude=48.856614, longitude=2.352222)


@pytest.fixture
def equator_origin():
    return GeoPoint(latitude=0.0, longitude=0.0)
