"""Shared pytest fixtures for all tests."""

import pytest
from zoneinfo import ZoneInfo

from suntimes.location import Location


@pytest.fixture
def melbourne():
    """Melbourne at sea level."""
    return Location("Melbourne", -37.50, 145.01, 0, ZoneInfo("Australia/Melbourne"))


@pytest.fixture
def london():
    return Location("London", 51.5074, -0.1278, 11, ZoneInfo("Europe/London"))


@pytest.fixture
def new_york():
    return Location("New York", 40.7128, -74.0060, 10, ZoneInfo("America/New_York"))


@pytest.fixture
def helsinki():
    """Latitude 60 N: white nights in June, civil twilight past midnight."""
    return Location("Helsinki", 60.17, 24.94, 0, ZoneInfo("Europe/Helsinki"))


@pytest.fixture
def tromso():
    """Latitude 70 N: polar night in December, midnight sun in June."""
    return Location("Tromso", 70.0, 19.0, 0, ZoneInfo("Europe/Oslo"))


@pytest.fixture
def test_client():
    """FastAPI test client (runs the app lifespan)."""
    from fastapi.testclient import TestClient
    from suntimes.main import app

    with TestClient(app) as client:
        yield client
