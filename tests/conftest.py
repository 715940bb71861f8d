"""
Pytest configuration and shared fixtures.
"""

from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from app.clients.ohana import OhanaClient
from app.core.dependencies import get_search_service
from app.services.search import SearchService
from schemas.location import Location


# ============================================================
# Mock Ohana API Data
# ============================================================


@pytest.fixture
def location_data():
    """A location as returned by the Ohana search endpoint."""
    return {
        "id": 1,
        "name": "San Mateo County Human Services Agency",
        "slug": "san-mateo-county-human-services-agency",
        "short_desc": "Provides CalFresh and Medi-Cal enrollment.",
        "latitude": 37.5630,
        "longitude": -122.3255,
        "address": {
            "street_1": "400 Harbor Blvd",
            "city": "Belmont",
            "state_province": "CA",
            "postal_code": "94002",
        },
        "organization": {"id": 7, "name": "San Mateo County", "slug": "san-mateo-county"},
        "updated_at": "2014-06-01T12:00:00-07:00",
    }


@pytest.fixture
def locations(location_data):
    return [Location(**location_data)]


# ============================================================
# Service Fixtures
# ============================================================


@pytest.fixture
def mock_client():
    """Ohana client double; every call returns an empty list by default."""
    client = MagicMock(spec=OhanaClient)
    client.search.return_value = []
    client.locations.return_value = []
    return client


@pytest.fixture
def service(mock_client):
    return SearchService(client=mock_client)


@pytest.fixture
def api(service):
    """FastAPI test client wired to the mocked service."""
    from app.main import app

    app.dependency_overrides[get_search_service] = lambda: service
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()
