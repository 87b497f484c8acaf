import pytest
from fastapi.testclient import TestClient

from dealer_search.core.rate_limit import limiter
from dealer_search.main import app
from dealer_search.schemas.build import Vehicle


@pytest.fixture
def client():
    limiter.enabled = False
    try:
        with TestClient(app) as c:
            yield c
    finally:
        limiter.enabled = True
        app.dependency_overrides.clear()


@pytest.fixture
def camry():
    return Vehicle(
        id="VIN123456",
        year=2021,
        make="Toyota",
        model="Camry",
        trim="SE",
        condition="used",
        final_url="https://x/y.htm",
    )


@pytest.fixture
def civic_no_trim():
    return Vehicle(
        id="VIN000001",
        year=2019,
        make="Honda",
        model="Civic",
        condition="new",
        final_url="https://example.com",
    )
