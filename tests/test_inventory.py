import pytest
import requests

from dealer_search.services import inventory
from dealer_search.services.inventory import (
    InventoryUnavailableError,
    LiveInventoryProvider,
    StaticInventoryProvider,
    get_inventory_provider,
)

API_URL = "https://inventory.test/vehicles"


class FakeResponse:
    def __init__(self, payload=None, status_code=200, json_error=None):
        self._payload = payload
        self.status_code = status_code
        self._json_error = json_error

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Server Error")

    def json(self):
        if self._json_error:
            raise self._json_error
        return self._payload


def _patch_get(monkeypatch, response, calls=None):
    def fake_get(url, params=None, headers=None, timeout=None):
        if calls is not None:
            calls.append({"url": url, "params": params, "headers": headers, "timeout": timeout})
        if isinstance(response, Exception):
            raise response
        return response

    monkeypatch.setattr(inventory.requests, "get", fake_get)


# ----------------------------------------
# static provider
# ----------------------------------------
def test_static_demo_dealer_returns_two_toyotas():
    vehicles = StaticInventoryProvider().get_vehicles("https://www.autonationtoyotafortmyers.com/used")

    assert [v.id for v in vehicles] == ["VIN123456", "VIN987654"]
    assert [v.model for v in vehicles] == ["Camry", "RAV4"]
    assert all(v.condition == "used" and v.city == "Fort Myers" for v in vehicles)


def test_static_unknown_dealer_falls_back_to_civic_with_given_url():
    vehicles = StaticInventoryProvider().get_vehicles("https://some-dealer.com")

    assert len(vehicles) == 1
    assert vehicles[0].id == "VIN000001"
    assert vehicles[0].final_url == "https://some-dealer.com"
    assert vehicles[0].city is None


def test_static_empty_url_uses_example_final_url():
    vehicles = StaticInventoryProvider().get_vehicles("")
    assert vehicles[0].final_url == "https://example.com"


def test_static_lists_are_fresh_copies():
    provider = StaticInventoryProvider()
    first = provider.get_vehicles("autonationtoyotafortmyers.com")
    first.clear()
    assert len(provider.get_vehicles("autonationtoyotafortmyers.com")) == 2


# ----------------------------------------
# live provider
# ----------------------------------------
def test_live_parses_vehicle_list(monkeypatch):
    calls = []
    payload = [
        {"id": "A1", "year": 2022, "make": "Kia", "model": "Telluride", "trim": None,
         "condition": "certified", "finalUrl": "https://d.test/a1", "city": "Tampa"},
    ]
    _patch_get(monkeypatch, FakeResponse(payload), calls)

    vehicles = LiveInventoryProvider(api_url=API_URL, api_key="secret", timeout=3).get_vehicles("https://d.test")

    assert vehicles[0].final_url == "https://d.test/a1"
    assert vehicles[0].condition == "certified"
    assert calls[0]["url"] == API_URL
    assert calls[0]["params"] == {"dealershipUrl": "https://d.test"}
    assert calls[0]["headers"]["Authorization"] == "Bearer secret"
    assert calls[0]["timeout"] == 3


def test_live_accepts_wrapped_payload(monkeypatch):
    payload = {"vehicles": [
        {"id": "B2", "year": 2018, "make": "Ford", "model": "Escape",
         "condition": "used", "finalUrl": "https://d.test/b2"},
    ]}
    _patch_get(monkeypatch, FakeResponse(payload))

    vehicles = LiveInventoryProvider(api_url=API_URL).get_vehicles("https://d.test")
    assert [v.id for v in vehicles] == ["B2"]


@pytest.mark.parametrize(
    "response",
    [
        requests.ConnectionError("connection refused"),
        FakeResponse([], status_code=503),
        FakeResponse(json_error=ValueError("Expecting value")),
        FakeResponse({"items": []}),
        FakeResponse([{"id": "C3", "year": 2020, "make": "Ford", "model": "Edge",
                       "condition": "salvage", "finalUrl": "https://d.test/c3"}]),
    ],
)
def test_live_failures_raise_inventory_unavailable(monkeypatch, response):
    _patch_get(monkeypatch, response)

    with pytest.raises(InventoryUnavailableError):
        LiveInventoryProvider(api_url=API_URL).get_vehicles("https://d.test")


def test_live_requires_api_url(monkeypatch):
    monkeypatch.setattr(inventory.config, "INVENTORY_API_URL", None)
    with pytest.raises(ValueError, match="INVENTORY_API_URL"):
        LiveInventoryProvider()


# ----------------------------------------
# factory
# ----------------------------------------
def test_factory_selects_provider(monkeypatch):
    monkeypatch.setattr(inventory.config, "INVENTORY_API_URL", API_URL)

    assert isinstance(get_inventory_provider("static"), StaticInventoryProvider)
    assert isinstance(get_inventory_provider("LIVE"), LiveInventoryProvider)


def test_factory_defaults_to_config(monkeypatch):
    monkeypatch.setattr(inventory.config, "INVENTORY_PROVIDER", "static")
    assert isinstance(get_inventory_provider(), StaticInventoryProvider)


def test_factory_rejects_unknown_kind():
    with pytest.raises(ValueError, match="Unknown INVENTORY_PROVIDER"):
        get_inventory_provider("scraper")
