import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

import requests
from pydantic import TypeAdapter, ValidationError

from dealer_search.core import config
from dealer_search.schemas.build import Vehicle

logger = logging.getLogger(__name__)

_vehicle_list = TypeAdapter(List[Vehicle])


class InventoryUnavailableError(Exception):
    """The inventory source could not return a usable vehicle list."""


class InventoryProvider(ABC):
    """Source of vehicles for a dealership. Callers only see the Vehicle list."""

    @abstractmethod
    def get_vehicles(self, dealership_url: str) -> List[Vehicle]:
        ...


# ----------------------------------------
# STATIC DEMO FIXTURES
# ----------------------------------------
DEMO_DEALER_HOST = "autonationtoyotafortmyers.com"
FALLBACK_FINAL_URL = "https://example.com"

_FORT_MYERS_VEHICLES = [
    Vehicle(
        id="VIN123456",
        year=2021,
        make="Toyota",
        model="Camry",
        trim="SE",
        condition="used",
        final_url="https://www.autonationtoyotafortmyers.com/used/Toyota/2021-Toyota-Camry-VIN123456.htm",
        city="Fort Myers",
    ),
    Vehicle(
        id="VIN987654",
        year=2020,
        make="Toyota",
        model="RAV4",
        trim="XLE",
        condition="used",
        final_url="https://www.autonationtoyotafortmyers.com/used/Toyota/2020-Toyota-RAV4-VIN987654.htm",
        city="Fort Myers",
    ),
]


class StaticInventoryProvider(InventoryProvider):
    """Demo inventory keyed by a substring of the dealership URL.

    Unknown (or empty) URLs get a single generic Honda Civic pointing back
    at the given URL.
    """

    def get_vehicles(self, dealership_url: str) -> List[Vehicle]:
        if DEMO_DEALER_HOST in dealership_url:
            return list(_FORT_MYERS_VEHICLES)

        return [
            Vehicle(
                id="VIN000001",
                year=2019,
                make="Honda",
                model="Civic",
                trim="EX",
                condition="used",
                final_url=dealership_url or FALLBACK_FINAL_URL,
                city=None,
            )
        ]


# ----------------------------------------
# LIVE INVENTORY API
# ----------------------------------------
class LiveInventoryProvider(InventoryProvider):
    """Fetches vehicles from an inventory API over HTTP.

    The endpoint is called as ``GET {api_url}?dealershipUrl=...`` and must
    answer with a JSON list of vehicles, or an object with a ``vehicles`` list.
    """

    def __init__(self, api_url: Optional[str] = None, api_key: Optional[str] = None, timeout: Optional[float] = None):
        self.api_url = api_url or config.INVENTORY_API_URL
        if not self.api_url:
            raise ValueError("INVENTORY_API_URL is not set in environment")
        self.api_key = api_key or config.INVENTORY_API_KEY
        self.timeout = timeout if timeout is not None else config.INVENTORY_TIMEOUT

    def _headers(self) -> Dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        return headers

    def get_vehicles(self, dealership_url: str) -> List[Vehicle]:
        logger.debug(f"Requesting inventory for '{dealership_url}' from {self.api_url}")
        try:
            resp = requests.get(
                self.api_url,
                params={"dealershipUrl": dealership_url},
                headers=self._headers(),
                timeout=self.timeout,
            )
            resp.raise_for_status()
            payload: Any = resp.json()
        except requests.RequestException as e:
            logger.error(f"Inventory request failed for '{dealership_url}': {e}")
            raise InventoryUnavailableError(f"Inventory request failed: {e}") from e
        except ValueError as e:
            # Body was not JSON
            raise InventoryUnavailableError(f"Inventory response is not JSON: {e}") from e

        if isinstance(payload, dict):
            payload = payload.get("vehicles")

        try:
            vehicles = _vehicle_list.validate_python(payload)
        except ValidationError as e:
            logger.error(f"Inventory payload rejected: {e.error_count()} errors")
            raise InventoryUnavailableError(f"Invalid inventory payload: {e}") from e

        logger.info(f"Loaded {len(vehicles)} vehicles for '{dealership_url}'")
        return vehicles


def get_inventory_provider(kind: Optional[str] = None) -> InventoryProvider:
    """Return the provider named by ``kind`` or INVENTORY_PROVIDER ("static" / "live")."""
    kind = (kind or config.INVENTORY_PROVIDER).lower()
    if kind == "static":
        return StaticInventoryProvider()
    if kind == "live":
        return LiveInventoryProvider()
    raise ValueError(f"Unknown INVENTORY_PROVIDER: {kind}. Use 'static' or 'live'.")
