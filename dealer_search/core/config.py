import os

# Loads the .env file for the current ENV before anything is read below
from dealer_search.core import env  # noqa: F401

# Campaign written into every generated row
CAMPAIGN_NAME = os.getenv("CAMPAIGN_NAME", "Dealer Search – Staging")

# Inventory source: "static" (demo fixtures) or "live" (inventory API)
INVENTORY_PROVIDER = os.getenv("INVENTORY_PROVIDER", "static").lower()
INVENTORY_API_URL = os.getenv("INVENTORY_API_URL")
INVENTORY_API_KEY = os.getenv("INVENTORY_API_KEY")
INVENTORY_TIMEOUT = float(os.getenv("INVENTORY_TIMEOUT", "10"))

# Per-IP limit for POST /api/build (slowapi syntax)
BUILD_RATE_LIMIT = os.getenv("BUILD_RATE_LIMIT", "30/minute")

# Frontends allowed by CORS
FRONTEND_URL = os.getenv("FRONTEND_URL", "http://localhost:3000")
FRONTEND_URL_PROD = os.getenv("FRONTEND_URL_PROD")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
