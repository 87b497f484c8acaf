import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from dealer_search.core.config import FRONTEND_URL, FRONTEND_URL_PROD, LOG_LEVEL
from dealer_search.core.rate_limit import limiter

# Import routers
from dealer_search.routes.build import router as build_router
from dealer_search.routes.page import router as page_router


logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

# -------------------------------------------------
# Create FastAPI app
# -------------------------------------------------
app = FastAPI(
    title="Dealer Search CSV Builder",
    version="1.0.0"
)

# Add rate limiter to app state
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

# -------------------------------------------------
# CORS settings
# -------------------------------------------------
allowed_origins = [origin for origin in (FRONTEND_URL, FRONTEND_URL_PROD) if origin]

app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins,
    allow_methods=["GET", "POST"],
    allow_headers=["Content-Type"],
    expose_headers=["Content-Disposition"],
)

# -------------------------------------------------
# Register Routers
# -------------------------------------------------
app.include_router(page_router)
app.include_router(build_router)
