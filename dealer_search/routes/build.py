import logging
from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import Response

from dealer_search.core import config
from dealer_search.core.rate_limit import limiter
from dealer_search.schemas.build import BuildRequest
from dealer_search.services.ad_copy import build_campaign_bundle
from dealer_search.services.archive import (
    ARCHIVE_FILENAME,
    ARCHIVE_MEDIA_TYPE,
    ArchiveBuildError,
    build_archive,
)
from dealer_search.services.inventory import (
    InventoryProvider,
    InventoryUnavailableError,
    get_inventory_provider,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["build"])


def get_provider() -> InventoryProvider:
    return get_inventory_provider()


# ----------------------------------------
# BUILD GOOGLE ADS SEARCH ZIP
# ----------------------------------------
@router.post("/build")
@limiter.limit(config.BUILD_RATE_LIMIT)
def build_search_campaign(
    request: Request,
    req: BuildRequest,
    provider: InventoryProvider = Depends(get_provider),
):
    """
    Build Campaigns / AdGroups / Keywords / Ads_RSA CSVs for a dealership
    and return them zipped as google-ads-search.zip.
    An empty or missing dealershipUrl falls back to the generic demo vehicle.
    """
    url = req.dealershipUrl or ""

    try:
        vehicles = provider.get_vehicles(url)
    except InventoryUnavailableError as e:
        raise HTTPException(status_code=502, detail=str(e))

    bundle = build_campaign_bundle(config.CAMPAIGN_NAME, vehicles)

    try:
        content = build_archive(bundle)
    except ArchiveBuildError as e:
        raise HTTPException(status_code=500, detail=f"Archive build failed: {str(e)}")

    logger.info(f"Built search campaign zip for '{url}' with {len(vehicles)} vehicles")

    return Response(
        content=content,
        media_type=ARCHIVE_MEDIA_TYPE,
        headers={
            "Content-Disposition": f'attachment; filename="{ARCHIVE_FILENAME}"',
            "Cache-Control": "no-store",
        },
    )
