import io
import logging
import zipfile
from typing import Dict

from dealer_search.services.ad_copy import CampaignBundle
from dealer_search.utils.csv_encoder import to_csv

logger = logging.getLogger(__name__)

ARCHIVE_FILENAME = "google-ads-search.zip"
ARCHIVE_MEDIA_TYPE = "application/zip"


class ArchiveBuildError(Exception):
    """Raised when the zip could not be produced. No partial archive is returned."""


def render_csv_files(bundle: CampaignBundle) -> Dict[str, str]:
    """Encode each table of the bundle, keyed by its file name inside the archive."""
    return {
        "Campaigns.csv": to_csv(bundle.campaigns.headers, bundle.campaigns.rows),
        "AdGroups.csv": to_csv(bundle.ad_groups.headers, bundle.ad_groups.rows),
        "Keywords.csv": to_csv(bundle.keywords.headers, bundle.keywords.rows),
        "Ads_RSA.csv": to_csv(bundle.ads.headers, bundle.ads.rows),
    }


def build_archive(bundle: CampaignBundle) -> bytes:
    """Zip the four CSV files (UTF-8, no BOM) and return the archive bytes.

    Raises:
        ArchiveBuildError: if any entry fails to encode or compress.
    """
    files = render_csv_files(bundle)
    buffer = io.BytesIO()

    try:
        with zipfile.ZipFile(buffer, "w", compression=zipfile.ZIP_DEFLATED) as zf:
            for name, text in files.items():
                zf.writestr(name, text.encode("utf-8"))
    except (OSError, ValueError, RuntimeError, MemoryError, zipfile.LargeZipFile) as e:
        logger.error(f"Failed to build archive: {e}", exc_info=True)
        raise ArchiveBuildError(str(e)) from e

    content = buffer.getvalue()
    logger.info(f"Built {ARCHIVE_FILENAME}: {len(files)} files, {len(content)} bytes")
    return content
