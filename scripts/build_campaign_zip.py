#!/usr/bin/env python3
"""
Build the Google Ads Search zip for a dealership without running the server.

This script:
1. Loads vehicles from the configured inventory provider (INVENTORY_PROVIDER)
2. Generates the Campaigns / AdGroups / Keywords / Ads_RSA CSVs
3. Writes google-ads-search.zip (or --out) to disk

Usage:
    python scripts/build_campaign_zip.py --url https://www.autonationtoyotafortmyers.com
    python scripts/build_campaign_zip.py --url https://dealer.com --out /tmp/dealer.zip --campaign "Dealer Search"
"""

import argparse
import sys
from pathlib import Path

# Allow running from a checkout without installing the package
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from dealer_search.core import config  # noqa: E402
from dealer_search.services.ad_copy import build_campaign_bundle  # noqa: E402
from dealer_search.services.archive import ARCHIVE_FILENAME, ArchiveBuildError, build_archive  # noqa: E402
from dealer_search.services.inventory import InventoryUnavailableError, get_inventory_provider  # noqa: E402


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Build a Google Ads Search campaign zip for a dealership")
    parser.add_argument("--url", default="", help="Dealership URL (empty uses the generic demo vehicle)")
    parser.add_argument("--out", default=ARCHIVE_FILENAME, help=f"Output path (default: {ARCHIVE_FILENAME})")
    parser.add_argument("--campaign", default=config.CAMPAIGN_NAME, help="Campaign name written into every row")
    parser.add_argument("--provider", default=None, choices=["static", "live"], help="Override INVENTORY_PROVIDER")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)

    try:
        provider = get_inventory_provider(args.provider)
        vehicles = provider.get_vehicles(args.url)
        print(f"Loaded {len(vehicles)} vehicles for '{args.url or '(empty)'}'")

        bundle = build_campaign_bundle(args.campaign, vehicles)
        content = build_archive(bundle)
    except (ValueError, InventoryUnavailableError, ArchiveBuildError) as e:
        print(f"\nERROR: {e}")
        return 1

    out_path = Path(args.out)
    out_path.write_bytes(content)

    print(f"  Ad groups: {len(bundle.ad_groups.rows)}")
    print(f"  Keywords:  {len(bundle.keywords.rows)}")
    print(f"  Ads:       {len(bundle.ads.rows)}")
    print(f"\nSUCCESS! Wrote {len(content)} bytes to {out_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
