import logging
import re
from dataclasses import dataclass
from typing import Iterable, Tuple

from dealer_search.schemas.build import Vehicle

logger = logging.getLogger(__name__)

# Google Ads RSA text limits
HEADLINE_MAX_CHARS = 30
DESCRIPTION_MAX_CHARS = 90

# Budgets and bids stay text so they serialize as exactly "0.01"
DEFAULT_DAILY_BUDGET = "0.01"
DEFAULT_MAX_CPC = "0.01"

CAMPAIGN_HEADERS = (
    "Campaign",
    "Campaign Type",
    "Status",
    "Daily Budget",
    "Bidding Strategy",
    "Networks",
    "Locations",
    "Languages",
    "Start Date",
    "End Date",
)
AD_GROUP_HEADERS = ("Campaign", "Ad Group", "Status", "Default Max. CPC")
KEYWORD_HEADERS = ("Campaign", "Ad Group", "Criterion Type", "Keyword", "Final URL", "Max CPC")
AD_HEADERS = (
    "Campaign",
    "Ad Group",
    "Final URL",
    "Path 1",
    "Path 2",
    "Headline 1",
    "Headline 2",
    "Headline 3",
    "Description 1",
    "Description 2",
)

HEADLINE_3 = "Test Drive Today"
DESCRIPTION_2 = "Get pre-approved online. Visit our site for photos & price."
FALLBACK_PATH_2 = "details"

_WHITESPACE_RUN = re.compile(r"\s+")


@dataclass(frozen=True)
class Table:
    """Header row plus data rows, ready for the CSV encoder."""
    headers: Tuple[str, ...]
    rows: Tuple[Tuple[str, ...], ...]


@dataclass(frozen=True)
class CampaignBundle:
    """The four Google Ads Editor tables built from one vehicle batch."""
    campaigns: Table
    ad_groups: Table
    keywords: Table
    ads: Table


def clamp(text: str, limit: int) -> str:
    """Hard-truncate to ``limit`` characters. No ellipsis, no word boundaries."""
    return text if len(text) <= limit else text[:limit]


def clamp_headline(text: str) -> str:
    return clamp(text, HEADLINE_MAX_CHARS)


def clamp_description(text: str) -> str:
    return clamp(text, DESCRIPTION_MAX_CHARS)


def to_display_path(text: str) -> str:
    """Lowercase and collapse each whitespace run into one hyphen ("Model X" -> "model-x")."""
    return _WHITESPACE_RUN.sub("-", text.lower())


def _title(v: Vehicle) -> str:
    """'{year} {make} {model}' plus ' {trim}' when the vehicle has a trim."""
    base = f"{v.year} {v.make} {v.model}"
    return f"{base} {v.trim}" if v.trim else base


def ad_group_name(v: Vehicle) -> str:
    return f"{_title(v)} | {v.id}"


def exact_keyword(v: Vehicle) -> str:
    return f"[{_title(v).lower()}]"


def phrase_keyword(v: Vehicle) -> str:
    return f'"{v.make.lower()} {v.model.lower()}"'


def _campaign_row(campaign_name: str) -> Tuple[str, ...]:
    return (
        campaign_name,
        "Search",
        "Enabled",
        DEFAULT_DAILY_BUDGET,
        "Manual CPC",
        "Google Search;Search Partners",
        "United States",
        "English",
        "",
        "",
    )


def _keyword_rows(campaign_name: str, group: str, v: Vehicle) -> Tuple[Tuple[str, ...], ...]:
    return (
        (campaign_name, group, "Exact", exact_keyword(v), v.final_url, DEFAULT_MAX_CPC),
        (campaign_name, group, "Phrase", phrase_keyword(v), v.final_url, DEFAULT_MAX_CPC),
    )


def _ad_row(campaign_name: str, group: str, v: Vehicle) -> Tuple[str, ...]:
    used_prefix = "Used " if v.condition == "used" else ""
    return (
        campaign_name,
        group,
        v.final_url,
        to_display_path(v.model),
        to_display_path(v.trim) if v.trim else FALLBACK_PATH_2,
        clamp_headline(f"{v.year} {v.make} {v.model}"),
        clamp_headline(f"{used_prefix}{v.model} in Stock"),
        clamp_headline(HEADLINE_3),
        clamp_description(f"{_title(v)}. In stock. Transparent pricing."),
        clamp_description(DESCRIPTION_2),
    )


def build_campaign_bundle(campaign_name: str, vehicles: Iterable[Vehicle]) -> CampaignBundle:
    """Derive the Campaigns / AdGroups / Keywords / Ads tables for a vehicle batch.

    Each vehicle yields one ad group, two keywords (exact + phrase) and one
    responsive search ad, in input order. Vehicles are not validated.

    Args:
        campaign_name: Name shared by every row.
        vehicles: Inventory in the order it should appear in the files.

    Returns:
        CampaignBundle with immutable tables.
    """
    named = tuple((ad_group_name(v), v) for v in vehicles)

    bundle = CampaignBundle(
        campaigns=Table(CAMPAIGN_HEADERS, (_campaign_row(campaign_name),)),
        ad_groups=Table(
            AD_GROUP_HEADERS,
            tuple((campaign_name, group, "Enabled", DEFAULT_MAX_CPC) for group, _ in named),
        ),
        keywords=Table(
            KEYWORD_HEADERS,
            tuple(row for group, v in named for row in _keyword_rows(campaign_name, group, v)),
        ),
        ads=Table(AD_HEADERS, tuple(_ad_row(campaign_name, group, v) for group, v in named)),
    )

    logger.debug(f"Built campaign bundle '{campaign_name}' for {len(named)} vehicles")
    return bundle
