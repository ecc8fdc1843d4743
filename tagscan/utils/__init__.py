"""Pure helper functions shared across layers."""

from .tag_normalizer import normalize_tag
from .asset_url import build_asset_url, pad_asset_id
from .datetime_utils import utc_now, ensure_utc, to_iso, parse_day_range

__all__ = [
    "normalize_tag",
    "build_asset_url",
    "pad_asset_id",
    "utc_now",
    "ensure_utc",
    "to_iso",
    "parse_day_range",
]
