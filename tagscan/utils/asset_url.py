"""Canonical deep-link URL for an asset tag."""
from typing import Optional

ASSET_ID_WIDTH = 12

DEFAULT_ASSET_URL_TEMPLATE = "https://assets.example.com/asset/{tag}?view=details&source=scan"


def pad_asset_id(tag: str, width: int = ASSET_ID_WIDTH) -> str:
    """
    Re-render a digit string by value and left-pad it with zeros.

    Works on the string directly so tags of any length keep every digit;
    tags longer than ``width`` are returned unpadded, never truncated.
    """
    significant = tag.lstrip("0") or "0"
    return significant.zfill(width)


def build_asset_url(tag: Optional[str], template: str = DEFAULT_ASSET_URL_TEMPLATE) -> Optional[str]:
    """
    Build the asset URL for a normalized tag.

    Args:
        tag: Digit-only tag from normalize_tag(), or None
        template: URL template containing a ``{tag}`` placeholder

    Returns:
        The URL, or None when there is no tag. "00123" and "123" map to
        the same URL.
    """
    if tag is None:
        return None
    return template.format(tag=pad_asset_id(tag))
