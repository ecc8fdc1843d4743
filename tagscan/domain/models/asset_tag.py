from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class AssetTagRecord:
    """
    Domain model for a scanned asset tag.

    asset_tag keeps the digits exactly as extracted (leading zeros included);
    asset_url is derived from its numeric value.
    """

    id: Optional[str]
    asset_tag: str
    asset_url: str
    scanned_at: datetime

    owner_user_id: str
    owner_email: Optional[str]

    source_image_name: Optional[str] = None
    room_number: Optional[str] = None

    def __post_init__(self):
        if not self.asset_tag or not self.asset_tag.isdigit():
            raise ValueError("Asset tag must be a non-empty digit sequence")
        if not self.owner_user_id:
            raise ValueError("Asset tag must have an owner")
