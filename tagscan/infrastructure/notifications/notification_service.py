"""Notification Service for formatting push events"""

import logging
from typing import Any, Dict

from ...domain.models.asset_tag import AssetTagRecord
from ...domain.constants import AssetTagFields
from ...utils.datetime_utils import to_iso

logger = logging.getLogger(__name__)

CONNECTED_EVENT = "connected"
NEW_TAG_EVENT = "newTag"


class NotificationService:
    """
    Service for formatting events into push payloads.

    Two event shapes are sent over live channels:
    {"type": "connected", "message": ...} right after a channel opens, and
    {"type": "newTag", "tag": {...}} whenever a tag is persisted.
    """

    @staticmethod
    def serialize_asset_tag(record: AssetTagRecord) -> Dict[str, Any]:
        """
        Convert a record into the JSON shape clients already use for stored tags.

        Args:
            record: Persisted asset tag record

        Returns:
            JSON-serializable dictionary keyed by the stored field names
        """
        return {
            AssetTagFields.MONGO_ID: record.id,
            AssetTagFields.ASSET_TAG: record.asset_tag,
            AssetTagFields.ASSET_URL: record.asset_url,
            AssetTagFields.SCANNED_AT: to_iso(record.scanned_at),
            AssetTagFields.SOURCE_IMAGE_NAME: record.source_image_name,
            AssetTagFields.OWNER_USER_ID: record.owner_user_id,
            AssetTagFields.OWNER_EMAIL: record.owner_email,
            AssetTagFields.ROOM_NUMBER: record.room_number,
        }

    @staticmethod
    def format_connected(scope_key: str) -> Dict[str, Any]:
        return {
            "type": CONNECTED_EVENT,
            "message": "Connected to live asset tag feed",
            "scope": scope_key,
        }

    @classmethod
    def format_new_tag(cls, record: AssetTagRecord) -> Dict[str, Any]:
        return {
            "type": NEW_TAG_EVENT,
            "tag": cls.serialize_asset_tag(record),
        }
