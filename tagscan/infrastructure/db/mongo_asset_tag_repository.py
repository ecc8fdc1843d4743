# Standard library imports
import logging
from datetime import datetime
from typing import Any, Dict, List, Optional, Sequence

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from bson import ObjectId
from bson.errors import InvalidId
from pymongo import ReturnDocument
from pymongo.errors import PyMongoError

# Local application imports
from ...core.exceptions import InputValidationError, PersistenceError
from ...domain.repositories.asset_tag_repository import AssetTagRepository
from ...domain.models.asset_tag import AssetTagRecord
from ...domain.constants import AssetTagFields
from ...utils.datetime_utils import ensure_utc, utc_now
from .mongo_connection import get_asset_tag_collection

logger = logging.getLogger(__name__)


def _to_object_ids(tag_ids: Sequence[str]) -> List[ObjectId]:
    try:
        return [ObjectId(tag_id) for tag_id in tag_ids]
    except (InvalidId, TypeError):
        raise InputValidationError("Invalid ID format provided.")


class MongoAssetTagRepository(AssetTagRepository):
    """MongoDB implementation of AssetTagRepository"""

    def __init__(self, asset_tag_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.asset_tag_collection = (
            asset_tag_collection if asset_tag_collection is not None else get_asset_tag_collection()
        )

    async def create(self, record: AssetTagRecord) -> AssetTagRecord:
        if not record:
            raise ValueError("Record cannot be None")

        doc = self._record_to_document(record)
        try:
            result = await self.asset_tag_collection.insert_one(doc)
        except PyMongoError as e:
            raise PersistenceError(f"Failed to store asset tag {record.asset_tag}: {e}") from e

        return AssetTagRecord(
            id=str(result.inserted_id),
            asset_tag=record.asset_tag,
            asset_url=record.asset_url,
            scanned_at=record.scanned_at,
            owner_user_id=record.owner_user_id,
            owner_email=record.owner_email,
            source_image_name=record.source_image_name,
            room_number=record.room_number,
        )

    async def find_by_id(self, tag_id: str) -> Optional[AssetTagRecord]:
        if not tag_id:
            return None
        try:
            object_id = ObjectId(tag_id)
        except (InvalidId, TypeError):
            return None

        doc = await self.asset_tag_collection.find_one({AssetTagFields.MONGO_ID: object_id})
        if not doc:
            return None
        return self._document_to_record(doc)

    async def list(
        self,
        owner_user_id: Optional[str],
        room_number: Optional[str] = None,
        start_utc: Optional[datetime] = None,
        end_utc: Optional[datetime] = None,
    ) -> List[AssetTagRecord]:
        query: Dict[str, Any] = {}
        if owner_user_id:
            query[AssetTagFields.OWNER_USER_ID] = owner_user_id
        if room_number:
            query[AssetTagFields.ROOM_NUMBER] = room_number
        if start_utc or end_utc:
            ts_query = {}
            if start_utc:
                ts_query["$gte"] = start_utc
            if end_utc:
                ts_query["$lte"] = end_utc
            query[AssetTagFields.SCANNED_AT] = ts_query

        cursor = self.asset_tag_collection.find(query).sort(AssetTagFields.SCANNED_AT, -1)

        items: List[AssetTagRecord] = []
        async for doc in cursor:
            try:
                items.append(self._document_to_record(doc))
            except ValueError as e:
                logger.warning(f"Skipping malformed asset tag document {doc.get(AssetTagFields.MONGO_ID)}: {e}")
        return items

    async def delete_many(self, owner_user_id: str, tag_ids: Sequence[str]) -> int:
        object_ids = _to_object_ids(tag_ids)
        result = await self.asset_tag_collection.delete_many(
            {
                AssetTagFields.MONGO_ID: {"$in": object_ids},
                AssetTagFields.OWNER_USER_ID: owner_user_id,
            }
        )
        return int(result.deleted_count)

    async def update(
        self,
        tag_id: str,
        asset_tag: Optional[str] = None,
        asset_url: Optional[str] = None,
        room_number: Optional[str] = None,
    ) -> Optional[AssetTagRecord]:
        object_id = _to_object_ids([tag_id])[0]

        changes: Dict[str, Any] = {}
        if asset_tag is not None:
            changes[AssetTagFields.ASSET_TAG] = asset_tag
        if asset_url is not None:
            changes[AssetTagFields.ASSET_URL] = asset_url
        if room_number is not None:
            changes[AssetTagFields.ROOM_NUMBER] = room_number or None

        if not changes:
            return await self.find_by_id(tag_id)

        doc = await self.asset_tag_collection.find_one_and_update(
            {AssetTagFields.MONGO_ID: object_id},
            {"$set": changes},
            return_document=ReturnDocument.AFTER,
        )
        if not doc:
            return None
        return self._document_to_record(doc)

    def _record_to_document(self, record: AssetTagRecord) -> dict:
        return {
            AssetTagFields.ASSET_TAG: record.asset_tag,
            AssetTagFields.ASSET_URL: record.asset_url,
            AssetTagFields.SCANNED_AT: record.scanned_at,
            AssetTagFields.SOURCE_IMAGE_NAME: record.source_image_name,
            AssetTagFields.OWNER_USER_ID: record.owner_user_id,
            AssetTagFields.OWNER_EMAIL: record.owner_email,
            AssetTagFields.ROOM_NUMBER: record.room_number,
        }

    def _document_to_record(self, doc: dict) -> AssetTagRecord:
        return AssetTagRecord(
            id=str(doc.get(AssetTagFields.MONGO_ID)),
            asset_tag=doc.get(AssetTagFields.ASSET_TAG) or "",
            asset_url=doc.get(AssetTagFields.ASSET_URL) or "",
            scanned_at=ensure_utc(doc.get(AssetTagFields.SCANNED_AT)) or utc_now(),
            owner_user_id=str(doc.get(AssetTagFields.OWNER_USER_ID) or ""),
            owner_email=doc.get(AssetTagFields.OWNER_EMAIL),
            source_image_name=doc.get(AssetTagFields.SOURCE_IMAGE_NAME),
            room_number=doc.get(AssetTagFields.ROOM_NUMBER),
        )
