from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from ...domain.models.asset_tag import AssetTagRecord
from ...domain.models.extraction import BatchResult, ExtractionOutcome


class AssetTagResponse(BaseModel):
    """Stored asset tag, serialized with the field names the web client uses"""
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    asset_tag: str = Field(alias="assetTag")
    asset_url: str = Field(alias="assetUrl")
    scanned_at: datetime = Field(alias="scannedAt")
    source_image_name: Optional[str] = Field(default=None, alias="sourceImageName")
    user_id: str = Field(alias="userId")
    user_email: Optional[str] = Field(default=None, alias="userEmail")
    room_number: Optional[str] = Field(default=None, alias="roomNumber")

    @classmethod
    def from_record(cls, record: AssetTagRecord) -> "AssetTagResponse":
        return cls(
            id=record.id or "",
            asset_tag=record.asset_tag,
            asset_url=record.asset_url,
            scanned_at=record.scanned_at,
            source_image_name=record.source_image_name,
            user_id=record.owner_user_id,
            user_email=record.owner_email,
            room_number=record.room_number,
        )


class ExtractionResultItem(BaseModel):
    """Outcome for one uploaded image"""
    model_config = ConfigDict(populate_by_name=True)

    raw_text: str = Field(alias="rawText")
    normalized_tag: Optional[str] = Field(default=None, alias="normalizedTag")
    asset_url: Optional[str] = Field(default=None, alias="assetUrl")
    persisted: bool = False
    error: Optional[str] = None
    error_message: Optional[str] = Field(default=None, alias="errorMessage")
    tag_id: Optional[str] = Field(default=None, alias="tagId")

    @classmethod
    def from_outcome(cls, outcome: ExtractionOutcome) -> "ExtractionResultItem":
        return cls(
            raw_text=outcome.raw_text,
            normalized_tag=outcome.normalized_tag,
            asset_url=outcome.asset_url,
            persisted=outcome.persisted,
            error=outcome.error.value if outcome.error else None,
            error_message=outcome.error_message,
            tag_id=outcome.record_id,
        )


class ExtractTextResponse(BaseModel):
    """Batch response: raw texts and per-image results in upload order"""
    model_config = ConfigDict(populate_by_name=True)

    texts: List[str] = Field(default_factory=list)
    results: List[ExtractionResultItem] = Field(default_factory=list)
    had_error: bool = Field(default=False, alias="hadError")
    error: Optional[str] = None

    @classmethod
    def from_batch(cls, batch: BatchResult) -> "ExtractTextResponse":
        return cls(
            texts=batch.texts,
            results=[ExtractionResultItem.from_outcome(o) for o in batch.outcomes],
            had_error=batch.had_error,
            error="Failed to process images." if batch.had_error else None,
        )


class DeleteTagsRequest(BaseModel):
    """DTO for deleting asset tags"""
    ids: Optional[List[str]] = None


class MessageResponse(BaseModel):
    message: str


class AssetTagUpdateRequest(BaseModel):
    """Administrative edit of a stored tag"""
    model_config = ConfigDict(populate_by_name=True)

    asset_tag: Optional[str] = Field(default=None, alias="assetTag")
    room_number: Optional[str] = Field(default=None, alias="roomNumber")
