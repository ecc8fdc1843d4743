"""Batch submission endpoint: extract asset tags from uploaded photos"""

# Standard library imports
import logging
from typing import List, Optional

# External package imports
from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile, status
from fastapi.responses import JSONResponse

# Local application imports
from ...application.dto.asset_tag_dto import ExtractTextResponse
from ...application.dto.user_dto import UserResponse
from ...application.use_cases.extraction.batch_coordinator import BatchCoordinator
from ...core.exceptions import InputValidationError
from ...di.container import get_container
from ...domain.constants.media_constants import DEFAULT_IMAGE_MIME, ImageDetail
from ...domain.models.extraction import ExtractionContext, ImageItem
from .dependencies import get_current_user

logger = logging.getLogger(__name__)

router = APIRouter(tags=["ocr"])


async def read_upload(file: UploadFile) -> ImageItem:
    content_type = (file.content_type or "").strip().lower() or DEFAULT_IMAGE_MIME
    data = await file.read()
    return ImageItem(data=data, mime_type=content_type, filename=file.filename)


@router.post("/extract-text", response_model=ExtractTextResponse)
async def extract_text(
    photos: Optional[List[UploadFile]] = File(None),
    room_number: Optional[str] = Form(None, alias="roomNumber"),
    detail: Optional[str] = Form(None),
    current_user: UserResponse = Depends(get_current_user),
):
    """
    Extract asset tags from a batch of photos.

    Every image is processed independently; results come back in upload
    order. Tags that were read are stored and pushed to live subscribers.
    The response is 502 only when no image produced any text and at least
    one image failed.

    Args:
        photos: Uploaded images (multipart field "photos")
        room_number: Optional room recorded with every tag of the batch
        detail: Optional image fidelity hint ("low", "high" or "auto")
        current_user: Authenticated user (from dependency)
    """
    if not photos:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="No photos uploaded."
        )

    items = [await read_upload(photo) for photo in photos]
    context = ExtractionContext(
        user_id=current_user.id,
        user_email=current_user.email,
        room_number=(room_number or "").strip() or None,
        detail=ImageDetail.from_hint(detail),
    )

    container = get_container()
    coordinator = container.get(BatchCoordinator)

    try:
        batch = await coordinator.process_batch(items, context)
    except InputValidationError as exception:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(exception)
        )

    response = ExtractTextResponse.from_batch(batch)
    if response.had_error:
        logger.warning(f"Batch of {len(items)} images for user {current_user.id} produced no text")
        return JSONResponse(
            status_code=status.HTTP_502_BAD_GATEWAY,
            content=response.model_dump(mode="json", by_alias=True),
        )
    return response
