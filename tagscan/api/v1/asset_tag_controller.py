# Standard library imports
from typing import List, Optional

# External package imports
from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

# Local application imports
from ...application.dto.asset_tag_dto import (
    AssetTagResponse,
    AssetTagUpdateRequest,
    DeleteTagsRequest,
    MessageResponse,
)
from ...application.dto.user_dto import UserResponse
from ...application.use_cases.asset_tag.list_asset_tags import ListAssetTagsUseCase
from ...application.use_cases.asset_tag.delete_asset_tags import DeleteAssetTagsUseCase
from ...application.use_cases.asset_tag.export_asset_tags import ExportAssetTagsUseCase
from ...application.use_cases.asset_tag.update_asset_tag import UpdateAssetTagUseCase
from ...core.exceptions import InputValidationError
from ...di.container import get_container
from .dependencies import get_admin_user, get_current_user


router = APIRouter(tags=["asset-tags"])


@router.get("", response_model=List[AssetTagResponse])
async def list_my_tags(
    room_number: Optional[str] = Query(None, alias="roomNumber"),
    date: Optional[str] = Query(None, description="YYYY-MM-DD (UTC)"),
    current_user: UserResponse = Depends(get_current_user),
) -> List[AssetTagResponse]:
    container = get_container()
    use_case = container.get(ListAssetTagsUseCase)
    try:
        return await use_case.execute(current_user.id, room_number=room_number, day=date)
    except ValueError as exception:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exception))


@router.get("/all", response_model=List[AssetTagResponse])
async def list_all_tags(
    room_number: Optional[str] = Query(None, alias="roomNumber"),
    date: Optional[str] = Query(None, description="YYYY-MM-DD (UTC)"),
    current_user: UserResponse = Depends(get_current_user),
) -> List[AssetTagResponse]:
    container = get_container()
    use_case = container.get(ListAssetTagsUseCase)
    try:
        return await use_case.execute(None, room_number=room_number, day=date)
    except ValueError as exception:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exception))


@router.delete("", response_model=MessageResponse)
async def delete_tags(
    request: DeleteTagsRequest,
    current_user: UserResponse = Depends(get_current_user),
) -> MessageResponse:
    """
    Delete the caller's tags by ID

    Returns:
        MessageResponse with the number of deleted tags
    """
    container = get_container()
    use_case = container.get(DeleteAssetTagsUseCase)

    try:
        deleted = await use_case.execute(current_user.id, request.ids)
    except InputValidationError as exception:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exception))

    if deleted == 0:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No matching tags found for deletion."
        )
    return MessageResponse(message=f"{deleted} tag(s) deleted successfully.")


@router.get("/export")
async def export_tags(
    date: Optional[str] = Query(None, description="YYYY-MM-DD (UTC)"),
    room_number: Optional[str] = Query(None, alias="roomNumber"),
    all_users: bool = Query(False, alias="all"),
    current_user: UserResponse = Depends(get_current_user),
) -> Response:
    """
    Download tags as a CSV attachment

    Args:
        date: Optional day filter
        room_number: Optional room filter
        all_users: Export every user's tags instead of the caller's
        current_user: Authenticated user (from dependency)
    """
    container = get_container()
    use_case = container.get(ExportAssetTagsUseCase)

    try:
        export = await use_case.execute(
            None if all_users else current_user.id,
            room_number=room_number,
            day=date,
        )
    except ValueError as exception:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exception))

    if export is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No asset tags found for the selected filters."
        )

    return Response(
        content=export.content,
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{export.filename}"'},
    )


@router.patch("/{tag_id}", response_model=AssetTagResponse)
async def update_tag(
    tag_id: str,
    request: AssetTagUpdateRequest,
    admin_user: UserResponse = Depends(get_admin_user),
) -> AssetTagResponse:
    """Correct a stored tag (admin only)"""
    container = get_container()
    use_case = container.get(UpdateAssetTagUseCase)

    try:
        return await use_case.execute(tag_id, request)
    except InputValidationError as exception:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exception))
    except ValueError as exception:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exception))
