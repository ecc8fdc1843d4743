# Standard library imports
import logging

# Local application imports
from ....domain.repositories.asset_tag_repository import AssetTagRepository
from ....core.exceptions import InputValidationError
from ....utils.asset_url import DEFAULT_ASSET_URL_TEMPLATE, build_asset_url
from ....utils.tag_normalizer import normalize_tag
from ...dto.asset_tag_dto import AssetTagResponse, AssetTagUpdateRequest

logger = logging.getLogger(__name__)


class UpdateAssetTagUseCase:
    """Administrative correction of a stored tag's digits or room"""

    def __init__(
        self,
        asset_tag_repository: AssetTagRepository,
        asset_url_template: str = DEFAULT_ASSET_URL_TEMPLATE,
    ) -> None:
        self.asset_tag_repository = asset_tag_repository
        self.asset_url_template = asset_url_template

    async def execute(self, tag_id: str, request: AssetTagUpdateRequest) -> AssetTagResponse:
        """
        Apply an edit. A changed tag is normalized again and its URL recomputed.

        Raises:
            InputValidationError: If nothing to update, or the new tag is not digits
            ValueError: If the tag does not exist
        """
        if request.asset_tag is None and request.room_number is None:
            raise InputValidationError("Nothing to update.")

        asset_tag = asset_url = None
        if request.asset_tag is not None:
            asset_tag = normalize_tag(request.asset_tag)
            if asset_tag is None:
                raise InputValidationError("Asset tag must contain digits only.")
            asset_url = build_asset_url(asset_tag, self.asset_url_template)

        updated = await self.asset_tag_repository.update(
            tag_id,
            asset_tag=asset_tag,
            asset_url=asset_url,
            room_number=request.room_number,
        )
        if updated is None:
            raise ValueError("Asset tag not found")

        logger.info(f"Asset tag {tag_id} updated")
        return AssetTagResponse.from_record(updated)
