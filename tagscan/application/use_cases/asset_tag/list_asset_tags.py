# Standard library imports
from typing import List, Optional

# Local application imports
from ....domain.repositories.asset_tag_repository import AssetTagRepository
from ....core.exceptions import InputValidationError
from ....utils.datetime_utils import parse_day_range
from ...dto.asset_tag_dto import AssetTagResponse


class ListAssetTagsUseCase:
    def __init__(self, asset_tag_repository: AssetTagRepository) -> None:
        self.asset_tag_repository = asset_tag_repository

    async def execute(
        self,
        owner_user_id: Optional[str],
        room_number: Optional[str] = None,
        day: Optional[str] = None,
    ) -> List[AssetTagResponse]:
        """
        List stored asset tags, newest first.

        Args:
            owner_user_id: Only this user's tags; None lists every user's tags
            room_number: Optional exact room filter
            day: Optional YYYY-MM-DD filter (UTC day)

        Raises:
            InputValidationError: If day is not a valid YYYY-MM-DD date
        """
        start_utc = end_utc = None
        if day:
            try:
                start_utc, end_utc = parse_day_range(day)
            except ValueError as e:
                raise InputValidationError(str(e)) from e

        records = await self.asset_tag_repository.list(
            owner_user_id=owner_user_id,
            room_number=room_number or None,
            start_utc=start_utc,
            end_utc=end_utc,
        )
        return [AssetTagResponse.from_record(record) for record in records]
