# Standard library imports
import logging
from typing import List, Optional

# Local application imports
from ....domain.repositories.asset_tag_repository import AssetTagRepository
from ....core.exceptions import InputValidationError

logger = logging.getLogger(__name__)


class DeleteAssetTagsUseCase:
    def __init__(self, asset_tag_repository: AssetTagRepository) -> None:
        self.asset_tag_repository = asset_tag_repository

    async def execute(self, owner_user_id: str, tag_ids: Optional[List[str]]) -> int:
        """
        Delete the user's own tags by ID.

        Returns:
            Number of records deleted (0 when none matched the user's tags)

        Raises:
            InputValidationError: If no IDs were given or any ID is malformed
        """
        if not tag_ids:
            raise InputValidationError("No tag IDs provided for deletion.")

        deleted = await self.asset_tag_repository.delete_many(owner_user_id, tag_ids)
        logger.info(f"User {owner_user_id} deleted {deleted}/{len(tag_ids)} asset tags")
        return deleted
