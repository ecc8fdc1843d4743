# Standard library imports
import logging
from dataclasses import replace

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ...dto.user_dto import UserResponse

logger = logging.getLogger(__name__)


class VerifyUserUseCase:
    """Use case for an administrator approving a registered account"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, user_id: str) -> UserResponse:
        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            raise ValueError("User not found")

        if not user.is_verified:
            user = await self.user_repository.save(replace(user, is_verified=True))
            logger.info(f"User {user.id} verified")

        return UserResponse(
            id=user.id or "",
            email=user.email,
            full_name=user.full_name,
            is_verified=user.is_verified,
            role=user.role,
        )
