# Standard library imports
from typing import Optional

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....core.exceptions import UserNotFoundError
from ....core.security import subject_from_token
from ...dto.user_dto import UserResponse


class GetCurrentUserUseCase:
    """Use case for getting current authenticated user from JWT token"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, token: Optional[str]) -> UserResponse:
        """
        Get current user from JWT token

        Args:
            token: JWT access token

        Returns:
            UserResponse with user information

        Raises:
            AuthError: If the token is missing, malformed, invalid or expired,
                or the user no longer exists
        """
        user_id = subject_from_token(token)

        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError("Not authorized, user not found")

        return UserResponse(
            id=user.id or "",
            email=user.email,
            full_name=user.full_name,
            is_verified=user.is_verified,
            role=user.role,
        )
