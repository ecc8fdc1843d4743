# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.user import User
from ....core.security import hash_password
from ...dto.auth_dto import UserRegistrationRequest
from ...dto.user_dto import UserResponse


class RegisterUserUseCase:
    """Use case for registering a new user"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, request: UserRegistrationRequest) -> UserResponse:
        """
        Register a new user

        New accounts start unverified with the regular user role; an
        administrator verifies them before they can log in.

        Args:
            request: Registration request with user details

        Returns:
            UserResponse with created user information

        Raises:
            ValueError: If user with email already exists
        """
        existing_user = await self.user_repository.find_by_email(request.email)
        if existing_user is not None:
            raise ValueError("User with this email already exists")

        new_user = User(
            id=None,  # Will be set by repository
            email=str(request.email).lower(),
            hashed_password=hash_password(request.password),
            full_name=request.full_name,
        )

        saved_user = await self.user_repository.save(new_user)

        return UserResponse(
            id=saved_user.id or "",
            email=saved_user.email,
            full_name=saved_user.full_name,
            is_verified=saved_user.is_verified,
            role=saved_user.role,
        )
