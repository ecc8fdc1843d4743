# Standard library imports
from typing import Optional

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.constants import UserFields
from ....core.config import get_settings
from ....core.exceptions import AuthError
from ....core.security import verify_password, create_jwt_token
from ...dto.auth_dto import UserLoginRequest, TokenResponse


class LoginUserUseCase:
    """Use case for authenticating a user and generating JWT token"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, request: UserLoginRequest) -> Optional[TokenResponse]:
        """
        Authenticate user and generate access token

        Args:
            request: Login request with email and password

        Returns:
            TokenResponse if authentication successful, None otherwise

        Raises:
            AuthError: If credentials are valid but the account is not verified yet
        """
        user = await self.user_repository.find_by_email(str(request.email).lower())
        if user is None:
            return None

        if not verify_password(request.password, user.hashed_password):
            return None

        if get_settings().require_user_verification and not user.is_verified:
            raise AuthError(
                "Account not verified. Please wait for admin approval.",
                reason="account_not_verified",
            )

        token = create_jwt_token({
            "sub": user.id or "",  # JWT standard claim (subject)
            UserFields.EMAIL: user.email,
        })

        return TokenResponse(access_token=token)
