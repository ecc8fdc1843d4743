# Standard library imports
from typing import Optional

# External package imports
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

# Local application imports
from ...application.use_cases.auth.get_current_user import GetCurrentUserUseCase
from ...application.dto.user_dto import UserResponse
from ...core.exceptions import AuthError
from ...di.container import get_container


# auto_error=False so a missing header gets the same reason-coded 401 as a bad token
security_scheme = HTTPBearer(auto_error=False)


def auth_error_detail(exception: AuthError) -> dict:
    return {"reason": exception.reason, "message": str(exception)}


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security_scheme),
) -> UserResponse:
    """
    FastAPI dependency to get current authenticated user from JWT token

    Args:
        credentials: HTTP Bearer token credentials

    Returns:
        UserResponse with user information

    Raises:
        HTTPException: 401 if the token is missing, malformed, invalid or
            expired, or the user no longer exists
    """
    token = credentials.credentials if credentials is not None else None

    container = get_container()
    get_current_user_use_case = container.get(GetCurrentUserUseCase)

    try:
        return await get_current_user_use_case.execute(token)
    except AuthError as exception:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=auth_error_detail(exception),
            headers={"WWW-Authenticate": "Bearer"},
        )


async def get_admin_user(current_user: UserResponse = Depends(get_current_user)) -> UserResponse:
    """
    FastAPI dependency restricting an endpoint to administrators

    Raises:
        HTTPException: 403 if the authenticated user is not an admin
    """
    if not current_user.is_admin:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Not authorized as an admin"
        )
    return current_user
