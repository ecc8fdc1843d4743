# External package imports
from fastapi import APIRouter, Depends, HTTPException, status

# Local application imports
from ...application.dto.auth_dto import (
    AuthStatusResponse,
    TokenResponse,
    UserLoginRequest,
    UserRegistrationRequest,
)
from ...application.dto.asset_tag_dto import MessageResponse
from ...application.dto.user_dto import UserResponse
from ...application.use_cases.auth.register_user import RegisterUserUseCase
from ...application.use_cases.auth.login_user import LoginUserUseCase
from ...application.use_cases.auth.verify_user import VerifyUserUseCase
from ...core.exceptions import AuthError
from ...di.container import get_container
from .dependencies import auth_error_detail, get_admin_user, get_current_user


router = APIRouter(tags=["authentication"])


@router.post("/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def register_user(request: UserRegistrationRequest) -> UserResponse:
    """
    Register a new user

    Args:
        request: User registration request

    Returns:
        UserResponse with created user information
    """
    container = get_container()
    register_use_case = container.get(RegisterUserUseCase)

    try:
        user = await register_use_case.execute(request)
        return user
    except ValueError as exception:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(exception)
        )


@router.post("/login", response_model=TokenResponse)
async def login_user(request: UserLoginRequest) -> TokenResponse:
    """
    Authenticate user and get access token

    Args:
        request: User login request

    Returns:
        TokenResponse with access token
    """
    container = get_container()
    login_use_case = container.get(LoginUserUseCase)

    try:
        token_response = await login_use_case.execute(request)
    except AuthError as exception:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=auth_error_detail(exception)
        )

    if token_response is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid email or password"
        )
    return token_response


@router.get("/status", response_model=AuthStatusResponse)
async def auth_status(current_user: UserResponse = Depends(get_current_user)) -> AuthStatusResponse:
    """Report whether the caller is logged in and verified"""
    return AuthStatusResponse(
        logged_in=True,
        is_verified=current_user.is_verified,
        email=current_user.email,
        user_id=current_user.id,
        message=None if current_user.is_verified else "Account awaiting admin verification",
    )


@router.get("/me", response_model=UserResponse)
async def get_me(current_user: UserResponse = Depends(get_current_user)) -> UserResponse:
    return current_user


@router.post("/logout", response_model=MessageResponse)
async def logout_user() -> MessageResponse:
    # Tokens are stateless; the client discards its copy
    return MessageResponse(message="Logged out successfully")


@router.post("/users/{user_id}/verify", response_model=UserResponse)
async def verify_user(
    user_id: str,
    admin_user: UserResponse = Depends(get_admin_user),
) -> UserResponse:
    """
    Mark a registered user as verified (admin only)

    Args:
        user_id: ID of the user to verify
        admin_user: Authenticated administrator (from dependency)

    Returns:
        UserResponse for the verified user
    """
    container = get_container()
    verify_use_case = container.get(VerifyUserUseCase)

    try:
        return await verify_use_case.execute(user_id)
    except ValueError as exception:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(exception)
        )
