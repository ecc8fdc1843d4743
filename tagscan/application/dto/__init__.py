from .auth_dto import UserRegistrationRequest, UserLoginRequest, TokenResponse, AuthStatusResponse
from .user_dto import UserResponse
from .asset_tag_dto import (
    AssetTagResponse,
    AssetTagUpdateRequest,
    DeleteTagsRequest,
    ExtractionResultItem,
    ExtractTextResponse,
    MessageResponse,
)

__all__ = [
    "UserRegistrationRequest",
    "UserLoginRequest",
    "TokenResponse",
    "AuthStatusResponse",
    "UserResponse",
    "AssetTagResponse",
    "AssetTagUpdateRequest",
    "DeleteTagsRequest",
    "ExtractionResultItem",
    "ExtractTextResponse",
    "MessageResponse",
]
