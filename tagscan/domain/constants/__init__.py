"""Constants for domain model field names"""

from .user_fields import UserFields, UserRoles
from .asset_tag_fields import AssetTagFields
from .subscription_scopes import ALL_USERS_SCOPE

__all__ = [
    "UserFields",
    "UserRoles",
    "AssetTagFields",
    "ALL_USERS_SCOPE",
]
