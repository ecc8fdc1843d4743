from .user_repository import UserRepository
from .asset_tag_repository import AssetTagRepository

__all__ = ["UserRepository", "AssetTagRepository"]
