from .mongo_connection import get_database, close_database, get_user_collection, get_asset_tag_collection
from .mongo_user_repository import MongoUserRepository
from .mongo_asset_tag_repository import MongoAssetTagRepository

__all__ = [
    "get_database",
    "close_database",
    "get_user_collection",
    "get_asset_tag_collection",
    "MongoUserRepository",
    "MongoAssetTagRepository",
]
