from .database_provider import DatabaseProvider
from .repository_provider import RepositoryProvider
from .auth_provider import AuthProvider
from .notification_provider import NotificationProvider
from .extraction_provider import ExtractionProvider
from .asset_tag_provider import AssetTagProvider


__all__ = [
    "DatabaseProvider",
    "RepositoryProvider",
    "AuthProvider",
    "NotificationProvider",
    "ExtractionProvider",
    "AssetTagProvider",
]
