from .user import User
from .asset_tag import AssetTagRecord
from .extraction import (
    BatchResult,
    ErrorKind,
    ExtractionContext,
    ExtractionOutcome,
    ImageItem,
)

__all__ = [
    "User",
    "AssetTagRecord",
    "BatchResult",
    "ErrorKind",
    "ExtractionContext",
    "ExtractionOutcome",
    "ImageItem",
]
