from .auth import (
    RegisterUserUseCase,
    LoginUserUseCase,
    GetCurrentUserUseCase,
    VerifyUserUseCase,
)
from .extraction import (
    ExtractionWorker,
    BatchCoordinator,
)
from .asset_tag import (
    ListAssetTagsUseCase,
    DeleteAssetTagsUseCase,
    ExportAssetTagsUseCase,
    UpdateAssetTagUseCase,
)

__all__ = [
    "RegisterUserUseCase",
    "LoginUserUseCase",
    "GetCurrentUserUseCase",
    "VerifyUserUseCase",
    "ExtractionWorker",
    "BatchCoordinator",
    "ListAssetTagsUseCase",
    "DeleteAssetTagsUseCase",
    "ExportAssetTagsUseCase",
    "UpdateAssetTagUseCase",
]
