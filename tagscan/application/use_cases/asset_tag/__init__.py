from .list_asset_tags import ListAssetTagsUseCase
from .delete_asset_tags import DeleteAssetTagsUseCase
from .export_asset_tags import ExportAssetTagsUseCase, CsvExport
from .update_asset_tag import UpdateAssetTagUseCase

__all__ = [
    "ListAssetTagsUseCase",
    "DeleteAssetTagsUseCase",
    "ExportAssetTagsUseCase",
    "CsvExport",
    "UpdateAssetTagUseCase",
]
