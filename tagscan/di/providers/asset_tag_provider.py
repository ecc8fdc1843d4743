from typing import TYPE_CHECKING

from ...core.config import get_settings
from ...domain.repositories.asset_tag_repository import AssetTagRepository
from ...application.use_cases.asset_tag.list_asset_tags import ListAssetTagsUseCase
from ...application.use_cases.asset_tag.delete_asset_tags import DeleteAssetTagsUseCase
from ...application.use_cases.asset_tag.export_asset_tags import ExportAssetTagsUseCase
from ...application.use_cases.asset_tag.update_asset_tag import UpdateAssetTagUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class AssetTagProvider:
    """Asset tag management use case provider"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        container.register_factory(
            ListAssetTagsUseCase,
            lambda: ListAssetTagsUseCase(asset_tag_repository=container.get(AssetTagRepository)),
        )

        container.register_factory(
            DeleteAssetTagsUseCase,
            lambda: DeleteAssetTagsUseCase(asset_tag_repository=container.get(AssetTagRepository)),
        )

        container.register_factory(
            ExportAssetTagsUseCase,
            lambda: ExportAssetTagsUseCase(asset_tag_repository=container.get(AssetTagRepository)),
        )

        container.register_factory(
            UpdateAssetTagUseCase,
            lambda: UpdateAssetTagUseCase(
                asset_tag_repository=container.get(AssetTagRepository),
                asset_url_template=get_settings().asset_url_template,
            ),
        )
