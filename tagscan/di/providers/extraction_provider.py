from functools import partial
from typing import TYPE_CHECKING

from ...core.config import get_settings
from ...domain.repositories.asset_tag_repository import AssetTagRepository
from ...domain.repositories.user_repository import UserRepository
from ...infrastructure.external.vision_tag_client import VisionTagClient
from ...infrastructure.notifications.push_channel import SseChannel
from ...infrastructure.notifications.subscription_registry import SubscriptionRegistry
from ...application.use_cases.extraction.extraction_worker import ExtractionWorker
from ...application.use_cases.extraction.batch_coordinator import BatchCoordinator
from ...application.services.live_connection_gateway import LiveConnectionGateway

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class ExtractionProvider:
    """Extraction pipeline and live connection provider"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        settings = get_settings()

        container.register_singleton(
            VisionTagClient,
            VisionTagClient(
                api_key=settings.vision_api_key,
                api_url=settings.vision_api_url,
                model=settings.vision_model,
                max_tokens=settings.vision_max_tokens,
            )
        )

        container.register_factory(
            ExtractionWorker,
            lambda: ExtractionWorker(
                vision_client=container.get(VisionTagClient),
                asset_tag_repository=container.get(AssetTagRepository),
                subscription_registry=container.get(SubscriptionRegistry),
                timeout_seconds=settings.extraction_timeout_seconds,
                asset_url_template=settings.asset_url_template,
            )
        )

        container.register_factory(
            BatchCoordinator,
            lambda: BatchCoordinator(
                extraction_worker=container.get(ExtractionWorker),
                max_concurrency=settings.extraction_concurrency,
            )
        )

        container.register_factory(
            LiveConnectionGateway,
            lambda: LiveConnectionGateway(
                subscription_registry=container.get(SubscriptionRegistry),
                user_repository=container.get(UserRepository),
                channel_factory=partial(SseChannel, max_queue_size=settings.live_queue_size),
            )
        )
