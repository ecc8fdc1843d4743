"""
Per-image extraction: vision call, normalization, URL derivation,
persistence and live fan-out.
"""

# Standard library imports
import asyncio
import logging
from typing import Optional

# Local application imports
from ....core.exceptions import ExtractionError, PersistenceError
from ....domain.constants.media_constants import TAG_EXTRACTION_INSTRUCTION
from ....domain.models.asset_tag import AssetTagRecord
from ....domain.models.extraction import (
    ErrorKind,
    ExtractionContext,
    ExtractionOutcome,
    ImageItem,
)
from ....domain.repositories.asset_tag_repository import AssetTagRepository
from ....infrastructure.external.vision_tag_client import VisionTagClient
from ....infrastructure.notifications.subscription_registry import SubscriptionRegistry
from ....utils.asset_url import DEFAULT_ASSET_URL_TEMPLATE, build_asset_url
from ....utils.datetime_utils import utc_now
from ....utils.tag_normalizer import normalize_tag

logger = logging.getLogger(__name__)


class ExtractionWorker:
    """
    Processes one uploaded image end to end.

    process() never raises: every failure is folded into the returned
    ExtractionOutcome so the batch coordinator can keep going.
    """

    def __init__(
        self,
        vision_client: VisionTagClient,
        asset_tag_repository: AssetTagRepository,
        subscription_registry: SubscriptionRegistry,
        timeout_seconds: float = 30.0,
        asset_url_template: str = DEFAULT_ASSET_URL_TEMPLATE,
        instruction: str = TAG_EXTRACTION_INSTRUCTION,
    ) -> None:
        self.vision_client = vision_client
        self.asset_tag_repository = asset_tag_repository
        self.subscription_registry = subscription_registry
        self.timeout_seconds = timeout_seconds
        self.asset_url_template = asset_url_template
        self.instruction = instruction

    async def extract_text(self, item: ImageItem, context: ExtractionContext) -> str:
        """
        Run the vision call for one image, bounded by the configured timeout.

        Raises:
            ExtractionError: If the call fails or does not finish in time
        """
        call = self.vision_client.extract_tag(
            item.data,
            item.mime_type,
            self.instruction,
            context.detail,
        )
        if self.timeout_seconds <= 0:
            return await call
        try:
            return await asyncio.wait_for(call, timeout=self.timeout_seconds)
        except asyncio.TimeoutError as e:
            raise ExtractionError(
                f"Extraction timed out after {self.timeout_seconds}s"
            ) from e

    async def process(self, item: ImageItem, context: ExtractionContext) -> ExtractionOutcome:
        """
        Extract, normalize, persist and announce the tag in one image.

        Args:
            item: Uploaded image
            context: Submitting user and batch-wide hints

        Returns:
            ExtractionOutcome describing what happened to this image
        """
        label = item.filename or "<unnamed>"

        try:
            raw_text = await self.extract_text(item, context)
        except Exception as e:
            logger.warning(f"Extraction failed for {label}: {e}")
            return ExtractionOutcome(
                raw_text="",
                error=ErrorKind.EXTRACTION,
                error_message=str(e) or type(e).__name__,
            )

        raw_text = raw_text or ""
        tag = normalize_tag(raw_text)
        if tag is None:
            logger.info(f"No usable asset tag in {label} (raw text: {raw_text!r})")
            return ExtractionOutcome(raw_text=raw_text)

        asset_url = build_asset_url(tag, self.asset_url_template)

        saved = await self._persist(tag, asset_url, item, context)
        if saved is None:
            return ExtractionOutcome(
                raw_text=raw_text,
                normalized_tag=tag,
                asset_url=asset_url,
                persisted=False,
                error=ErrorKind.PERSISTENCE,
                error_message="Failed to save asset tag",
            )

        delivered = await self.subscription_registry.broadcast(saved)
        logger.info(f"Saved asset tag {tag} from {label} (id={saved.id}, delivered to {delivered} channels)")

        return ExtractionOutcome(
            raw_text=raw_text,
            normalized_tag=tag,
            asset_url=asset_url,
            persisted=True,
            record_id=saved.id,
        )

    async def _persist(
        self,
        tag: str,
        asset_url: Optional[str],
        item: ImageItem,
        context: ExtractionContext,
    ) -> Optional[AssetTagRecord]:
        record = AssetTagRecord(
            id=None,
            asset_tag=tag,
            asset_url=asset_url or "",
            scanned_at=utc_now(),
            owner_user_id=context.user_id,
            owner_email=context.user_email,
            source_image_name=item.filename,
            room_number=context.room_number,
        )
        try:
            return await self.asset_tag_repository.create(record)
        except PersistenceError as e:
            logger.error(f"Failed to persist asset tag {tag}: {e}")
        except Exception as e:
            logger.error(f"Unexpected error persisting asset tag {tag}: {e}", exc_info=True)
        return None
