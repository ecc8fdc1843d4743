"""Concurrent processing of an uploaded batch of images"""

# Standard library imports
import asyncio
import logging
from typing import List, Sequence

# Local application imports
from ....core.exceptions import InputValidationError
from ....domain.models.extraction import (
    BatchResult,
    ErrorKind,
    ExtractionContext,
    ExtractionOutcome,
    ImageItem,
)
from .extraction_worker import ExtractionWorker

logger = logging.getLogger(__name__)


class BatchCoordinator:
    """
    Runs the extraction worker over every image of a batch.

    At most ``max_concurrency`` images are in flight at once. Outcomes come
    back in input order regardless of completion order, and one image
    failing never affects the others.
    """

    def __init__(self, extraction_worker: ExtractionWorker, max_concurrency: int = 4) -> None:
        self.extraction_worker = extraction_worker
        self.max_concurrency = max(1, max_concurrency)

    async def process_batch(
        self,
        items: Sequence[ImageItem],
        context: ExtractionContext,
    ) -> BatchResult:
        """
        Process a batch of uploaded images.

        Args:
            items: Images in upload order
            context: Submitting user and batch-wide hints

        Returns:
            BatchResult with one outcome per image, in upload order

        Raises:
            InputValidationError: If the batch is empty
        """
        if not items:
            raise InputValidationError("No photos uploaded.")

        semaphore = asyncio.Semaphore(self.max_concurrency)

        async def run(item: ImageItem) -> ExtractionOutcome:
            async with semaphore:
                return await self.extraction_worker.process(item, context)

        results = await asyncio.gather(*(run(item) for item in items), return_exceptions=True)

        outcomes: List[ExtractionOutcome] = []
        for index, result in enumerate(results):
            if isinstance(result, BaseException):
                if isinstance(result, asyncio.CancelledError):
                    raise result
                logger.error(f"Unexpected error processing image {index}: {result}")
                outcomes.append(ExtractionOutcome(
                    raw_text="",
                    error=ErrorKind.EXTRACTION,
                    error_message=str(result) or type(result).__name__,
                ))
            else:
                outcomes.append(result)

        batch = BatchResult(outcomes=outcomes)
        persisted = sum(1 for o in outcomes if o.persisted)
        logger.info(
            f"Processed batch of {len(items)} images for user {context.user_id}: "
            f"{persisted} persisted, had_error={batch.had_error}"
        )
        return batch
