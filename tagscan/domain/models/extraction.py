"""Value objects passed through the batch extraction pipeline"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from ..constants.media_constants import DEFAULT_IMAGE_MIME, ImageDetail


class ErrorKind(str, Enum):
    """Per-image failure kinds recorded in an ExtractionOutcome"""

    EXTRACTION = "extraction_error"
    PERSISTENCE = "persistence_error"


@dataclass(frozen=True)
class ImageItem:
    """One uploaded image; lives only for the batch that received it"""

    data: bytes
    mime_type: str = DEFAULT_IMAGE_MIME
    filename: Optional[str] = None


@dataclass(frozen=True)
class ExtractionContext:
    """Who submitted the batch and the hints they supplied"""

    user_id: str
    user_email: Optional[str] = None
    room_number: Optional[str] = None
    detail: ImageDetail = ImageDetail.AUTO


@dataclass(frozen=True)
class ExtractionOutcome:
    """Result of processing one image"""

    raw_text: str = ""
    normalized_tag: Optional[str] = None
    asset_url: Optional[str] = None
    persisted: bool = False
    error: Optional[ErrorKind] = None
    error_message: Optional[str] = None
    record_id: Optional[str] = None

    @property
    def has_text(self) -> bool:
        return bool(self.raw_text)


@dataclass(frozen=True)
class BatchResult:
    """Outcomes for a whole batch, in input order"""

    outcomes: List[ExtractionOutcome] = field(default_factory=list)

    @property
    def texts(self) -> List[str]:
        return [outcome.raw_text for outcome in self.outcomes]

    @property
    def had_error(self) -> bool:
        """
        True only when nothing produced text and at least one item failed hard.

        A batch where some images succeeded is a partial success, not a failure.
        """
        if not self.outcomes:
            return False
        nothing_extracted = all(not outcome.has_text for outcome in self.outcomes)
        any_failed = any(outcome.error is not None for outcome in self.outcomes)
        return nothing_extracted and any_failed
