"""
Shared constants for image uploads and the extraction pipeline.

Used by the OCR controller, the extraction worker and the vision client.
"""

from enum import Enum


class ImageDetail(str, Enum):
    """Image fidelity level requested from the vision model"""

    LOW = "low"
    HIGH = "high"
    AUTO = "auto"

    @classmethod
    def from_hint(cls, value: str | None) -> "ImageDetail":
        """Map a caller-supplied hint to a level; anything unrecognized is AUTO."""
        if value:
            normalized = value.strip().lower()
            if normalized == cls.LOW.value:
                return cls.LOW
            if normalized == cls.HIGH.value:
                return cls.HIGH
        return cls.AUTO


DEFAULT_IMAGE_MIME = "image/jpeg"

TAG_EXTRACTION_INSTRUCTION = (
    "Scan the image for an asset tag number. An asset tag number is a numeric "
    "identifier printed on a label affixed to equipment; it is a sequence of "
    "digits whose length varies (commonly 4 to 8 digits, e.g. 12345 or 00123). "
    "Identify the most likely asset tag number from the text visible in the "
    "image and return only its digits, with no other words, spaces or "
    "punctuation. Keep any leading zeros. If several plausible tags are "
    "visible, return the most prominent or clearest one. If no asset tag is "
    "clearly identifiable, return an empty string."
)
