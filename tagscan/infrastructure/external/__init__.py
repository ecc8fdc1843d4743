"""External service clients for communicating with external systems"""

from .vision_tag_client import VisionTagClient

__all__ = [
    "VisionTagClient",
]
