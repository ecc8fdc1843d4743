from .extraction_worker import ExtractionWorker
from .batch_coordinator import BatchCoordinator

__all__ = [
    "ExtractionWorker",
    "BatchCoordinator",
]
