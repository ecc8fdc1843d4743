"""Process-wide httpx client for calls to the vision model endpoint."""
import httpx
import logging
from typing import Optional

logger = logging.getLogger(__name__)

# Upper bound only; per-image timeouts are enforced by the extraction worker
VISION_CLIENT_TIMEOUT_SECONDS = 120.0

_vision_http_client: Optional[httpx.AsyncClient] = None


def get_shared_http_client() -> httpx.AsyncClient:
    """
    Return the pooled client used by VisionTagClient, creating it on first use.

    All images of a batch (and of concurrent batches) go through this one
    client, so they share HTTP/2 keep-alive connections to the model API.

    Returns:
        Shared AsyncClient instance
    """
    global _vision_http_client

    if _vision_http_client is None:
        _vision_http_client = httpx.AsyncClient(
            timeout=VISION_CLIENT_TIMEOUT_SECONDS,
            limits=httpx.Limits(
                max_keepalive_connections=20,
                max_connections=100,
                keepalive_expiry=30.0,
            ),
            http2=True,
        )
        logger.info("Vision HTTP client created")

    return _vision_http_client


async def close_shared_http_client() -> None:
    """Close the vision HTTP client; called from the app lifespan on shutdown."""
    global _vision_http_client

    if _vision_http_client is None:
        return
    await _vision_http_client.aclose()
    _vision_http_client = None
    logger.info("Vision HTTP client closed")
