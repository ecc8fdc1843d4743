"""Live asset tag feed over server-sent events"""

# Standard library imports
import logging
from typing import AsyncIterator, Optional

# External package imports
from fastapi import APIRouter, HTTPException, Query, status
from fastapi.responses import StreamingResponse

# Local application imports
from ...application.services.live_connection_gateway import LiveConnection, LiveConnectionGateway
from ...core.config import get_settings
from ...core.exceptions import AuthError
from ...di.container import get_container
from ...infrastructure.notifications.push_channel import SseChannel
from .dependencies import auth_error_detail

logger = logging.getLogger(__name__)

router = APIRouter(tags=["live"])

SSE_HEADERS = {
    "Cache-Control": "no-cache",
    "Connection": "keep-alive",
    "X-Accel-Buffering": "no",
}


async def stream_connection(
    gateway: LiveConnectionGateway,
    connection: LiveConnection,
    keepalive_seconds: float,
    idle_timeout_seconds: float,
) -> AsyncIterator[str]:
    """
    Register an admitted connection and relay its frames until the client
    goes away.

    Registration happens on the first iteration, so a response that is never
    consumed registers nothing. The generator is closed when the client
    disconnects, so the finally block is where the channel gets unregistered.
    """
    try:
        await gateway.activate(connection)
        channel = connection.channel
        if isinstance(channel, SseChannel):
            async for frame in channel.frames(keepalive_seconds, idle_timeout_seconds):
                yield frame
    finally:
        gateway.disconnect(connection)


@router.get("/tags")
async def live_tags(
    token: Optional[str] = Query(None, description="JWT access token for authentication"),
    scope: Optional[str] = Query(None, description='"mine" (default) or "all"'),
    all_users: bool = Query(False, alias="all"),
):
    """
    Subscribe to newly saved asset tags.

    EventSource cannot send headers, so the token travels as a query
    parameter. The first frame is a "connected" event; every tag saved
    afterwards for the caller (or for anyone, with scope=all) follows as a
    "newTag" event.
    """
    wants_all = all_users or (scope or "").strip().lower() == "all"

    container = get_container()
    gateway = container.get(LiveConnectionGateway)

    try:
        connection = await gateway.admit(token, all_users=wants_all)
    except AuthError as exception:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=auth_error_detail(exception)
        )

    settings = get_settings()
    return StreamingResponse(
        stream_connection(
            gateway,
            connection,
            keepalive_seconds=settings.live_keepalive_seconds,
            idle_timeout_seconds=settings.live_idle_timeout_seconds,
        ),
        media_type="text/event-stream",
        headers=SSE_HEADERS,
    )
