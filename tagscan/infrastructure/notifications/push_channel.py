"""Push channel abstraction and its server-sent events implementation"""

import asyncio
import json
import logging
import time
import uuid
from abc import ABC, abstractmethod
from typing import Any, AsyncIterator, Dict, Optional

from ...core.exceptions import DeliveryError

logger = logging.getLogger(__name__)

KEEPALIVE_FRAME = ": ping\n\n"


def format_sse_frame(message: Dict[str, Any]) -> str:
    """Serialize one event as a server-sent events data frame."""
    return f"data: {json.dumps(message, ensure_ascii=False)}\n\n"


class PushChannel(ABC):
    """One-way, server-to-client event sink for a single live connection"""

    def __init__(self) -> None:
        self.channel_id = uuid.uuid4().hex

    @abstractmethod
    async def send(self, message: Dict[str, Any]) -> None:
        """
        Deliver one event.

        Raises:
            DeliveryError: If the event cannot be written to this channel
        """
        pass

    @abstractmethod
    def close(self) -> None:
        """Stop accepting events; must be safe to call more than once"""
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.channel_id})"


class SseChannel(PushChannel):
    """
    Push channel backed by a bounded asyncio queue drained by an SSE response.

    send() never blocks: a full backlog means the client stopped reading,
    which is reported as DeliveryError so the registry drops the channel.
    """

    def __init__(self, max_queue_size: int = 100) -> None:
        super().__init__()
        self._queue: "asyncio.Queue[Optional[str]]" = asyncio.Queue(maxsize=max(1, max_queue_size))
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    async def send(self, message: Dict[str, Any]) -> None:
        if self._closed:
            raise DeliveryError(f"Channel {self.channel_id} is closed")
        try:
            frame = format_sse_frame(message)
        except (TypeError, ValueError) as e:
            raise DeliveryError(f"Failed to serialize event: {e}") from e
        try:
            self._queue.put_nowait(frame)
        except asyncio.QueueFull as e:
            raise DeliveryError(f"Channel {self.channel_id} backlog is full") from e

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        # Wake the reader with a sentinel, discarding backlog if needed
        while True:
            try:
                self._queue.put_nowait(None)
                return
            except asyncio.QueueFull:
                self._queue.get_nowait()

    async def frames(
        self,
        keepalive_seconds: float = 15.0,
        idle_timeout_seconds: float = 0.0,
    ) -> AsyncIterator[str]:
        """
        Yield SSE frames until the channel closes.

        Args:
            keepalive_seconds: Emit a comment frame after this long without events (<= 0 disables)
            idle_timeout_seconds: End the stream after this long without events (<= 0 disables)
        """
        last_event_at = time.monotonic()
        while True:
            wait: Optional[float] = keepalive_seconds if keepalive_seconds > 0 else None
            if idle_timeout_seconds > 0:
                remaining = idle_timeout_seconds - (time.monotonic() - last_event_at)
                if remaining <= 0:
                    logger.info(f"Channel {self.channel_id} idle for {idle_timeout_seconds}s, closing")
                    return
                wait = remaining if wait is None else min(wait, remaining)

            try:
                frame = await asyncio.wait_for(self._queue.get(), timeout=wait)
            except asyncio.TimeoutError:
                if idle_timeout_seconds > 0 and time.monotonic() - last_event_at >= idle_timeout_seconds:
                    continue
                yield KEEPALIVE_FRAME
                continue

            if frame is None:
                return
            last_event_at = time.monotonic()
            yield frame
