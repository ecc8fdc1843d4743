"""Registry of live push channels and fan-out of new-tag events"""

import logging
from threading import Lock
from typing import Any, Dict, List, Set, Tuple

from ...domain.constants import ALL_USERS_SCOPE
from ...domain.models.asset_tag import AssetTagRecord
from .notification_service import NotificationService
from .push_channel import PushChannel

logger = logging.getLogger(__name__)


class SubscriptionRegistry:
    """
    Tracks live push channels by scope and fans out events to them.

    A scope is either a user ID or ALL_USERS_SCOPE. Each channel belongs to at
    most one scope. Channel sets are copied under the lock before any await,
    so subscribe/unsubscribe can run while a broadcast is in flight.

    Lifecycle: one instance per process, created by the DI container and shared
    by the live connection gateway (subscribe/unsubscribe) and the extraction
    worker (broadcast).
    """

    def __init__(self) -> None:
        self._channels: Dict[str, Set[PushChannel]] = {}
        self._scope_by_channel: Dict[PushChannel, str] = {}
        self._lock = Lock()
        logger.info("SubscriptionRegistry initialized")

    def subscribe(self, scope_key: str, channel: PushChannel) -> None:
        """
        Register a channel under a scope.

        Args:
            scope_key: User ID or ALL_USERS_SCOPE
            channel: Push channel to deliver events to
        """
        if not scope_key:
            raise ValueError("Scope key is required")

        with self._lock:
            previous = self._scope_by_channel.get(channel)
            if previous is not None and previous != scope_key:
                self._discard_locked(previous, channel)
            self._channels.setdefault(scope_key, set()).add(channel)
            self._scope_by_channel[channel] = scope_key
            total = len(self._scope_by_channel)

        logger.info(f"Subscribed {channel} to scope {scope_key}. Total channels: {total}")

    def unsubscribe(self, scope_key: str, channel: PushChannel) -> None:
        """
        Remove a channel from a scope. Unknown scopes or channels are ignored.

        Args:
            scope_key: Scope the channel was subscribed under
            channel: Push channel to remove
        """
        with self._lock:
            removed = self._discard_locked(scope_key, channel)
            total = len(self._scope_by_channel)

        if removed:
            logger.info(f"Unsubscribed {channel} from scope {scope_key}. Total channels: {total}")

    def _discard_locked(self, scope_key: str, channel: PushChannel) -> bool:
        channels = self._channels.get(scope_key)
        if not channels or channel not in channels:
            return False
        channels.discard(channel)
        if not channels:
            del self._channels[scope_key]
        if self._scope_by_channel.get(channel) == scope_key:
            del self._scope_by_channel[channel]
        return True

    def _snapshot(self, scope_key: str) -> List[PushChannel]:
        with self._lock:
            return list(self._channels.get(scope_key, ()))

    async def _deliver(self, targets: List[Tuple[str, PushChannel]], message: Dict[str, Any]) -> int:
        sent_count = 0
        for scope_key, channel in targets:
            try:
                await channel.send(message)
                sent_count += 1
            except Exception as e:
                logger.warning(f"Dropping {channel} from scope {scope_key} after failed delivery: {e}")
                self.unsubscribe(scope_key, channel)
        return sent_count

    async def broadcast(self, record: AssetTagRecord) -> int:
        """
        Announce a newly persisted tag to its owner's channels and to every
        all-users channel. Never raises; failing channels are dropped.

        Args:
            record: The persisted asset tag

        Returns:
            Number of channels the event was delivered to
        """
        message = NotificationService.format_new_tag(record)

        targets = [(record.owner_user_id, channel) for channel in self._snapshot(record.owner_user_id)]
        if record.owner_user_id != ALL_USERS_SCOPE:
            targets += [(ALL_USERS_SCOPE, channel) for channel in self._snapshot(ALL_USERS_SCOPE)]

        sent_count = await self._deliver(targets, message)
        logger.debug(f"Broadcast tag {record.asset_tag} to {sent_count}/{len(targets)} channels")
        return sent_count

    def scope_size(self, scope_key: str) -> int:
        with self._lock:
            return len(self._channels.get(scope_key, ()))

    def has_channel(self, channel: PushChannel) -> bool:
        with self._lock:
            return channel in self._scope_by_channel

    def total_channels(self) -> int:
        """
        Get total number of active channels.

        Returns:
            Total number of channels across all scopes
        """
        with self._lock:
            return len(self._scope_by_channel)
