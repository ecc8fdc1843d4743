"""
Authentication and lifecycle of live push connections.

A connection moves through PENDING -> AUTHENTICATING -> ACTIVE or REJECTED,
and an ACTIVE connection ends in CLOSED. Only ACTIVE connections are ever
registered, so a rejected credential never reaches the subscription registry.
The HTTP layer admits a connection up front and activates it once its stream
is actually being consumed.
"""

# Standard library imports
import logging
from enum import Enum
from typing import Callable, Optional

# Local application imports
from ...core.exceptions import AuthError, UserNotFoundError
from ...core.security import subject_from_token
from ...domain.constants import ALL_USERS_SCOPE
from ...domain.repositories.user_repository import UserRepository
from ...infrastructure.notifications.notification_service import NotificationService
from ...infrastructure.notifications.push_channel import PushChannel, SseChannel
from ...infrastructure.notifications.subscription_registry import SubscriptionRegistry

logger = logging.getLogger(__name__)


class LiveConnectionState(str, Enum):
    PENDING = "pending"
    AUTHENTICATING = "authenticating"
    ACTIVE = "active"
    REJECTED = "rejected"
    CLOSED = "closed"


class LiveConnection:
    """State of one live connection attempt"""

    def __init__(self, all_users: bool = False) -> None:
        self.all_users = all_users
        self.state = LiveConnectionState.PENDING
        self.user_id: Optional[str] = None
        self.scope_key: Optional[str] = None
        self.channel: Optional[PushChannel] = None
        self.rejection: Optional[AuthError] = None

    @property
    def is_active(self) -> bool:
        return self.state == LiveConnectionState.ACTIVE

    def __repr__(self) -> str:
        return f"LiveConnection(state={self.state.value}, scope={self.scope_key})"


class LiveConnectionGateway:
    """
    Opens and closes live connections against the subscription registry.

    connect() validates the credential before anything is registered.
    disconnect() is the single place a channel is unsubscribed and closed;
    it only acts on ACTIVE connections, so calling it again is harmless.
    """

    def __init__(
        self,
        subscription_registry: SubscriptionRegistry,
        user_repository: Optional[UserRepository] = None,
        channel_factory: Optional[Callable[[], PushChannel]] = None,
    ) -> None:
        self.subscription_registry = subscription_registry
        self.user_repository = user_repository
        self.channel_factory = channel_factory or SseChannel

    async def authenticate(self, connection: LiveConnection, token: Optional[str]) -> str:
        """
        Resolve the credential to a user ID.

        Raises:
            AuthError: Missing/placeholder, invalid or expired credential, or unknown user
        """
        connection.state = LiveConnectionState.AUTHENTICATING
        user_id = subject_from_token(token)
        if self.user_repository is not None:
            user = await self.user_repository.find_by_id(user_id)
            if user is None:
                raise UserNotFoundError("Not authorized, user not found")
        return user_id

    async def admit(self, token: Optional[str], all_users: bool = False) -> LiveConnection:
        """
        Authenticate a live connection without registering it.

        The returned connection stays AUTHENTICATING until activate() is
        called, so a client that goes away before its stream starts leaves
        nothing behind in the registry.

        Raises:
            AuthError: If the credential is rejected
        """
        connection = LiveConnection(all_users=all_users)
        try:
            user_id = await self.authenticate(connection, token)
        except AuthError as e:
            connection.state = LiveConnectionState.REJECTED
            connection.rejection = e
            logger.info(f"Live connection rejected ({e.reason}): {e}")
            raise

        connection.user_id = user_id
        connection.scope_key = ALL_USERS_SCOPE if all_users else user_id
        return connection

    async def activate(self, connection: LiveConnection) -> LiveConnection:
        """
        Create and subscribe the channel of an admitted connection.
        No-op unless the connection is AUTHENTICATING with a resolved scope.
        """
        if connection.state != LiveConnectionState.AUTHENTICATING or connection.scope_key is None:
            return connection

        connection.channel = self.channel_factory()

        # Queued ahead of any tag event so it is always the first frame
        await connection.channel.send(NotificationService.format_connected(connection.scope_key))
        self.subscription_registry.subscribe(connection.scope_key, connection.channel)
        connection.state = LiveConnectionState.ACTIVE

        logger.info(f"Live connection opened for user {connection.user_id} on scope {connection.scope_key}")
        return connection

    async def connect(self, token: Optional[str], all_users: bool = False) -> LiveConnection:
        """
        Authenticate a live connection and register its channel.

        Args:
            token: Bearer credential supplied by the client
            all_users: Subscribe to every user's tags instead of the caller's own

        Returns:
            ACTIVE LiveConnection with its channel subscribed

        Raises:
            AuthError: If the credential is rejected; nothing is registered
        """
        connection = await self.admit(token, all_users=all_users)
        return await self.activate(connection)

    def disconnect(self, connection: LiveConnection) -> None:
        """
        Unregister and close an active connection. An admitted connection that
        was never activated is simply marked CLOSED.
        """
        if connection.state == LiveConnectionState.AUTHENTICATING and connection.scope_key is not None:
            connection.state = LiveConnectionState.CLOSED
            return
        if connection.state != LiveConnectionState.ACTIVE:
            return
        connection.state = LiveConnectionState.CLOSED

        if connection.channel is not None and connection.scope_key is not None:
            self.subscription_registry.unsubscribe(connection.scope_key, connection.channel)
            connection.channel.close()

        logger.info(f"Live connection closed for user {connection.user_id} on scope {connection.scope_key}")
