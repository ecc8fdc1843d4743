from typing import TYPE_CHECKING
from ...infrastructure.notifications.subscription_registry import SubscriptionRegistry

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class NotificationProvider:
    """Live push provider - one subscription registry per process"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        container.register_singleton(SubscriptionRegistry, SubscriptionRegistry())
