"""Notifications infrastructure for live new-tag events"""

from .push_channel import PushChannel, SseChannel, format_sse_frame
from .notification_service import NotificationService
from .subscription_registry import SubscriptionRegistry

__all__ = [
    "PushChannel",
    "SseChannel",
    "format_sse_frame",
    "NotificationService",
    "SubscriptionRegistry",
]
