"""Domain interfaces following Dependency Inversion Principle."""

from rocketchat_notifications.domain.interfaces.notification import (
    IRocketChatNotifiable,
    IRocketChatNotification,
)
from rocketchat_notifications.domain.interfaces.notification_channel import INotificationChannel

__all__ = [
    "INotificationChannel",
    "IRocketChatNotifiable",
    "IRocketChatNotification",
]
