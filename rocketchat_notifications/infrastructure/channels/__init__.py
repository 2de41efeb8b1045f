"""Notification channels - concrete implementations."""

from rocketchat_notifications.infrastructure.channels.rocketchat_webhook_channel import RocketChatWebhookChannel

__all__ = [
    "RocketChatWebhookChannel",
]
