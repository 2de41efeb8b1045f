"""Domain entities."""

from rocketchat_notifications.domain.entities.attachment import RocketChatAttachment
from rocketchat_notifications.domain.entities.message import RocketChatMessage

__all__ = [
    "RocketChatAttachment",
    "RocketChatMessage",
]
