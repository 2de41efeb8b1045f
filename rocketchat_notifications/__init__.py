"""RocketChat notification channel.

Typical use from a host application::

    channel = RocketChatFactory.create_channel()
    channel.send(user, DeploymentFinished())

where ``DeploymentFinished`` implements ``IRocketChatNotification``.
"""

from rocketchat_notifications.domain.entities import RocketChatAttachment, RocketChatMessage
from rocketchat_notifications.domain.exceptions import (
    CouldNotSendNotification,
    MissingChannel,
    MissingFrom,
    RocketChatError,
    SendError,
    TransportFailure,
)
from rocketchat_notifications.domain.interfaces import (
    INotificationChannel,
    IRocketChatNotifiable,
    IRocketChatNotification,
)
from rocketchat_notifications.infrastructure.channels import RocketChatWebhookChannel
from rocketchat_notifications.infrastructure.clients import RocketChat
from rocketchat_notifications.infrastructure.factories import RocketChatFactory

__all__ = [
    "CouldNotSendNotification",
    "INotificationChannel",
    "IRocketChatNotifiable",
    "IRocketChatNotification",
    "MissingChannel",
    "MissingFrom",
    "RocketChat",
    "RocketChatAttachment",
    "RocketChatError",
    "RocketChatFactory",
    "RocketChatMessage",
    "RocketChatWebhookChannel",
    "SendError",
    "TransportFailure",
]
