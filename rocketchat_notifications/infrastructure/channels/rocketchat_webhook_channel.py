"""RocketChat notification channel for host notification dispatchers."""
import logging
from typing import Any

from rocketchat_notifications.domain.entities.message import RocketChatMessage
from rocketchat_notifications.domain.exceptions import CouldNotSendNotification, SendError
from rocketchat_notifications.domain.interfaces.notification import (
    IRocketChatNotifiable,
    IRocketChatNotification,
)
from rocketchat_notifications.domain.interfaces.notification_channel import INotificationChannel
from rocketchat_notifications.infrastructure.clients.rocketchat_client import RocketChat


logger = logging.getLogger(__name__)


class RocketChatWebhookChannel(INotificationChannel):
    """
    Notification channel delivering messages through the RocketChat client.

    The host calls send() once per recipient. Every client failure is
    reported as CouldNotSendNotification.
    """

    def __init__(self, rocket_chat: RocketChat):
        """
        Initialize channel with its client (Dependency Injection).

        Args:
            rocket_chat: Configured RocketChat client
        """
        self.rocket_chat = rocket_chat

    def send(self, notifiable: Any, notification: Any) -> None:
        """
        Send the notification to one recipient.

        Args:
            notifiable: Recipient; may implement IRocketChatNotifiable
            notification: Notification implementing IRocketChatNotification

        Raises:
            CouldNotSendNotification: If the message could not be delivered
        """
        if not isinstance(notification, IRocketChatNotification):
            raise CouldNotSendNotification.missing_notification_method(notification)

        message = notification.to_rocket_chat(notifiable)
        self._resolve_channel(message, notifiable)

        try:
            self.rocket_chat.send(message)
        except SendError as e:
            logger.warning(
                f"RocketChat notification {type(notification).__name__} was not delivered: {e}"
            )
            raise CouldNotSendNotification.from_send_error(e) from e

    def _resolve_channel(self, message: RocketChatMessage, notifiable: Any) -> None:
        """Fill in the destination from the recipient, then the client default."""
        if message.channel:
            return

        if isinstance(notifiable, IRocketChatNotifiable):
            routed = notifiable.route_notification_for_rocket_chat()
            if routed:
                message.to(routed)
                return

        if self.rocket_chat.default_channel:
            message.to(self.rocket_chat.default_channel)
