"""Interfaces the host application implements to use the RocketChat channel.

A notification renders itself as a RocketChat message; a notifiable
(user, room, team...) may provide the channel messages are routed to.
"""
from abc import ABC, abstractmethod
from typing import Any

from rocketchat_notifications.domain.entities.message import RocketChatMessage


class IRocketChatNotification(ABC):
    """Notification that knows how to render itself for RocketChat."""

    @abstractmethod
    def to_rocket_chat(self, notifiable: Any) -> RocketChatMessage:
        """
        Build the message to deliver to a recipient.

        Args:
            notifiable: Recipient the notification is being sent to

        Returns:
            RocketChatMessage ready to be sent (routing may still be empty)
        """
        pass


class IRocketChatNotifiable(ABC):
    """Recipient that exposes routing information for RocketChat."""

    @abstractmethod
    def route_notification_for_rocket_chat(self) -> str:
        """
        Get the channel used when a message has no destination of its own.

        Returns:
            Channel, room or @user identifier, or an empty string
        """
        pass
