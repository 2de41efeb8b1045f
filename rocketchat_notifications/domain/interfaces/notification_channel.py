"""Interface for notification channels (Strategy Pattern)."""
from abc import ABC, abstractmethod
from typing import Any


class INotificationChannel(ABC):
    """
    Delivery channel invoked by the host dispatcher once per recipient.

    Implementations raise CouldNotSendNotification when delivery fails.
    """

    @abstractmethod
    def send(self, notifiable: Any, notification: Any) -> None:
        """
        Deliver a notification to one recipient.

        Args:
            notifiable: Recipient of the notification
            notification: Notification to deliver
        """
        pass
