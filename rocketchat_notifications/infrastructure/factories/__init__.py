"""Factories for creating client and channel instances (Factory Pattern)."""

from rocketchat_notifications.infrastructure.factories.client_factory import RocketChatFactory

__all__ = [
    "RocketChatFactory",
]
