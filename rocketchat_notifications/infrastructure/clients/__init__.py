"""External API clients module."""
from rocketchat_notifications.infrastructure.clients.rocketchat_client import RocketChat

__all__ = [
    "RocketChat",
]
