"""Factory for creating RocketChat clients and channels (Factory Pattern)."""
import logging
from typing import Optional

import requests

from rocketchat_notifications.config.settings import Config
from rocketchat_notifications.infrastructure.channels.rocketchat_webhook_channel import RocketChatWebhookChannel
from rocketchat_notifications.infrastructure.clients.rocketchat_client import RocketChat


logger = logging.getLogger(__name__)


class RocketChatFactory:
    """
    Factory for building the client and channel from configuration.

    Centralizes wiring so host applications only provide a config class.
    """

    @staticmethod
    def create_client(
        config: Optional[type[Config]] = None,
        http_client: Optional[requests.Session] = None
    ) -> RocketChat:
        """
        Create a RocketChat client.

        Args:
            config: Configuration class (defaults to Config)
            http_client: HTTP session to use (defaults to a new requests.Session)

        Returns:
            RocketChat client instance
        """
        config = config or Config

        if not config.ROCKETCHAT_URL:
            logger.warning("ROCKETCHAT_URL not configured; messages cannot be delivered")

        client = RocketChat(
            http_client=http_client or requests.Session(),
            base_url=config.ROCKETCHAT_URL,
            token=config.ROCKETCHAT_TOKEN,
            user_id=config.ROCKETCHAT_USER_ID,
            default_channel=config.ROCKETCHAT_CHANNEL,
            default_emoji=config.ROCKETCHAT_EMOJI
        )
        logger.debug(f"RocketChat client created for {config.ROCKETCHAT_URL}")
        return client

    @staticmethod
    def create_channel(
        config: Optional[type[Config]] = None,
        http_client: Optional[requests.Session] = None
    ) -> RocketChatWebhookChannel:
        """
        Create a notification channel backed by a new client.

        Args:
            config: Configuration class (defaults to Config)
            http_client: HTTP session to use (defaults to a new requests.Session)

        Returns:
            RocketChatWebhookChannel instance
        """
        return RocketChatWebhookChannel(RocketChatFactory.create_client(config, http_client))
