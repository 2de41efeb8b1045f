"""RocketChat REST API client."""
import logging
from typing import Any, Dict

import requests

from rocketchat_notifications.domain.entities.message import RocketChatMessage
from rocketchat_notifications.domain.exceptions import MissingChannel, MissingFrom, TransportFailure
from rocketchat_notifications.infrastructure.metrics import messages_sent_total


logger = logging.getLogger(__name__)

POST_MESSAGE_ENDPOINT = "api/v1/chat.postMessage"


class RocketChat:
    """
    Client for the RocketChat chat.postMessage endpoint.

    Holds the connection parameters of one RocketChat server and sends
    one message per call. Empty parameters are accepted here; problems
    only surface when a message is sent.
    """

    def __init__(
        self,
        http_client: requests.Session,
        base_url: str,
        token: str,
        user_id: str,
        default_channel: str = "",
        default_emoji: str = ""
    ):
        """
        Initialize the RocketChat client.

        Args:
            http_client: HTTP session used to issue requests
            base_url: Server URL, e.g. https://chat.example.com
            token: Personal access token sent as X-Auth-Token
            user_id: Id of the token owner sent as X-User-Id
            default_channel: Channel used when a notification resolves none
            default_emoji: Emoji applied to messages without their own icon
        """
        self._http_client = http_client
        self._base_url = base_url
        self._token = token
        self._user_id = user_id
        self._default_channel = default_channel
        self._default_emoji = default_emoji

    @property
    def token(self) -> str:
        return self._token

    @property
    def default_channel(self) -> str:
        return self._default_channel

    @property
    def default_emoji(self) -> str:
        return self._default_emoji

    def send(self, message: RocketChatMessage) -> None:
        """
        Send a message to RocketChat.

        Args:
            message: Message with at least a channel and a sender

        Raises:
            MissingChannel: If the message has no channel (nothing is sent)
            MissingFrom: If the message has no sender (nothing is sent)
            TransportFailure: If the HTTP request raised
        """
        if not message.channel:
            messages_sent_total.labels(status="missing_channel").inc()
            raise MissingChannel()
        if not message.sender:
            messages_sent_total.labels(status="missing_from").inc()
            raise MissingFrom()

        url = f"{self._base_url.rstrip('/')}/{POST_MESSAGE_ENDPOINT}"
        logger.debug(f"POST {url} (channel={message.channel})")

        try:
            response = self._http_client.post(
                url,
                headers=self._get_headers(message.channel),
                json=self._build_payload(message)
            )
            response.raise_for_status()
        except Exception as e:
            messages_sent_total.labels(status="transport_error").inc()
            logger.error(f"Failed to send RocketChat message to {message.channel}: {e}")
            raise TransportFailure(str(e)) from e

        messages_sent_total.labels(status="success").inc()
        logger.info(f"RocketChat message sent to {message.channel}")

    def _get_headers(self, channel: str) -> Dict[str, str]:
        """Get headers for API requests."""
        return {
            "X-Auth-Token": self._token,
            "X-User-Id": self._user_id,
            "Rocket-Channel-Id": channel,
            "Content-Type": "application/json",
        }

    def _build_payload(self, message: RocketChatMessage) -> Dict[str, Any]:
        payload = message.to_payload()
        if self._default_emoji and "icon_emoji" not in payload:
            payload["icon_emoji"] = self._default_emoji
        return payload
