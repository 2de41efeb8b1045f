"""Shared fixtures for the RocketChat channel tests."""

from unittest.mock import MagicMock

import pytest
import requests

from rocketchat_notifications import (
    IRocketChatNotifiable,
    IRocketChatNotification,
    RocketChat,
    RocketChatMessage,
)

API_BASE_URL = "http://localhost:3000"
TOKEN = ":token"
USER_ID = ":user_id"
CHANNEL = ":channel"


class RoutedUser(IRocketChatNotifiable):
    """Recipient with a fixed RocketChat route."""

    def __init__(self, route: str = ""):
        self.route = route

    def route_notification_for_rocket_chat(self) -> str:
        return self.route


class MessageNotification(IRocketChatNotification):
    """Notification returning a prebuilt message."""

    def __init__(self, message: RocketChatMessage):
        self.message = message
        self.rendered_for = []

    def to_rocket_chat(self, notifiable) -> RocketChatMessage:
        self.rendered_for.append(notifiable)
        return self.message


def ok_response(status_code: int = 200) -> requests.Response:
    response = requests.Response()
    response.status_code = status_code
    response.url = f"{API_BASE_URL}/api/v1/chat.postMessage"
    return response


@pytest.fixture
def http_client():
    """requests.Session double returning HTTP 200."""
    client = MagicMock(spec=requests.Session)
    client.post.return_value = ok_response()
    return client


@pytest.fixture
def rocket_chat(http_client):
    return RocketChat(http_client, API_BASE_URL, TOKEN, USER_ID, CHANNEL)


@pytest.fixture
def expected_headers():
    return {
        "X-Auth-Token": TOKEN,
        "X-User-Id": USER_ID,
        "Rocket-Channel-Id": CHANNEL,
        "Content-Type": "application/json",
    }


@pytest.fixture
def make_response():
    return ok_response


@pytest.fixture
def make_notification():
    return MessageNotification


@pytest.fixture
def make_user():
    return RoutedUser
