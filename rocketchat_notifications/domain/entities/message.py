"""RocketChat message entity (Builder Pattern)."""
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Union

from rocketchat_notifications.domain.entities.attachment import RocketChatAttachment


Attachment = Union[RocketChatAttachment, Dict[str, Any]]


@dataclass
class RocketChatMessage:
    """
    Domain entity representing one outgoing RocketChat message.

    Setters return the same instance so a message can be assembled across
    several call sites. Nothing is validated here: missing routing is only
    detected when the message is sent.
    """

    text: str = ""
    attachments: List[Attachment] = field(default_factory=list)
    channel: str = ""
    sender: str = ""
    icon_emoji: str = ""
    avatar: str = ""
    alias: str = ""

    @classmethod
    def create(cls, text: str = "") -> "RocketChatMessage":
        """Start a message with the given body and no routing."""
        return cls(text=text)

    def content(self, text: str) -> "RocketChatMessage":
        self.text = text
        return self

    def to(self, channel: str) -> "RocketChatMessage":
        """Set the destination channel, room or @user."""
        self.channel = channel
        return self

    def from_(self, identity: str) -> "RocketChatMessage":
        """Set the sender identity."""
        self.sender = identity
        return self

    def icon(self, emoji: str) -> "RocketChatMessage":
        self.icon_emoji = emoji
        return self

    def avatar_url(self, url: str) -> "RocketChatMessage":
        self.avatar = url
        return self

    def as_alias(self, alias: str) -> "RocketChatMessage":
        """Display the message under another name."""
        self.alias = alias
        return self

    def attach(self, attachment: Attachment) -> "RocketChatMessage":
        """Append one attachment (a RocketChatAttachment or a raw dict)."""
        self.attachments.append(attachment)
        return self

    def attachments_from(self, attachments: Iterable[Attachment]) -> "RocketChatMessage":
        for attachment in attachments:
            self.attach(attachment)
        return self

    def clear_attachments(self) -> "RocketChatMessage":
        self.attachments = []
        return self

    def to_payload(self) -> Dict[str, Any]:
        """
        Build the JSON body for chat.postMessage.

        Returns:
            Dictionary with text and channel, plus the optional fields that are set
        """
        payload: Dict[str, Any] = {
            "text": self.text,
            "channel": self.channel,
        }

        if self.attachments:
            payload["attachments"] = [
                attachment.to_dict() if isinstance(attachment, RocketChatAttachment) else attachment
                for attachment in self.attachments
            ]
        if self.icon_emoji:
            payload["icon_emoji"] = self.icon_emoji
        if self.avatar:
            payload["avatar"] = self.avatar
        if self.alias:
            payload["alias"] = self.alias

        return payload
