"""RocketChat attachment entity."""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional, Union


@dataclass
class RocketChatAttachment:
    """
    Rich attachment rendered below a RocketChat message.

    Built with chained setters; nothing is validated. Empty fields are
    left out of the serialized form.
    """

    title: str = ""
    title_link: str = ""
    title_link_download: bool = False
    text: str = ""
    color: str = ""
    thumb_url: str = ""
    image_url: str = ""
    audio_url: str = ""
    video_url: str = ""
    author_name: str = ""
    author_link: str = ""
    author_icon: str = ""
    message_link: str = ""
    collapsed: bool = False
    timestamp: Optional[Union[datetime, str]] = None
    fields: List[Dict[str, Any]] = field(default_factory=list)

    @classmethod
    def create(cls, title: str = "") -> "RocketChatAttachment":
        return cls(title=title)

    def with_title(self, title: str, link: str = "", download: bool = False) -> "RocketChatAttachment":
        """Set the title, optionally linked and downloadable."""
        self.title = title
        self.title_link = link
        self.title_link_download = download
        return self

    def with_text(self, text: str) -> "RocketChatAttachment":
        self.text = text
        return self

    def with_color(self, color: str) -> "RocketChatAttachment":
        self.color = color
        return self

    def with_thumbnail(self, url: str) -> "RocketChatAttachment":
        self.thumb_url = url
        return self

    def with_image(self, url: str) -> "RocketChatAttachment":
        self.image_url = url
        return self

    def with_audio(self, url: str) -> "RocketChatAttachment":
        self.audio_url = url
        return self

    def with_video(self, url: str) -> "RocketChatAttachment":
        self.video_url = url
        return self

    def with_author(self, name: str, link: str = "", icon: str = "") -> "RocketChatAttachment":
        """Set the author line shown above the attachment."""
        self.author_name = name
        self.author_link = link
        self.author_icon = icon
        return self

    def with_message_link(self, url: str) -> "RocketChatAttachment":
        self.message_link = url
        return self

    def collapse(self, collapsed: bool = True) -> "RocketChatAttachment":
        self.collapsed = collapsed
        return self

    def at(self, timestamp: Union[datetime, str]) -> "RocketChatAttachment":
        """Set the attachment timestamp (datetime or preformatted string)."""
        self.timestamp = timestamp
        return self

    def add_field(self, title: str, value: str, short: bool = False) -> "RocketChatAttachment":
        """Append one title/value field, keeping insertion order."""
        self.fields.append({"short": short, "title": title, "value": value})
        return self

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize to the attachment object of the chat.postMessage API.

        Returns:
            Dictionary with only the fields that are set
        """
        timestamp = self.timestamp
        if isinstance(timestamp, datetime):
            timestamp = timestamp.isoformat()

        data = {
            "title": self.title,
            "title_link": self.title_link,
            "title_link_download": self.title_link_download,
            "text": self.text,
            "color": self.color,
            "thumb_url": self.thumb_url,
            "image_url": self.image_url,
            "audio_url": self.audio_url,
            "video_url": self.video_url,
            "author_name": self.author_name,
            "author_link": self.author_link,
            "author_icon": self.author_icon,
            "message_link": self.message_link,
            "collapsed": self.collapsed,
            "ts": timestamp,
            "fields": list(self.fields),
        }
        return {key: value for key, value in data.items() if value}
