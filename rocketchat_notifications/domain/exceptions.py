"""Errors raised while delivering RocketChat notifications."""


class RocketChatError(Exception):
    """Base class for every error raised by this package."""


class SendError(RocketChatError):
    """The client could not send a message."""


class MissingChannel(SendError):
    """The message has no destination channel at send time."""

    def __init__(self, message: str = "RocketChat message channel is missing."):
        super().__init__(message)


class MissingFrom(SendError):
    """The message has no sender identity at send time."""

    def __init__(self, message: str = "RocketChat message sender is missing."):
        super().__init__(message)


class TransportFailure(SendError):
    """The HTTP exchange with the RocketChat server raised an error."""

    def __init__(self, cause: str):
        self.cause = cause
        super().__init__(f"RocketChat responded with an error: {cause}")


class CouldNotSendNotification(RocketChatError):
    """
    Single error type the notification channel surfaces to the host.

    The original failure is kept as ``__cause__`` and its text as the message.
    """

    @classmethod
    def from_send_error(cls, error: SendError) -> "CouldNotSendNotification":
        return cls(str(error))

    @classmethod
    def missing_notification_method(cls, notification: object) -> "CouldNotSendNotification":
        return cls(
            f"Notification {type(notification).__name__} cannot be rendered for RocketChat: "
            f"it does not implement to_rocket_chat()."
        )
