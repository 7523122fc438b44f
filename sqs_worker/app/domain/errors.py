"""Worker exceptions.

`InvalidEventError` is raised by handlers to mark a message as permanently
unprocessable. The queue client errors are raised by queue adapters so the
application layer never depends on a particular SDK's exception types.
"""
from __future__ import annotations

from typing import Any


class InvalidEventError(Exception):
    """The message can never be processed; redelivering it will not help."""

    def __init__(self, event: str, reason: str) -> None:
        super().__init__(event, reason)
        self.event = event
        self.reason = reason

    def __str__(self) -> str:
        return f"[Invalid Event: {self.event}] {self.reason}"


def new_invalid_event_error(event: str, reason: str) -> InvalidEventError:
    return InvalidEventError(event, reason)


class MessageHandlingError(Exception):
    """Raised when a handler reports a failure that is not itself an exception."""

    def __init__(self, cause: Any) -> None:
        super().__init__(str(cause))
        self.cause = cause


class QueueClientError(Exception):
    """Base for queue client failures."""


class QueueReceiveError(QueueClientError):
    """Receiving messages from the queue failed."""


class QueueDeleteError(QueueClientError):
    """Deleting a message from the queue failed."""
