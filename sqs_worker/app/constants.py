"""Worker-level constants shared across modules."""
from __future__ import annotations

from enum import Enum

# SQS accepts 1..10 messages per ReceiveMessage call.
MIN_NUMBER_OF_MESSAGES = 1
MAX_NUMBER_OF_MESSAGES = 10

# SQS long polling waits at most 20 seconds.
MAX_WAIT_TIME_SECONDS = 20

DEFAULT_MAX_NUMBER_OF_MESSAGES = 10
DEFAULT_WAIT_TIME_SECONDS = 20

ALL_MESSAGE_ATTRIBUTES = "All"


class InvalidEventPolicy(str, Enum):
    """What to do with a message the handler rejected as an invalid event."""

    DELETE = "DELETE"
    RETAIN = "RETAIN"
