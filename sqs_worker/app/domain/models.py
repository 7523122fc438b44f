"""Domain models."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from sqs_worker.app.constants import ALL_MESSAGE_ATTRIBUTES


@dataclass(frozen=True)
class QueueMessage:
    """One delivery of a queue message. `receipt_handle` identifies the delivery, not the message."""

    message_id: str
    receipt_handle: str
    body: str
    attributes: dict[str, str] = field(default_factory=dict)
    message_attributes: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class ReceiveRequest:
    """Parameters of a single receive call."""

    queue_url: str
    max_number_of_messages: int
    wait_time_seconds: int
    message_attribute_names: tuple[str, ...] = (ALL_MESSAGE_ATTRIBUTES,)


@dataclass(frozen=True)
class BatchReport:
    """Outcome counts of one dispatched batch."""

    succeeded: int = 0
    failed: int = 0

    @property
    def total(self) -> int:
        return self.succeeded + self.failed
