"""Port: remote queue client. Implementations live in infrastructure."""
from __future__ import annotations

from typing import Protocol

from sqs_worker.app.domain.models import QueueMessage, ReceiveRequest


class QueueClient(Protocol):
    async def receive_messages(self, request: ReceiveRequest) -> list[QueueMessage]:
        """Long-poll for up to `request.max_number_of_messages` messages. Raises QueueReceiveError."""
        ...

    async def delete_message(self, queue_url: str, receipt_handle: str) -> None:
        """Acknowledge one delivery. Raises QueueDeleteError."""
        ...
