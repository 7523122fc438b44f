"""In-memory queue for tests and local mode.

Mimics the parts of SQS the worker relies on: a received message is hidden
for the visibility timeout and comes back with a new receipt handle unless it
is deleted first. Not durable; not shared between processes.
"""
from __future__ import annotations

import asyncio
import itertools
import time
import uuid
from dataclasses import dataclass, field
from typing import Any, Callable

from sqs_worker.app.domain.errors import QueueDeleteError, QueueReceiveError
from sqs_worker.app.domain.models import QueueMessage, ReceiveRequest


@dataclass
class _StoredMessage:
    message_id: str
    body: str
    message_attributes: dict[str, Any] = field(default_factory=dict)
    receive_count: int = 0
    visible_at: float = 0.0
    receipt_handle: str | None = None


class InMemoryQueueClient:
    def __init__(
        self,
        *,
        visibility_timeout_seconds: float = 30.0,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._visibility_timeout = visibility_timeout_seconds
        self._clock = clock
        self._messages: dict[str, _StoredMessage] = {}
        self._handle_counter = itertools.count(1)

    def send_message(self, body: str, message_attributes: dict[str, Any] | None = None) -> str:
        message_id = str(uuid.uuid4())
        self._messages[message_id] = _StoredMessage(
            message_id=message_id,
            body=body,
            message_attributes=dict(message_attributes or {}),
        )
        return message_id

    def __len__(self) -> int:
        return len(self._messages)

    async def receive_messages(self, request: ReceiveRequest) -> list[QueueMessage]:
        if not request.queue_url:
            raise QueueReceiveError("queue url is empty")
        await asyncio.sleep(0)
        batch = self._take_visible(request.max_number_of_messages)
        if batch or request.wait_time_seconds <= 0:
            return batch
        # Long poll: a short pause stands in for the server-side wait.
        await asyncio.sleep(min(request.wait_time_seconds, 0.05))
        return self._take_visible(request.max_number_of_messages)

    def _take_visible(self, limit: int) -> list[QueueMessage]:
        now = self._clock()
        batch: list[QueueMessage] = []
        for stored in self._messages.values():
            if len(batch) >= limit:
                break
            if stored.visible_at > now:
                continue
            stored.receive_count += 1
            stored.visible_at = now + self._visibility_timeout
            stored.receipt_handle = f"{stored.message_id}#{next(self._handle_counter)}"
            batch.append(
                QueueMessage(
                    message_id=stored.message_id,
                    receipt_handle=stored.receipt_handle,
                    body=stored.body,
                    attributes={"ApproximateReceiveCount": str(stored.receive_count)},
                    message_attributes=dict(stored.message_attributes),
                )
            )
        return batch

    async def delete_message(self, queue_url: str, receipt_handle: str) -> None:
        if not queue_url:
            raise QueueDeleteError("queue url is empty")
        message_id = receipt_handle.split("#", 1)[0]
        stored = self._messages.get(message_id)
        if stored is None or stored.receipt_handle != receipt_handle:
            # Stale handles are ignored, as SQS does for already-deleted messages.
            return
        del self._messages[message_id]
