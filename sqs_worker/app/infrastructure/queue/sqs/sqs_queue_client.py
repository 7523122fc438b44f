"""Concrete queue client implementation using boto3's SQS client (injected where QueueClient is needed)."""
from __future__ import annotations

import asyncio
from typing import Any

from botocore.client import BaseClient
from botocore.exceptions import BotoCoreError, ClientError

from sqs_worker.app.domain.errors import QueueDeleteError, QueueReceiveError
from sqs_worker.app.domain.models import QueueMessage, ReceiveRequest
from sqs_worker.app.ports.queue_client import QueueClient


def _to_queue_message(raw: dict[str, Any]) -> QueueMessage:
    return QueueMessage(
        message_id=raw["MessageId"],
        receipt_handle=raw["ReceiptHandle"],
        body=raw.get("Body", ""),
        attributes=dict(raw.get("Attributes", {})),
        message_attributes=dict(raw.get("MessageAttributes", {})),
    )


class SQSQueueClient(QueueClient):
    """QueueClient implementation over a boto3 `sqs` client.

    boto3 is blocking; calls run in a worker thread so the event loop keeps
    serving the rest of the batch while a receive long-polls or a delete is in
    flight. boto3 clients are thread-safe.
    """

    def __init__(self, client: BaseClient) -> None:
        self._client = client

    async def receive_messages(self, request: ReceiveRequest) -> list[QueueMessage]:
        try:
            response = await asyncio.to_thread(
                self._client.receive_message,
                QueueUrl=request.queue_url,
                MaxNumberOfMessages=request.max_number_of_messages,
                MessageAttributeNames=list(request.message_attribute_names),
                WaitTimeSeconds=request.wait_time_seconds,
            )
        except (ClientError, BotoCoreError) as exc:
            raise QueueReceiveError(f"receive failed for {request.queue_url}: {exc}") from exc
        return [_to_queue_message(raw) for raw in response.get("Messages", [])]

    async def delete_message(self, queue_url: str, receipt_handle: str) -> None:
        try:
            await asyncio.to_thread(
                self._client.delete_message,
                QueueUrl=queue_url,
                ReceiptHandle=receipt_handle,
            )
        except (ClientError, BotoCoreError) as exc:
            raise QueueDeleteError(f"delete failed for {queue_url}: {exc}") from exc
