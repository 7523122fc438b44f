"""Queue client factory: selects implementation from config. Only place that imports concrete clients."""
from __future__ import annotations

import boto3

from sqs_worker.app.config.settings import Settings
from sqs_worker.app.infrastructure.queue.inmemory.in_memory_queue_client import InMemoryQueueClient
from sqs_worker.app.infrastructure.queue.sqs.sqs_queue_client import SQSQueueClient
from sqs_worker.app.ports.queue_client import QueueClient


def create_queue_client(settings: Settings) -> QueueClient:
    backend = settings.queue_backend.strip().lower()

    if backend == "sqs":
        client = boto3.client(
            "sqs",
            region_name=settings.aws_region,
            endpoint_url=settings.sqs_endpoint_url,
        )
        return SQSQueueClient(client)

    if backend == "inmemory":
        return InMemoryQueueClient(
            visibility_timeout_seconds=settings.inmemory_visibility_timeout_seconds,
        )

    raise ValueError(f"Unsupported queue backend: {backend}")
