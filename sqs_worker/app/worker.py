"""Public entry points: block the caller and poll the queue forever."""
from __future__ import annotations

import asyncio
from typing import Any, Callable

from sqs_worker.app.application.poller import Poller
from sqs_worker.app.application.retry_policy import RetryPolicy
from sqs_worker.app.config.worker_config import WorkerConfig
from sqs_worker.app.domain.models import QueueMessage
from sqs_worker.app.ports.message_handler import MessageHandler, as_handler
from sqs_worker.app.ports.queue_client import QueueClient


async def run(
    config: WorkerConfig | None,
    queue_client: QueueClient,
    handler: MessageHandler | Callable[[QueueMessage], Any],
    *,
    retry_policy: RetryPolicy | None = None,
    stop: asyncio.Event | None = None,
) -> None:
    """Poll inside an already running event loop. Returns only once `stop` is set."""
    poller = Poller(config, queue_client, as_handler(handler), retry_policy=retry_policy)
    await poller.run_forever(stop)


def start(
    config: WorkerConfig | None,
    queue_client: QueueClient,
    handler: MessageHandler | Callable[[QueueMessage], Any],
    *,
    retry_policy: RetryPolicy | None = None,
) -> None:
    """Poll until the process is stopped. Run it on a dedicated thread or as the main program."""
    asyncio.run(run(config, queue_client, handler, retry_policy=retry_policy))
