"""
Poll loop: receive a batch, dispatch it, repeat.

The loop has no terminal state. A failed receive is logged and retried
through the retry policy (immediately by default) with no attempt limit. A
batch is fully drained before the next receive, so at most one batch of
messages is in flight.

A new configuration set with `update_config` takes effect at the start of the
next cycle; each cycle works on a single snapshot.
"""
from __future__ import annotations

import asyncio

from sqs_worker.app.application.dispatcher import BatchDispatcher
from sqs_worker.app.application.message_processor import MessageProcessor
from sqs_worker.app.application.retry_policy import ImmediateRetry, RetryPolicy
from sqs_worker.app.config.worker_config import WorkerConfig, default_config
from sqs_worker.app.domain.models import ReceiveRequest
from sqs_worker.app.ports.message_handler import MessageHandler
from sqs_worker.app.ports.queue_client import QueueClient


class Poller:
    def __init__(
        self,
        config: WorkerConfig | None,
        queue_client: QueueClient,
        handler: MessageHandler,
        *,
        retry_policy: RetryPolicy | None = None,
    ) -> None:
        self._config = config if config is not None else default_config()
        self._queue_client = queue_client
        self._handler = handler
        self._retry_policy = retry_policy or ImmediateRetry()
        self._consecutive_failures = 0

    @property
    def config(self) -> WorkerConfig:
        return self._config

    def update_config(self, config: WorkerConfig) -> None:
        self._config = config

    async def poll_once(self) -> int:
        """Run one cycle. Returns the number of messages dispatched."""
        config = self._config
        config.logger.debug("worker: Start Polling")
        request = ReceiveRequest(
            queue_url=config.queue_url,
            max_number_of_messages=config.max_number_of_messages,
            wait_time_seconds=config.wait_time_seconds,
        )
        try:
            messages = await self._queue_client.receive_messages(request)
        except Exception as exc:
            self._consecutive_failures += 1
            config.logger.error(f"worker: receive failed: {exc}")
            await self._retry_policy.wait(self._consecutive_failures)
            return 0

        self._consecutive_failures = 0
        if not messages:
            return 0

        config.logger.info(f"worker: Received {len(messages)} messages")
        processor = MessageProcessor(config, self._queue_client, self._handler)
        await BatchDispatcher(processor, config.logger).dispatch(messages)
        return len(messages)

    async def run_forever(self, stop: asyncio.Event | None = None) -> None:
        """Poll until `stop` is set. Without `stop` this never returns."""
        while stop is None or not stop.is_set():
            await self.poll_once()
