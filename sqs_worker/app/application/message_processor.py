from __future__ import annotations

from sqs_worker.app.config.worker_config import WorkerConfig
from sqs_worker.app.constants import InvalidEventPolicy
from sqs_worker.app.domain.errors import MessageHandlingError
from sqs_worker.app.domain.handler_result import HandlerOutcome, HandlerResult
from sqs_worker.app.domain.models import QueueMessage
from sqs_worker.app.ports.message_handler import MessageHandler, as_handler
from sqs_worker.app.ports.queue_client import QueueClient


class MessageProcessor:
    """
    Runs the handler for one message and acknowledges it when appropriate.

    SUCCESS deletes the message. INVALID_EVENT is logged and, under the DELETE
    policy, deleted as well: it would fail the same way on every redelivery.
    Under RETAIN it stays in the queue for the queue's redrive policy. FAILURE
    re-raises the handler's error and leaves the message for redelivery after the
    visibility timeout.

    A failed delete is raised too; the message will be delivered again even
    though the handler succeeded, so handlers must tolerate duplicates.
    """

    def __init__(
        self,
        config: WorkerConfig,
        queue_client: QueueClient,
        handler: MessageHandler,
    ) -> None:
        self._config = config
        self._queue_client = queue_client
        self._handler = as_handler(handler)

    async def process(self, message: QueueMessage) -> None:
        result = await self._invoke_handler(message)

        if result.outcome == HandlerOutcome.FAILURE:
            if isinstance(result.cause, Exception):
                raise result.cause
            raise MessageHandlingError(result.cause)

        # Only INVALID_EVENT is left once failures have been raised.
        if not result.ok:
            self._config.logger.error(str(result.as_invalid_event_error()))
            if self._config.invalid_event_policy == InvalidEventPolicy.RETAIN:
                return

        await self._queue_client.delete_message(self._config.queue_url, message.receipt_handle)
        self._config.logger.debug(f"worker: deleted message from queue: {message.receipt_handle}")

    async def _invoke_handler(self, message: QueueMessage) -> HandlerResult:
        try:
            value = await self._handler.handle_message(message)
        except Exception as exc:
            return HandlerResult.classify(exc)
        return HandlerResult.classify(value)


async def process_message(
    config: WorkerConfig,
    queue_client: QueueClient,
    message: QueueMessage,
    handler: MessageHandler,
) -> None:
    await MessageProcessor(config, queue_client, handler).process(message)
