from sqs_worker.app.application.message_processor import MessageProcessor, process_message
from sqs_worker.app.application.poller import Poller
from sqs_worker.app.application.retry_policy import ExponentialBackoffRetry, ImmediateRetry, RetryPolicy
from sqs_worker.app.config.worker_config import (
    WorkerConfig,
    default_config,
    default_config_for_queue_url,
)
from sqs_worker.app.constants import InvalidEventPolicy
from sqs_worker.app.domain.errors import (
    InvalidEventError,
    MessageHandlingError,
    QueueClientError,
    QueueDeleteError,
    QueueReceiveError,
    new_invalid_event_error,
)
from sqs_worker.app.domain.handler_result import HandlerOutcome, HandlerResult
from sqs_worker.app.domain.models import QueueMessage
from sqs_worker.app.ports.logger import Logger
from sqs_worker.app.ports.message_handler import HandlerFunc, MessageHandler
from sqs_worker.app.ports.queue_client import QueueClient
from sqs_worker.app.worker import run, start

__all__ = [
    "ExponentialBackoffRetry",
    "HandlerFunc",
    "HandlerOutcome",
    "HandlerResult",
    "ImmediateRetry",
    "InvalidEventError",
    "InvalidEventPolicy",
    "Logger",
    "MessageHandler",
    "MessageHandlingError",
    "MessageProcessor",
    "Poller",
    "QueueClient",
    "QueueClientError",
    "QueueDeleteError",
    "QueueMessage",
    "QueueReceiveError",
    "RetryPolicy",
    "WorkerConfig",
    "default_config",
    "default_config_for_queue_url",
    "new_invalid_event_error",
    "process_message",
    "run",
    "start",
]
