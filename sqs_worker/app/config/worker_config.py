"""Per-poll-cycle worker configuration and its defaults."""
from __future__ import annotations

from dataclasses import dataclass, field

from loguru import logger

from sqs_worker.app.config.settings import Settings
from sqs_worker.app.constants import (
    DEFAULT_MAX_NUMBER_OF_MESSAGES,
    DEFAULT_WAIT_TIME_SECONDS,
    MAX_NUMBER_OF_MESSAGES,
    MAX_WAIT_TIME_SECONDS,
    MIN_NUMBER_OF_MESSAGES,
    InvalidEventPolicy,
)
from sqs_worker.app.core import SERVICE_NAME
from sqs_worker.app.ports.logger import Logger


def default_logger() -> Logger:
    return logger.bind(service_name=SERVICE_NAME)


@dataclass(frozen=True)
class WorkerConfig:
    """Immutable settings read by one poll cycle.

    queue_url: the queue to poll. Empty only in the fallback default, which the
        queue client will reject.
    max_number_of_messages: upper bound on messages per receive (1..10). SQS may
        return fewer.
    wait_time_seconds: long-poll duration; the receive returns sooner when a
        message arrives.
    """

    queue_url: str = ""
    max_number_of_messages: int = DEFAULT_MAX_NUMBER_OF_MESSAGES
    wait_time_seconds: int = DEFAULT_WAIT_TIME_SECONDS
    logger: Logger = field(default_factory=default_logger)
    invalid_event_policy: InvalidEventPolicy = InvalidEventPolicy.DELETE

    def __post_init__(self) -> None:
        if not MIN_NUMBER_OF_MESSAGES <= self.max_number_of_messages <= MAX_NUMBER_OF_MESSAGES:
            raise ValueError(
                f"max_number_of_messages must be between {MIN_NUMBER_OF_MESSAGES} and "
                f"{MAX_NUMBER_OF_MESSAGES}, got {self.max_number_of_messages}"
            )
        if not 0 <= self.wait_time_seconds <= MAX_WAIT_TIME_SECONDS:
            raise ValueError(
                f"wait_time_seconds must be between 0 and {MAX_WAIT_TIME_SECONDS}, "
                f"got {self.wait_time_seconds}"
            )

    @classmethod
    def from_settings(cls, settings: Settings, logger: Logger | None = None) -> WorkerConfig:
        return cls(
            queue_url=settings.queue_url,
            max_number_of_messages=settings.max_number_of_messages,
            wait_time_seconds=settings.wait_time_seconds,
            logger=logger or default_logger(),
            invalid_event_policy=settings.invalid_event_policy,
        )


def default_config_for_queue_url(url: str) -> WorkerConfig:
    return WorkerConfig(queue_url=url)


def default_config() -> WorkerConfig:
    """Fallback used when no configuration is supplied. A new value on every call."""
    return WorkerConfig()
